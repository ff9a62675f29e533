"""Flashcard sets backend: sets, cards, favorites and learning records."""

__version__ = "1.0.0"
