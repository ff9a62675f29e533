"""SQLAlchemy ORM models for the cardsets database."""

from cardsets.models.base import Base, new_record_id
from cardsets.models.card import Card
from cardsets.models.card_set import CardSet
from cardsets.models.learning import Learning
from cardsets.models.user_set import UserSet

__all__ = ["Base", "Card", "CardSet", "Learning", "UserSet", "new_record_id"]
