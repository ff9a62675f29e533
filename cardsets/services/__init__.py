"""Domain services enforcing the set/card/favorite/learning invariants."""

from cardsets.services.card_service import CardService, sample_without_replacement
from cardsets.services.favorite_service import FavoriteService
from cardsets.services.learning_service import LearningService, compute_score
from cardsets.services.set_service import SetService

__all__ = [
    "CardService",
    "FavoriteService",
    "LearningService",
    "SetService",
    "compute_score",
    "sample_without_replacement",
]
