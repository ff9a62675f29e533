"""Card creation, listing and random study sampling.

The card service is the only writer of ``CardSet.cards``: every card it
creates is followed by an atomic +1 on the owning set.
"""

import logging
import random
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.exceptions import PartialCascadeError, StoreError
from cardsets.models import Card, CardSet
from cardsets.repository import Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")

STUDY_COLUMNS = ("question", "answer")


def sample_without_replacement(
    items: Sequence[T],
    limit: int,
    rng: random.Random | None = None,
) -> list[T]:
    """Draw ``min(limit, len(items))`` items uniformly at random, in random order.

    Args:
        items: Population to draw from.
        limit: Maximum number of items to return. Must be a non-negative int.
        rng: Random source (defaults to the module-level generator).

    Raises:
        ValueError: If ``limit`` is negative or not an integer.
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError(f"limit must be an integer, got {limit!r}")
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    sample = rng.sample if rng is not None else random.sample
    return sample(list(items), min(limit, len(items)))


class CardService:
    def __init__(self, session: AsyncSession, rng: random.Random | None = None) -> None:
        self.cards = Repository(session, Card)
        self.sets = Repository(session, CardSet)
        self.rng = rng

    async def create_card(self, set_id: str, question: str, answer: str) -> Card:
        """Create a card and bump its set's card counter.

        Raises:
            StoreError: The card could not be created; nothing was written.
            PartialCascadeError: The card exists but the counter was not bumped.
        """
        card = await self.cards.create(set=set_id, question=question, answer=answer)
        # read before the next call: a failed store call expires loaded records
        card_id = card.id

        try:
            updated = await self.sets.increment(set_id, cards=1)
        except StoreError as e:
            raise PartialCascadeError("create_card", [card_id], e) from e

        if not updated:
            logger.warning("Card %s references missing set %s; no counter updated", card_id, set_id)
        else:
            logger.info("Created card %s in set %s", card_id, set_id)
        return card

    async def list_cards(self, set_id: str) -> list[Card]:
        return await self.cards.filter(set=set_id)

    async def sample_cards(self, set_id: str, limit: int) -> list[dict[str, Any]]:
        """Return up to ``limit`` random question/answer pairs from a set."""
        cards = await self.cards.select(STUDY_COLUMNS, set=set_id)
        return sample_without_replacement(cards, limit, self.rng)
