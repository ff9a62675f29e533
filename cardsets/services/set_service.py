"""Set lifecycle: creation, lookup, public listing and cascading delete."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.exceptions import PartialCascadeError, SetNotFoundError, StoreError
from cardsets.models import CardSet, UserSet
from cardsets.repository import Repository

logger = logging.getLogger(__name__)

PUBLIC_SET_COLUMNS = ("id", "title", "description", "cards")


class SetService:
    def __init__(self, session: AsyncSession) -> None:
        self.sets = Repository(session, CardSet)
        self.user_sets = Repository(session, UserSet)

    async def list_public_sets(self) -> list[dict[str, Any]]:
        """Return the summary columns of every non-private set."""
        return await self.sets.select(PUBLIC_SET_COLUMNS, private=False)

    async def create_set(
        self,
        title: str,
        description: str = "",
        private: bool = False,
        creator: str | None = None,
    ) -> CardSet:
        card_set = await self.sets.create(
            title=title,
            description=description,
            private=private,
            creator=creator,
        )
        logger.info("Created set %s (%r, private=%s)", card_set.id, title, private)
        return card_set

    async def get_set(self, set_id: str) -> CardSet:
        card_set = await self.sets.read(set_id)
        if card_set is None:
            raise SetNotFoundError(set_id)
        return card_set

    async def delete_set(self, set_id: str) -> dict[str, bool]:
        """Delete a set and every favorite link pointing at it.

        Links go first: a failure between the two steps leaves a set without
        favorites rather than favorites pointing at a missing set. Cards and
        learning records of the set are left in place.
        """
        links = await self.user_sets.filter(set=set_id)
        link_ids = [link.id for link in links]
        if link_ids:
            await self.user_sets.delete(link_ids)

        try:
            deleted = await self.sets.delete(set_id)
        except StoreError as e:
            if link_ids:
                raise PartialCascadeError("delete_set", link_ids, e) from e
            raise

        logger.info("Deleted set %s (found=%s) and %d favorite links", set_id, bool(deleted), len(link_ids))
        return {"success": True}
