"""User favorites (bookmarked sets)."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.models import UserSet
from cardsets.repository import Repository

logger = logging.getLogger(__name__)


class FavoriteService:
    def __init__(self, session: AsyncSession) -> None:
        self.user_sets = Repository(session, UserSet)

    async def add_favorite(self, user: str, set_id: str) -> UserSet:
        """Bookmark a set for a user. No duplicate check is made."""
        link = await self.user_sets.create(user=user, set=set_id)
        logger.info("User %s favorited set %s (link %s)", user, set_id, link.id)
        return link

    async def list_favorites(self, user: str) -> list[UserSet]:
        """Return the user's favorite links with the referenced set loaded."""
        return await self.user_sets.filter(expand=("set_record",), user=str(user))
