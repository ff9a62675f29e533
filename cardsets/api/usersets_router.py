"""API routes for user favorites."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.api.schemas import FavoriteCreateRequest, FavoriteResponse, FavoriteSetResponse, SetResponse
from cardsets.database import get_session
from cardsets.services.favorite_service import FavoriteService

router = APIRouter(prefix="/usersets", tags=["favorites"])


@router.post("", response_model=FavoriteResponse)
async def add_favorite(
    request: FavoriteCreateRequest,
    db: AsyncSession = Depends(get_session),
) -> FavoriteResponse:
    """Add a set to a user's favorites."""
    link = await FavoriteService(db).add_favorite(request.user, request.set)
    return FavoriteResponse.model_validate(link)


@router.get("", response_model=list[FavoriteSetResponse])
async def list_favorites(
    user: str = Query(...),
    db: AsyncSession = Depends(get_session),
) -> list[FavoriteSetResponse]:
    """Get all favorite sets of a user."""
    links = await FavoriteService(db).list_favorites(user)
    return [
        FavoriteSetResponse(
            id=link.id,
            set=SetResponse.model_validate(link.set_record) if link.set_record else None,
        )
        for link in links
    ]
