"""API routes for flashcard sets."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.api.schemas import DeleteResponse, SetCreateRequest, SetResponse, SetSummaryResponse
from cardsets.database import get_session
from cardsets.services.set_service import SetService

router = APIRouter(prefix="/sets", tags=["sets"])


@router.get("", response_model=list[SetSummaryResponse])
async def list_sets(db: AsyncSession = Depends(get_session)) -> list[SetSummaryResponse]:
    """List all public sets."""
    rows = await SetService(db).list_public_sets()
    return [SetSummaryResponse(**row) for row in rows]


@router.post("", response_model=SetResponse)
async def create_set(
    request: SetCreateRequest,
    db: AsyncSession = Depends(get_session),
) -> SetResponse:
    """Create a new set with no cards."""
    card_set = await SetService(db).create_set(
        title=request.title,
        description=request.description,
        private=request.private,
        creator=request.creator,
    )
    return SetResponse.model_validate(card_set)


@router.get("/{set_id}", response_model=SetResponse)
async def get_set(set_id: str, db: AsyncSession = Depends(get_session)) -> SetResponse:
    """Get a single set."""
    card_set = await SetService(db).get_set(set_id)
    return SetResponse.model_validate(card_set)


@router.delete("/{set_id}", response_model=DeleteResponse)
async def delete_set(set_id: str, db: AsyncSession = Depends(get_session)) -> DeleteResponse:
    """Delete a set and the favorite links pointing at it."""
    result = await SetService(db).delete_set(set_id)
    return DeleteResponse(**result)
