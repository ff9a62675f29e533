"""API routes for cards and study sampling."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.api.schemas import CardCreateRequest, CardResponse, StudyCardResponse
from cardsets.database import get_session
from cardsets.services.card_service import CardService

router = APIRouter(prefix="/cards", tags=["cards"])


@router.post("", response_model=CardResponse)
async def create_card(
    request: CardCreateRequest,
    db: AsyncSession = Depends(get_session),
) -> CardResponse:
    """Create a card and increment its set's card count."""
    card = await CardService(db).create_card(request.set, request.question, request.answer)
    return CardResponse.model_validate(card)


# Registered before /{set_id} so "learn" is not taken as a set id.
@router.get("/learn", response_model=list[StudyCardResponse])
async def learn_cards(
    setid: str = Query(...),
    limit: int = Query(..., ge=0),
    db: AsyncSession = Depends(get_session),
) -> list[StudyCardResponse]:
    """Draw up to ``limit`` random cards from a set."""
    cards = await CardService(db).sample_cards(setid, limit)
    return [StudyCardResponse(**card) for card in cards]


@router.get("/{set_id}", response_model=list[CardResponse])
async def list_cards(set_id: str, db: AsyncSession = Depends(get_session)) -> list[CardResponse]:
    """Get all cards of a set."""
    cards = await CardService(db).list_cards(set_id)
    return [CardResponse.model_validate(card) for card in cards]
