"""API routes for learning session records."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.api.schemas import LearningCreateRequest, LearningResponse, LearningWithSetResponse, SetResponse
from cardsets.database import get_session
from cardsets.services.learning_service import LearningService

router = APIRouter(prefix="/learnings", tags=["learnings"])


@router.post("", response_model=LearningResponse)
async def record_learning(
    request: LearningCreateRequest,
    db: AsyncSession = Depends(get_session),
) -> LearningResponse:
    """Record the result of a study session."""
    learning = await LearningService(db).record_learning(
        user=request.user,
        set_id=request.set,
        cards_total=request.cards_total,
        cards_correct=request.cards_correct,
        cards_wrong=request.cards_wrong,
    )
    return LearningResponse.model_validate(learning)


@router.get("", response_model=list[LearningWithSetResponse])
async def list_learnings(
    user: str = Query(...),
    db: AsyncSession = Depends(get_session),
) -> list[LearningWithSetResponse]:
    """Get a user's learning history."""
    learnings = await LearningService(db).list_learnings(user)
    return [
        LearningWithSetResponse(
            id=learning.id,
            user=learning.user,
            set=SetResponse.model_validate(learning.set_record) if learning.set_record else None,
            cards_total=learning.cards_total,
            cards_correct=learning.cards_correct,
            cards_wrong=learning.cards_wrong,
            score=learning.score,
        )
        for learning in learnings
    ]
