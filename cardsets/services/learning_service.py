"""Learning session records and scoring."""

import logging
import math

from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.models import Learning
from cardsets.repository import Repository

logger = logging.getLogger(__name__)


def compute_score(cards_correct: int, cards_total: int) -> float:
    """Percentage of correct cards, ``100 * correct / total``.

    An empty session has no defined score: 0/0 gives NaN and n/0 gives an
    infinity with the sign of ``n``. Neither is ever reported as 0.
    """
    if cards_total == 0:
        return math.nan if cards_correct == 0 else math.copysign(math.inf, cards_correct)
    return 100 * cards_correct / cards_total


class LearningService:
    def __init__(self, session: AsyncSession) -> None:
        self.learnings = Repository(session, Learning)

    async def record_learning(
        self,
        user: str,
        set_id: str,
        cards_total: int | str,
        cards_correct: int | str,
        cards_wrong: int | str,
    ) -> Learning:
        """Store the outcome of a study session with its computed score.

        Counts are coerced to ints. They are not cross-checked
        (correct + wrong may differ from total).
        """
        total, correct, wrong = int(cards_total), int(cards_correct), int(cards_wrong)
        score = compute_score(correct, total)
        if not math.isfinite(score):
            logger.warning("Learning for user %s on set %s has no score (total=%d)", user, set_id, total)

        learning = await self.learnings.create(
            user=user,
            set=set_id,
            cards_total=total,
            cards_correct=correct,
            cards_wrong=wrong,
            # SQL and JSON have no NaN/inf; an undefined score is stored as NULL
            score=score if math.isfinite(score) else None,
        )
        logger.info("Recorded learning %s for user %s on set %s (score=%s)", learning.id, user, set_id, learning.score)
        return learning

    async def list_learnings(self, user: str) -> list[Learning]:
        """Return the user's learning history with each referenced set loaded."""
        return await self.learnings.filter(expand=("set_record",), user=str(user))
