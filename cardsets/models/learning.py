"""Learning session results."""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cardsets.models.base import Base, TimestampMixin, new_record_id
from cardsets.models.card_set import CardSet


class Learning(Base, TimestampMixin):
    """Outcome of one study session against a set. Never updated after creation."""

    __tablename__ = "learnings"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=new_record_id)
    user: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    set: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    cards_total: Mapped[int] = mapped_column(Integer, nullable=False)
    cards_correct: Mapped[int] = mapped_column(Integer, nullable=False)
    cards_wrong: Mapped[int] = mapped_column(Integer, nullable=False)
    score: Mapped[float | None] = mapped_column(Float, nullable=True)  # NULL when cards_total == 0

    set_record: Mapped[CardSet | None] = relationship(
        primaryjoin="foreign(Learning.set) == CardSet.id", viewonly=True, lazy="raise"
    )
