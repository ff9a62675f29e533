"""Flashcard model: one question/answer pair inside a set."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cardsets.models.base import Base, TimestampMixin, new_record_id
from cardsets.models.card_set import CardSet


class Card(Base, TimestampMixin):
    __tablename__ = "cards"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=new_record_id)
    # Plain reference column: deleting a set leaves its cards behind.
    set: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)

    set_record: Mapped[CardSet | None] = relationship(
        primaryjoin="foreign(Card.set) == CardSet.id", viewonly=True, lazy="raise"
    )
