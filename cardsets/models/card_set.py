"""Flashcard set model."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cardsets.models.base import Base, TimestampMixin, new_record_id


class CardSet(Base, TimestampMixin):
    """A named collection of flashcards.

    ``cards`` is a denormalized count of the cards referencing this set. It is
    only ever changed through an atomic delta update issued by the card service.
    """

    __tablename__ = "sets"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=new_record_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    creator: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cards: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
