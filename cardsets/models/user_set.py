"""Favorite link between a user and a set."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cardsets.models.base import Base, TimestampMixin, new_record_id
from cardsets.models.card_set import CardSet


class UserSet(Base, TimestampMixin):
    """A user's bookmark of a set. Duplicates per (user, set) are allowed."""

    __tablename__ = "user_sets"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=new_record_id)
    user: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    set: Mapped[str] = mapped_column(String(40), nullable=False, index=True)

    set_record: Mapped[CardSet | None] = relationship(
        primaryjoin="foreign(UserSet.set) == CardSet.id", viewonly=True, lazy="raise"
    )
