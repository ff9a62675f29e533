"""Declarative base, timestamp mixin and record id generation."""

import time
import uuid
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from cardsets.config import utcnow

_last_id_ns = 0


def new_record_id() -> str:
    """Return a new opaque record identifier.

    Ids sort in creation order: a nanosecond timestamp, bumped to stay strictly
    increasing within the process, followed by random hex.
    """
    global _last_id_ns
    _last_id_ns = max(time.time_ns(), _last_id_ns + 1)
    return f"rec_{_last_id_ns:016x}{uuid.uuid4().hex[:16]}"


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
