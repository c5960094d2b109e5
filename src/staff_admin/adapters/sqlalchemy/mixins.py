"""SQLAlchemy ORM mixins – TimestampMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC).replace(microsecond=0)


class TimestampMixin:
    """Adds ``created_at`` and ``updated_at`` timestamp columns.

    Mix into any concrete ORM model class that extends
    :class:`~sqlalchemy.orm.DeclarativeBase`::

        class Employee(TimestampMixin, Base):
            __tablename__ = "employee"
            id: Mapped[int] = mapped_column(primary_key=True)

    Values are set in Python on INSERT and refreshed on every UPDATE, so
    they are available on the instance right after a flush.  The server
    default only covers rows written outside the ORM.

    Timestamps are kept at whole-second precision; the day bounds used by
    date-range searches end at ``23:59:59``.
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
        nullable=False,
    )

    def truncate_timestamps(self) -> None:
        """Drop sub-second parts from explicitly assigned timestamps."""
        for name in ("created_at", "updated_at"):
            value = getattr(self, name, None)
            if isinstance(value, datetime.datetime) and value.microsecond:
                setattr(self, name, value.replace(microsecond=0))


__all__ = ["TimestampMixin"]
