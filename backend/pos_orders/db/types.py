"""Column Types — shared SQLAlchemy type decorators.

Invariants:
    - UTCDateTime stores every instant in UTC and always reads back an aware
      UTC datetime, on SQLite and PostgreSQL alike
    - Naive datetimes are taken to be UTC already
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


def to_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime (naive input is assumed UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that normalizes to UTC in and out."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        value = to_utc(value)
        # SQLite's DATETIME storage has no offset field
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        return to_utc(value)
