from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Note: Models are imported in app.db.models to avoid circular imports
# All models must import Base from this module


def utcnow() -> datetime:
    """Naive UTC timestamp with microsecond precision, used for all audit columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def advance_updated_at(instance) -> None:
    """
    Stamp instance.updated_at with the current time, strictly later than its previous value.
    
    Two writes inside the same clock tick would otherwise leave updated_at unchanged.
    """
    now = utcnow()
    previous = getattr(instance, "updated_at", None)
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    instance.updated_at = now
