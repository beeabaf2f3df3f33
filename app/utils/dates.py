import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator


def utcnow() -> datetime.datetime:
    """Instant courant, timezone-aware (UTC)."""
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    """
    Ramène un datetime en UTC.
    Un datetime naïf (ex: relu depuis SQLite) est considéré comme déjà en UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


# Type pydantic : tout datetime validé ressort en UTC (naïf = déjà UTC)
UtcDatetime = Annotated[datetime.datetime, AfterValidator(as_utc)]
