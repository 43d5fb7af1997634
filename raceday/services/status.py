from datetime import UTC, datetime
from enum import Enum


class EventStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


def derive_status(advertised_start_time: datetime, now: datetime | None = None) -> EventStatus:
    """Classify a race or event by its advertised start time.

    Anything that has already started is CLOSED, including a start time equal
    to ``now``. Naive datetimes are taken to be UTC.
    """
    if advertised_start_time.tzinfo is None:
        advertised_start_time = advertised_start_time.replace(tzinfo=UTC)
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    if advertised_start_time <= now:
        return EventStatus.CLOSED
    return EventStatus.OPEN
