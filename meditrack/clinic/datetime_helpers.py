import datetime as dt

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_date(text: str) -> dt.date:
    """Parse ``2026-03-15``.  Raises ``ValueError`` on any other shape."""
    return dt.datetime.strptime(text, DATE_FORMAT).date()


def parse_datetime(text: str) -> dt.datetime:
    """Parse ``2026-03-15 14:30:00``.  Raises ``ValueError`` on any other shape."""
    return dt.datetime.strptime(text, DATETIME_FORMAT)


def format_date(date: dt.date) -> str:
    return date.strftime(DATE_FORMAT)


def format_datetime(value: dt.datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


def _aligned_now(value: dt.datetime, now: dt.datetime | None) -> dt.datetime:
    """Return ``now`` (default: wall clock) with the same tz-awareness as ``value``."""
    if now is None:
        now = dt.datetime.now(value.tzinfo) if value.tzinfo else dt.datetime.now()
    if value.tzinfo is not None and now.tzinfo is None:
        return now.astimezone()
    if value.tzinfo is None and now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def is_in_past(value: dt.datetime, now: dt.datetime | None = None) -> bool:
    return value < _aligned_now(value, now)


def is_in_future(value: dt.datetime, now: dt.datetime | None = None) -> bool:
    return value > _aligned_now(value, now)
