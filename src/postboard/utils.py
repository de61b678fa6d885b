from datetime import datetime, timezone


def parse_post_id(value: str) -> int:
    return int(value)


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 date or timestamp taken from a URL path.

    Values without an offset are treated as UTC, matching how created_at is
    written, rather than in the database session time zone. Only ISO-8601
    is accepted: free-form spellings PostgreSQL would take, such as
    "Jan 31 2024" or "January 31, 2024", raise ValueError and are answered on the
    read error path.

    Example:
        >>> parse_timestamp("2024-01-31")
        datetime.datetime(2024, 1, 31, 0, 0, tzinfo=datetime.timezone.utc)
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
