"""Helpers for ISO-8601 date strings coming from the frontend."""

from datetime import datetime, timezone


def parse_due_date(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime string into a naive UTC datetime.

    Accepts ``2025-01-15``, ``2025-01-15T09:30:00`` and offset/``Z`` suffixed
    forms. Raises ``ValueError`` for anything else.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Invalid due date format. Use ISO format.")
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValueError("Invalid due date format. Use ISO format.")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
