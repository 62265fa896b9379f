"""Wall-clock access used for time-bound claims."""
from __future__ import annotations

from datetime import UTC, datetime


def now_timestamp() -> int:
    """Return the current UTC time as whole Unix seconds."""

    return int(datetime.now(UTC).timestamp())
