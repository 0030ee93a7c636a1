"""Display formatting for sketch rows and counters."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

UNKNOWN_DATE = "-"


def format_created(created_at: Optional[datetime]) -> str:
    """Return the row subtitle, e.g. ``Created: May 15, 2018, 9:41:00 AM``."""
    if not isinstance(created_at, datetime):
        return f"Created: {UNKNOWN_DATE}"
    # Medium date and time style: no leading zero on day or 12-hour clock
    hour = created_at.hour % 12 or 12
    return f"Created: {created_at:%b} {created_at.day}, {created_at.year}, {hour}:{created_at:%M:%S %p}"


def format_count(count: Optional[int]) -> str:
    """Return the count label; unknown counts read as zero."""
    return f"{count or 0} Projects"
