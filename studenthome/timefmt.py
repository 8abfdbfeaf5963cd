"""
Time formatting for dashboard cells.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def format_time(dt: Optional[datetime]) -> str:
    """
    Format a datetime as 'EEE, dd MMM yyyy, HH:mm', e.g. 'Mon, 19 Oct 2026, 14:30'.

    The datetime is shown in its own timezone. None gives an empty string.
    """
    if dt is None:
        return ""
    return dt.strftime("%a, %d %b %Y, %H:%M")
