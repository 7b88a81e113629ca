# ==============================================================================
# HELPER UTILITIES
# ==============================================================================
# Common utility functions used across the application
# ==============================================================================

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Optional

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|s|m|h)")
_DURATION_UNITS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def calculate_offset(page: int, page_size: int) -> int:
    """Calculate database offset from page number."""
    return (page - 1) * page_size


def parse_positive_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """
    Parse a value as an integer greater than zero.

    Args:
        value: Raw value (usually a query or path string)
        default: Returned when the value is missing, malformed or < 1

    Returns:
        The parsed integer, or ``default``
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed >= 1 else default


def parse_duration(value: str) -> float:
    """
    Parse a duration string into seconds.

    Accepts bare numbers (seconds) and unit-suffixed parts that may be
    chained, e.g. ``"90"``, ``"30s"``, ``"1m"``, ``"1h30m"``, ``"500ms"``.

    Args:
        value: Duration text

    Returns:
        Duration in seconds

    Raises:
        ValueError: If the text is not a valid duration
    """
    text = value.strip().lower()
    if not text:
        raise ValueError("Empty duration")

    try:
        return float(text)
    except ValueError:
        pass

    total = 0.0
    position = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()

    if position != len(text):
        raise ValueError(f"Invalid duration: {value!r}")
    return total
