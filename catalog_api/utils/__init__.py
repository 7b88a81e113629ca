# ==============================================================================
# UTILS PACKAGE INITIALIZATION
# ==============================================================================

"""
Utilities Module
================

Helper functions and utilities:
- Pagination helpers
- Duration parsing
- Date/time utilities
"""

from catalog_api.utils.helpers import (
    calculate_offset,
    parse_duration,
    parse_positive_int,
    utc_now,
)

__all__ = [
    "calculate_offset",
    "parse_duration",
    "parse_positive_int",
    "utc_now",
]
