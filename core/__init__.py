"""Core sorting library for Sort Assist.

This package provides stable, non-mutating sort helpers:
- Numbers, strings, records by key and by multiple keys (sorting.py)
- Locale-aware string collation keys (collation.py)
- Date and date-text normalisation (dates.py)

Nothing here depends on the agents package.
"""

from .collation import collation_key
from .dates import parse_date
from .sorting import (
    InvalidSortInput, SortKey, ValueKind,
    sort_numbers, sort_strings, sort_by_key, sort_by_multiple_keys, sort_dates,
)

__all__ = [
    'InvalidSortInput', 'SortKey', 'ValueKind',
    'sort_numbers', 'sort_strings', 'sort_by_key', 'sort_by_multiple_keys', 'sort_dates',
    'collation_key', 'parse_date',
]
