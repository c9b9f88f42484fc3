"""Sorting helpers for numbers, strings, records and dates.

Every helper takes a sequence, leaves it untouched and returns a new list.
Sorts are stable: elements that compare equal keep their input order, in
ascending and descending mode alike.

Ordering policies for values that have no natural place:
- NaN (sort_numbers, record fields) goes after every other value.
- Missing record fields and None go after every present value.
- Invalid dates (sort_dates) go after every valid date.
- Values of kinds that cannot be compared (e.g. 3 vs {}) are ordered by kind
  label ('number', 'str', then the type name) instead of raising.
All of the above hold in both directions.
"""

import logging
import math
from collections.abc import Mapping, Sequence
from datetime import datetime
from decimal import Decimal
from enum import Enum
from functools import cmp_to_key
from numbers import Real
from typing import Any, List, Optional

from .collation import collation_key, compare_text
from .dates import instant, parse_date

logger = logging.getLogger(__name__)

_MISSING = object()


class InvalidSortInput(TypeError):
    """Raised when a sort helper is given something it cannot sort."""


class ValueKind(str, Enum):
    """How a pair of field values is compared."""
    NUMBER = "number"    # numeric comparison
    TEXT = "text"        # locale-aware collation
    GENERIC = "generic"  # plain < / > with a kind-label fallback

    @classmethod
    def of(cls, a: Any, b: Any) -> "ValueKind":
        """Pick the comparison kind for two values."""
        if _is_number(a) and _is_number(b):
            return cls.NUMBER
        if isinstance(a, str) and isinstance(b, str):
            return cls.TEXT
        return cls.GENERIC

    def __str__(self):
        return self.value


class SortKey:
    """One level of a multi-key sort.

    Args:
        key: Field name (mapping key or attribute), or index for tuple records
        descending: Reverse this level (default False)
        case_sensitive: Compare text without lower-casing (default False)
    """

    def __init__(self, key, descending: bool = False, case_sensitive: bool = False):
        self.key = key
        self.descending = descending
        self.case_sensitive = case_sensitive

    @classmethod
    def from_value(cls, value) -> "SortKey":
        """Accept a SortKey, a descriptor dict or a bare key name."""
        if isinstance(value, SortKey):
            return value
        if isinstance(value, Mapping):
            if 'key' not in value:
                raise InvalidSortInput("Sort key descriptor needs a 'key' entry")
            case_sensitive = value.get('case_sensitive', value.get('caseSensitive', False))
            return cls(
                value['key'],
                descending=bool(value.get('descending', False)),
                case_sensitive=bool(case_sensitive),
            )
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            return cls(value)
        raise InvalidSortInput(f"Unsupported sort key descriptor: {value!r}")

    def __repr__(self):
        return (f"SortKey({self.key!r}, descending={self.descending}, "
                f"case_sensitive={self.case_sensitive})")


def _copy_sequence(items) -> list:
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Sequence):
        raise InvalidSortInput(f"Expected a sequence, got {type(items).__name__}")
    return list(items)


def _is_number(value) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _is_nan(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def _is_absent(value) -> bool:
    return value is _MISSING or value is None or _is_nan(value)


def _field(record, key):
    if isinstance(record, Mapping):
        return record.get(key, _MISSING)
    if isinstance(key, int) and isinstance(record, Sequence) and not isinstance(record, str):
        try:
            return record[key]
        except IndexError:
            return _MISSING
    if isinstance(key, str):
        return getattr(record, key, _MISSING)
    return _MISSING


def _kind_label(value) -> str:
    if _is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'str'
    return type(value).__name__


def _compare_generic(a, b) -> int:
    try:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0
    except TypeError:
        label_a, label_b = _kind_label(a), _kind_label(b)
        logger.debug("Incomparable values %r and %r, ordering by kind %s/%s", a, b, label_a, label_b)
        return (label_a > label_b) - (label_a < label_b)


def _compare_values(a, b, descending: bool = False, case_sensitive: bool = True) -> int:
    absent_a, absent_b = _is_absent(a), _is_absent(b)
    if absent_a or absent_b:
        # Absent values trail present ones in either direction
        return int(absent_a) - int(absent_b)

    kind = ValueKind.of(a, b)
    if kind is ValueKind.NUMBER:
        result = (a > b) - (a < b)
    elif kind is ValueKind.TEXT:
        result = compare_text(a, b, case_sensitive=case_sensitive)
    else:
        result = _compare_generic(a, b)
    return -result if descending else result


def sort_numbers(numbers: Sequence, descending: bool = False) -> List:
    """Sort numbers ascending, or descending when `descending` is True.

    NaN values are placed last, in input order.

    Example:
        sort_numbers([3, 1, 2]) -> [1, 2, 3]
        sort_numbers([3, 1, 2], descending=True) -> [3, 2, 1]
    """
    values = _copy_sequence(numbers)
    for value in values:
        if not _is_number(value):
            raise InvalidSortInput(f"sort_numbers expects numbers, got {type(value).__name__}")

    present = [v for v in values if not _is_nan(v)]
    nans = [v for v in values if _is_nan(v)]
    return sorted(present, reverse=descending) + nans


def sort_strings(strings: Sequence, case_sensitive: bool = False, descending: bool = False) -> List[str]:
    """Sort strings with locale-aware collation.

    Args:
        strings: Sequence of str
        case_sensitive: When False (default) case variants compare equal and keep input order
        descending: Reverse the order (default False)

    Example:
        sort_strings(["b", "A", "a"]) -> ["A", "a", "b"]
        sort_strings(["b", "A", "a"], case_sensitive=True) -> ["a", "A", "b"]
    """
    values = _copy_sequence(strings)
    for value in values:
        if not isinstance(value, str):
            raise InvalidSortInput(f"sort_strings expects str, got {type(value).__name__}")

    if case_sensitive:
        key = collation_key
    else:
        def key(text):
            return collation_key(text.lower())
    return sorted(values, key=key, reverse=descending)


def sort_by_key(items: Sequence, key, descending: bool = False) -> List:
    """Sort records (dicts or objects) by a single field.

    Numbers compare numerically, strings by collation, anything else with
    < and >. Records missing the field, or holding None/NaN, come last.

    Example:
        sort_by_key([{"n": 2}, {"n": 1}], "n") -> [{"n": 1}, {"n": 2}]
    """
    records = _copy_sequence(items)

    def compare(a, b):
        return _compare_values(_field(a, key), _field(b, key), descending=descending, case_sensitive=True)

    return sorted(records, key=cmp_to_key(compare))


def sort_by_multiple_keys(items: Sequence, sort_keys: Sequence) -> List:
    """Sort records by a chain of keys; later keys break ties of earlier ones.

    Args:
        items: Sequence of records
        sort_keys: Sequence of SortKey, descriptor dicts
            ({"key": ..., "descending": ..., "caseSensitive": ...}) or key names

    Example:
        sort_by_multiple_keys([{"a": 1, "b": 2}, {"a": 1, "b": 1}], [{"key": "a"}, {"key": "b"}])
        -> [{"a": 1, "b": 1}, {"a": 1, "b": 2}]
    """
    records = _copy_sequence(items)
    levels = [SortKey.from_value(k) for k in _copy_sequence(sort_keys)]
    if not levels:
        return records

    def compare(a, b):
        for level in levels:
            result = _compare_values(
                _field(a, level.key), _field(b, level.key),
                descending=level.descending, case_sensitive=level.case_sensitive,
            )
            if result:
                return result
        return 0

    return sorted(records, key=cmp_to_key(compare))


def sort_dates(dates: Sequence, descending: bool = False) -> List[Optional[datetime]]:
    """Sort dates and date text by instant.

    Text is parsed first; text that is not a date becomes None and is placed
    last. Naive datetimes are read as UTC when mixed with aware ones.

    Example:
        sort_dates(["2021-01-01", "2020-01-01"])
        -> [datetime(2020, 1, 1), datetime(2021, 1, 1)]
    """
    values = _copy_sequence(dates)
    parsed = []
    for value in values:
        try:
            parsed.append(parse_date(value))
        except TypeError as e:
            raise InvalidSortInput(str(e)) from e

    valid = [d for d in parsed if d is not None]
    invalid = [d for d in parsed if d is None]
    if invalid:
        logger.debug("sort_dates: %d unparseable value(s) placed last", len(invalid))
    return sorted(valid, key=instant, reverse=descending) + invalid
