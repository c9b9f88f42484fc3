"""Date normalisation for sorting.

Turns dates and date-like text into `datetime` values. Text that cannot be
parsed becomes `None`, the invalid-date sentinel used by `sort_dates`.
"""

import logging
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Tried in order after ISO 8601 and RFC 2822
FALLBACK_FORMATS = (
    '%Y/%m/%d',
    '%Y/%m/%d %H:%M',
    '%Y/%m/%d %H:%M:%S',
    '%m/%d/%Y',
    '%m/%d/%Y %H:%M',
    '%m/%d/%Y %H:%M:%S',
    '%B %d, %Y',
    '%b %d, %Y',
    '%d %B %Y',
    '%d %b %Y',
)


def parse_date(value: Union[datetime, date, str]) -> Optional[datetime]:
    """Normalise a date value or date text to a datetime.

    Args:
        value: datetime (returned unchanged), date (promoted to midnight) or text

    Returns:
        The datetime, or None when the text is not a recognised date

    Raises:
        TypeError: value is neither a date nor text
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise TypeError(f"Cannot interpret {type(value).__name__} as a date")

    text = value.strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass

    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    logger.debug("Unparseable date text: %r", value)
    return None


def instant(value: datetime) -> float:
    """POSIX timestamp of `value`; naive datetimes are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()
