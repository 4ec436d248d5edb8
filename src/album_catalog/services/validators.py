"""Validation of user-entered dates and identifiers."""

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date

_DATE_PATTERN = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})")
_IDENTIFIER_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
DECEMBER = 12
MAX_DAY = 31


def validate_date(text: str) -> date | None:
    """Parse a day/month/year date such as ``25/12/2023``.

    Returns ``None`` when the text does not match the grammar or names a day
    that does not exist in that month.
    """
    match = _DATE_PATTERN.fullmatch(text)
    if not match:
        return None
    day, month, year = (int(group) for group in match.groups())
    if not 1 <= month <= DECEMBER or not 1 <= day <= MAX_DAY:
        return None
    if not MINYEAR <= year <= MAXYEAR:
        return None
    # datetime.date raises on overflow instead of rolling over.
    _, days_in_month = calendar.monthrange(year, month)
    if day > days_in_month:
        return None
    return date(year, month, day)


def validate_identifier(text: str) -> bool:
    """Return true when the text is a hyphen-grouped 32 digit hex identifier."""
    return _IDENTIFIER_PATTERN.fullmatch(text) is not None
