"""Birth-date parsing and age arithmetic."""

import re
from collections.abc import Iterable
from datetime import date, datetime

from regform.config import DateFormat

_ISO_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_DIGITS_RE = re.compile(r"\d+", re.ASCII)


def _build(year: int, month: int, day: int) -> date | None:
    # date() refuses out-of-range components instead of rolling them over,
    # so 31/04/1990 never becomes 1 May.
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


def _parse_iso(text: str) -> date | None:
    match = _ISO_RE.fullmatch(text)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    return _build(year, month, day)


def _parse_dmy_slash(text: str) -> date | None:
    parts = text.split("/")
    if len(parts) != 3 or not all(_DIGITS_RE.fullmatch(part) for part in parts):
        return None
    day, month, year = (int(part) for part in parts)
    return _build(year, month, day)


_PARSERS = {
    DateFormat.ISO: _parse_iso,
    DateFormat.DMY_SLASH: _parse_dmy_slash,
}


def parse_date(value: object, formats: Iterable[DateFormat]) -> date | None:
    """Turn *value* into a calendar date, or ``None`` if it is not one.

    Native ``date`` values pass through (a ``datetime`` is reduced to its
    date). Text is trimmed and tried against each format in order.
    Any other type yields ``None``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    for fmt in formats:
        parsed = _PARSERS[fmt](text)
        if parsed is not None:
            return parsed
    return None


def age_on(birth: date, today: date) -> int:
    """Completed years between *birth* and *today*.

    Counts calendar years and subtracts one when this year's birthday
    has not arrived yet. A birth date after *today* gives a negative age.
    """
    years = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        years -= 1
    return years
