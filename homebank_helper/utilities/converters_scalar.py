# homebank_helper/utilities/converters_scalar.py
from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Final

# Dates in an XHB file are day counts where day 1 is 0001-01-01.
HB_MIN_DATE: Final[date] = date(1900, 1, 1)
HB_MAX_DATE: Final[date] = date(2200, 12, 31)
JULIAN_MIN_DATE: Final[int] = HB_MIN_DATE.toordinal()  # 693596
JULIAN_MAX_DATE: Final[int] = HB_MAX_DATE.toordinal()  # 803533


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {value!r} to {target}")


def clamp_date(d: date) -> date:
    """Clamp ``d`` into the [1900-01-01, 2200-12-31] window HomeBank supports."""
    return max(min(d, HB_MAX_DATE), HB_MIN_DATE)


def julian_to_date(offset: int, clamp: bool = True, /) -> date:
    """
    Convert a Julian day offset into a calendar date.

    Offset 1 is 0001-01-01, so offset 0 is the (unrepresentable) day before.
    With ``clamp`` (the default) the result saturates into the supported
    window; without it the raw calendar date is returned, saturating only at
    the limits of :class:`datetime.date`.
    """
    if offset < 1:
        d = date.min
    elif offset > date.max.toordinal():
        d = date.max
    else:
        d = date.fromordinal(offset)
    return clamp_date(d) if clamp else d


def date_to_julian(d: date, /) -> int:
    """Inverse of :func:`julian_to_date` for representable dates."""
    return d.toordinal()


def add_months(d: date, months: int) -> date:
    """Return the first day of the month ``months`` after ``d``'s month."""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def first_of_month(d: date) -> date:
    return date(d.year, d.month, 1)


def first_of_months(date_from: date, date_to: date) -> list[date]:
    """Every first day of a month ``d`` with ``date_from <= d < date_to``."""
    current = first_of_month(date_from)
    if current < date_from:
        current = add_months(current, 1)
    out: list[date] = []
    while current < date_to:
        out.append(current)
        current = add_months(current, 1)
    return out


# region Strict primitive parsers for XHB attribute text


def parse_key(value: str) -> int:
    """Parse a non-negative integer (keys, flags, indexes)."""
    s = value.strip()
    if not (s.isascii() and s.isdigit()):
        raise _bad(value, "non-negative integer")
    return int(s)


def parse_int(value: str, *, bits: int | None = None) -> int:
    """Parse an unsigned integer, optionally bounded to ``bits`` width."""
    n = parse_key(value)
    if bits is not None and n >= 1 << bits:
        raise _bad(value, f"u{bits}")
    return n


def parse_amount(value: str) -> Decimal:
    """
    Parse a money amount exactly as written (``-1088.72``, ``31.079999``).

    No locale handling: XHB always writes ``.`` as the decimal mark.
    """
    try:
        amount = Decimal(value.strip())
    except InvalidOperation as e:
        raise _bad(value, "Decimal") from e
    if not amount.is_finite():
        raise _bad(value, "finite Decimal")
    return amount


def parse_char(value: str) -> str:
    """Return the first character of ``value``; empty text is an error."""
    if not value:
        raise _bad(value, "character")
    return value[0]


def parse_julian(value: str, clamp: bool = True) -> date:
    return julian_to_date(parse_key(value), clamp)


def parse_float(value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as e:
        raise _bad(value, "float") from e


# endregion Strict primitive parsers for XHB attribute text
