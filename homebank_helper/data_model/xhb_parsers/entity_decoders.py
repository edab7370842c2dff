# homebank_helper/data_model/xhb_parsers/entity_decoders.py
"""
Decoders for the non-transaction XHB elements.

Each decoder takes the element's ``(name, value)`` attribute pairs in any
order, ignores names it does not know and returns a frozen record. The first
attribute that fails to parse raises the matching
:class:`~.decode_errors.DecodeError` subclass.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping, Optional

from ...utilities import (
    parse_amount,
    parse_char,
    parse_float,
    parse_int,
    parse_julian,
    parse_key,
)
from ..hb_wrapper import (
    CategoryBudget,
    DbProperties,
    DbSchema,
    HbAccount,
    HbCategory,
    HbCurrency,
    HbGroup,
    HbPayee,
    ScheduleMode,
)
from ..interfaces import AccountType, PayMode
from .decode_errors import (
    AccountDecodeError,
    CategoryDecodeError,
    CurrencyDecodeError,
    DecodeError,
    GroupDecodeError,
    PayeeDecodeError,
    PropertiesDecodeError,
    SchemaDecodeError,
)

Attributes = Iterable[tuple[str, str]]

_BUDGET_SLOT = re.compile(r"b([0-9]+)")

# xml attribute -> (record field, parser)
FieldTable = Mapping[str, tuple[str, Callable[[str], Any]]]


def _text(value: str) -> str:
    return value


def _flag(value: str) -> bool:
    return parse_int(value) != 0


def _account_type(value: str) -> AccountType:
    return AccountType.from_index(parse_int(value))


def _paymode(value: str) -> PayMode:
    return PayMode.from_index(parse_int(value))


def _unclamped_julian(value: str) -> date:
    return parse_julian(value, clamp=False)


def _fold(
    attrs: Attributes,
    table: FieldTable,
    error: type[DecodeError],
    extra: Optional[Callable[[str, str], None]] = None,
) -> dict[str, Any]:
    """
    Parse every known attribute into a ``{field: value}`` scratch dict.

    ``extra`` receives every attribute missing from ``table``.
    """
    scratch: dict[str, Any] = {}
    for name, value in attrs:
        entry = table.get(name)
        if entry is None:
            if extra is not None:
                try:
                    extra(name, value)
                except DecodeError:
                    raise
                except ValueError as e:
                    raise error(name, value, str(e)) from e
            continue
        field_name, parser = entry
        try:
            scratch[field_name] = parser(value)
        except ValueError as e:
            raise error(name, value, str(e)) from e
    return scratch


# region Currency / Group / Payee / Account

_CURRENCY_FIELDS: FieldTable = {
    "key": ("key", parse_key),
    "flags": ("flags", parse_int),
    "iso": ("iso", _text),
    "name": ("name", _text),
    "symb": ("symbol", parse_char),
    "syprf": ("symbol_prefix", _flag),
    "dchar": ("decimal_char", parse_char),
    "gchar": ("group_char", parse_char),
    "frac": ("frac_digits", parse_int),
    "rate": ("rate", parse_amount),
    "mdate": ("modified", parse_julian),
}

_GROUP_FIELDS: FieldTable = {
    "key": ("key", parse_key),
    "name": ("name", _text),
}

_PAYEE_FIELDS: FieldTable = {
    "key": ("key", parse_key),
    "name": ("name", _text),
    "category": ("category", parse_key),
    "paymode": ("paymode", _paymode),
}

_ACCOUNT_FIELDS: FieldTable = {
    "key": ("key", parse_key),
    "flags": ("flags", parse_int),
    "pos": ("pos", parse_int),
    "type": ("account_type", _account_type),
    "curr": ("currency", parse_key),
    "name": ("name", _text),
    "bankname": ("institution", _text),
    "initial": ("initial", parse_amount),
    "minimum": ("minimum", parse_amount),
    "maximum": ("maximum", parse_amount),
    "notes": ("notes", _text),
    "grp": ("group", parse_key),
    "rdate": ("reconciled", parse_julian),
}


def decode_currency(attrs: Attributes) -> HbCurrency:
    return HbCurrency(**_fold(attrs, _CURRENCY_FIELDS, CurrencyDecodeError))


def decode_group(attrs: Attributes) -> HbGroup:
    return HbGroup(**_fold(attrs, _GROUP_FIELDS, GroupDecodeError))


def decode_payee(attrs: Attributes) -> HbPayee:
    return HbPayee(**_fold(attrs, _PAYEE_FIELDS, PayeeDecodeError))


def decode_account(attrs: Attributes) -> HbAccount:
    return HbAccount(**_fold(attrs, _ACCOUNT_FIELDS, AccountDecodeError))


# endregion Currency / Group / Payee / Account

# region Category

_CATEGORY_FIELDS: FieldTable = {
    "key": ("key", parse_key),
    "flags": ("flags", parse_int),
    "name": ("name", _text),
    "parent": ("parent", parse_key),
}


def decode_category(attrs: Attributes) -> HbCategory:
    """
    Decode a ``<cat>``; ``b0``..``b12`` attributes fill the budget slots.

    ``b<N>`` with ``N`` above 12 is rejected; other unknown names are ignored.
    """
    budget: dict[int, Decimal] = {}

    def budget_slot(name: str, value: str) -> None:
        m = _BUDGET_SLOT.fullmatch(name)
        if m is None:
            return
        index = int(m.group(1))
        if index > 12:
            raise CategoryDecodeError(name, value, "budget slot must be 0..12")
        budget[index] = parse_amount(value)

    scratch = _fold(attrs, _CATEGORY_FIELDS, CategoryDecodeError, extra=budget_slot)
    return HbCategory(**scratch, budget=CategoryBudget.from_mapping(budget))


# endregion Category

# region Properties / Schema

_PROPERTIES_FIELDS: FieldTable = {
    "title": ("title", _text),
    "curr": ("currency", parse_key),
    "car_category": ("vehicle_category", parse_key),
    "auto_smode": ("smode", parse_int),
    "auto_weekday": ("weekday", parse_int),
    "auto_nbdays": ("nbdays", parse_int),
}

_SCHEMA_FIELDS: FieldTable = {
    "v": ("version", _text),
    "d": ("data_version", _text),
    "date": ("saved", _unclamped_julian),
}


def decode_properties(attrs: Attributes) -> DbProperties:
    """Decode ``<properties>``; the schedule mode is resolved after the fold."""
    scratch = _fold(attrs, _PROPERTIES_FIELDS, PropertiesDecodeError)
    smode = scratch.pop("smode", None)
    weekday = scratch.pop("weekday", None)
    nbdays = scratch.pop("nbdays", None)
    try:
        schedule = ScheduleMode.resolve(smode, weekday, nbdays)
    except ValueError as e:
        raise PropertiesDecodeError("auto_smode", str(smode), str(e)) from e
    return DbProperties(**scratch, schedule_mode=schedule)


def decode_schema(attrs: Attributes) -> DbSchema:
    """Decode the ``<homebank>`` root attributes; ``v`` must be a number."""
    scratch = _fold(attrs, _SCHEMA_FIELDS, SchemaDecodeError)
    version = scratch.get("version")
    if version is not None:
        try:
            parse_float(version)
        except ValueError as e:
            raise SchemaDecodeError("v", version, str(e)) from e
    return DbSchema(**scratch)


# endregion Properties / Schema
