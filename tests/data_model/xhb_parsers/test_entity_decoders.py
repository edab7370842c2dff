from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from homebank_helper.data_model import AccountType, PayMode, ScheduleModeKind
from homebank_helper.data_model.xhb_parsers import (
    AccountDecodeError,
    CategoryDecodeError,
    CurrencyDecodeError,
    DecodeError,
    GroupDecodeError,
    PayeeDecodeError,
    PropertiesDecodeError,
    SchemaDecodeError,
    decode_account,
    decode_category,
    decode_currency,
    decode_group,
    decode_payee,
    decode_properties,
    decode_schema,
)


def _attrs(**kw: str) -> list[tuple[str, str]]:
    return list(kw.items())


# ---------- currency ----------
def test_decode_currency_full():
    cur = decode_currency(
        _attrs(key="2", flags="0", iso="EUR", name="Euro", symb="€", syprf="0",
               dchar=",", gchar=" ", frac="2", rate="1.5", mdate="738886")
    )
    assert cur.key == 2
    assert cur.iso == "EUR"
    assert cur.symbol == "€"
    assert cur.symbol_prefix is False
    assert cur.decimal_char == ","
    assert cur.rate == Decimal("1.5")
    assert cur.modified == date(2024, 1, 1)


def test_decode_currency_defaults_and_unknown_attributes():
    cur = decode_currency(_attrs(key="1", colour="red"))
    assert cur.symbol == "$"
    assert cur.frac_digits == 2
    assert cur.modified is None


@pytest.mark.parametrize("field,value", [("key", "x"), ("symb", ""), ("rate", "abc"), ("frac", "-2")])
def test_decode_currency_errors_name_the_field(field, value):
    with pytest.raises(CurrencyDecodeError) as exc:
        decode_currency([("key", "1"), (field, value)])
    assert exc.value.field == field
    assert exc.value.value == value
    assert isinstance(exc.value, DecodeError)
    assert isinstance(exc.value, ValueError)


# ---------- group / payee ----------
def test_decode_group():
    assert decode_group(_attrs(key="3", name="Everyday")).name == "Everyday"
    with pytest.raises(GroupDecodeError):
        decode_group(_attrs(key="three"))


def test_decode_payee_optional_fields():
    bare = decode_payee(_attrs(key="1", name="Grocer"))
    assert bare.category is None and bare.paymode is None

    full = decode_payee(_attrs(name="Employer", key="2", category="4", paymode="4"))
    assert full.category == 4
    assert full.paymode is PayMode.BANK_TRANSFER


def test_decode_payee_rejects_unknown_paymode():
    with pytest.raises(PayeeDecodeError) as exc:
        decode_payee(_attrs(key="1", paymode="11"))
    assert exc.value.field == "paymode"


# ---------- account ----------
def test_decode_account():
    acct = decode_account(
        _attrs(key="1", flags="2", pos="1", type="7", curr="1", name="Savings",
               bankname="First Bank", initial="1000", minimum="-50", maximum="0",
               notes="rainy day", grp="1", rdate="738886")
    )
    assert acct.account_type is AccountType.SAVINGS
    assert acct.institution == "First Bank"
    assert acct.initial == Decimal("1000")
    assert acct.group == 1
    assert acct.reconciled == date(2024, 1, 1)
    assert acct.closed


def test_decode_account_without_group():
    assert decode_account(_attrs(key="1", name="Cash")).group is None


@pytest.mark.parametrize("field,value", [("type", "8"), ("initial", "lots"), ("grp", "-1")])
def test_decode_account_errors(field, value):
    with pytest.raises(AccountDecodeError) as exc:
        decode_account([("key", "1"), (field, value)])
    assert exc.value.field == field


# ---------- category ----------
def test_decode_category_budget_slots_in_any_order():
    cat = decode_category(_attrs(b12="-30", name="Food", b0="-400", key="1", b1="-10"))
    assert cat.budget.every_month == Decimal("-400")
    assert cat.budget.slots[1] == Decimal("-10")
    assert cat.budget.slots[12] == Decimal("-30")
    assert cat.budget.amount(5) == Decimal("-400")
    assert cat.parent is None


def test_decode_category_with_parent():
    cat = decode_category(_attrs(key="2", parent="1", flags="1", name="Groceries"))
    assert cat.parent == 1
    assert not cat.has_budget()


@pytest.mark.parametrize(
    "field,value",
    [("b13", "1"), ("b99", "-5"), ("b3", "abc"), ("parent", "p")],
)
def test_decode_category_errors(field, value):
    with pytest.raises(CategoryDecodeError) as exc:
        decode_category([("key", "1"), (field, value)])
    assert exc.value.field == field


@pytest.mark.parametrize("field", ["bgcolor", "bflags", "bx", "b"])
def test_decode_category_ignores_unknown_b_names(field):
    # Arrange
    attrs = [("key", "1"), ("name", "Food"), ("b0", "-400"), (field, "#ff0000")]

    # Act
    cat = decode_category(attrs)

    # Assert
    assert cat.name == "Food"
    assert cat.budget.every_month == Decimal("-400")


# ---------- properties ----------
@pytest.mark.parametrize(
    "attrs",
    [
        [("auto_smode", "1"), ("auto_nbdays", "5")],
        [("auto_nbdays", "5"), ("auto_smode", "1")],
    ],
)
def test_decode_properties_schedule_mode_any_order(attrs):
    props = decode_properties([("title", "Home")] + attrs)
    assert props.schedule_mode.kind is ScheduleModeKind.ADD
    assert props.schedule_mode.nbdays == 5


def test_decode_properties_add_until_defaults_weekday():
    props = decode_properties(_attrs(auto_smode="0"))
    assert props.schedule_mode.kind is ScheduleModeKind.ADD_UNTIL
    assert props.schedule_mode.weekday == 1


def test_decode_properties_without_mode_keeps_raw_values():
    props = decode_properties(_attrs(auto_weekday="3", curr="2", car_category="9"))
    assert props.schedule_mode.kind is ScheduleModeKind.NOT_SET
    assert props.schedule_mode.weekday == 3
    assert props.currency == 2
    assert props.vehicle_category == 9


@pytest.mark.parametrize("attrs", [_attrs(auto_smode="2"), _attrs(curr="one")])
def test_decode_properties_errors(attrs):
    with pytest.raises(PropertiesDecodeError):
        decode_properties(attrs)


# ---------- schema ----------
def test_decode_schema_uses_unclamped_dates():
    schema = decode_schema(_attrs(v="1.3999999999999999", d="050504", date="1"))
    assert schema.version == "1.3999999999999999"
    assert schema.data_version == "050504"
    assert schema.saved == date(1, 1, 1)


def test_decode_schema_rejects_non_numeric_version():
    with pytest.raises(SchemaDecodeError) as exc:
        decode_schema(_attrs(v="one point four"))
    assert exc.value.field == "v"
