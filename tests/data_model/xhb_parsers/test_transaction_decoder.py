from __future__ import annotations

import itertools
from datetime import date
from decimal import Decimal

import pytest

from homebank_helper.data_model import (
    PayMode,
    SimpleTransaction,
    SplitTransaction,
    TransactionKind,
    TransactionStatus,
    TransactionType,
)
from homebank_helper.data_model.xhb_parsers import (
    ConflictingSimpleSplitError,
    InvalidTransferError,
    MismatchedSplitError,
    TransactionDecodeError,
    decode_transaction,
)
from homebank_helper.data_model.xhb_parsers.transaction_decoder import split_tags


def test_income_simple_from_amount_only():
    # Arrange
    attrs = [("amount", "1")]

    # Act
    tr = decode_transaction(attrs)

    # Assert
    assert tr.txn_type == TransactionType.income()
    assert tr.complexity == SimpleTransaction(None, Decimal("1.0"))
    assert tr.amount == Decimal(1)
    assert tr.date == date(2000, 1, 1)
    assert tr.paymode is PayMode.NONE
    assert tr.status is TransactionStatus.NONE


def test_split_from_three_lists():
    # Arrange
    attrs = [
        ("amount", "-1088.72"),
        ("scat", "83||100"),
        ("samt", "-1119.8||31.08"),
        ("smem", "January||Rest"),
    ]

    # Act
    tr = decode_transaction(attrs)

    # Assert
    assert isinstance(tr.complexity, SplitTransaction)
    assert tr.complexity.n == 2
    assert tr.categories == [83, 100]
    assert tr.amounts == [Decimal("-1119.8"), Decimal("31.08")]
    assert tr.memos == ["January", "Rest"]
    assert tr.amount == Decimal("-1088.72")
    assert tr.txn_type.kind is TransactionKind.EXPENSE


def test_base_fields_are_decoded():
    tr = decode_transaction(
        [
            ("date", "738900"),
            ("amount", "-80.25"),
            ("account", "1"),
            ("paymode", "5"),
            ("st", "2"),
            ("flags", "16"),
            ("payee", "3"),
            ("wording", "Weekly shop"),
            ("info", "ref 42"),
            ("tags", " food  weekly "),
            ("category", "2"),
        ]
    )
    assert tr.date == date(2024, 1, 15)
    assert tr.account == 1
    assert tr.paymode is PayMode.DEBIT_CARD
    assert tr.status is TransactionStatus.RECONCILED
    assert tr.flags == 16
    assert tr.payee == 3
    assert tr.memo == "Weekly shop"
    assert tr.info == "ref 42"
    assert tr.tags == ("food", "weekly")
    assert tr.complexity == SimpleTransaction(2, Decimal("-80.25"), "Weekly shop")


@pytest.mark.parametrize("raw,expected", [("a b", ("a", "b")), ("", None), ("   ", None), ("x", ("x",))])
def test_split_tags(raw, expected):
    assert split_tags(raw) == expected


def test_empty_wording_is_no_memo():
    tr = decode_transaction([("wording", ""), ("amount", "-1")])
    assert tr.memo is None


def test_split_memo_entries_can_be_empty():
    tr = decode_transaction([("scat", "1||2"), ("smem", "||Rest")])
    assert tr.memos == [None, "Rest"]
    # never-provided amounts pad to zero so the lists stay aligned
    assert tr.amounts == [Decimal(0), Decimal(0)]


@pytest.mark.parametrize(
    "split_attr",
    [("scat", "1||2"), ("samt", "-1||-2"), ("smem", "a||b")],
)
def test_simple_and_split_conflict_in_either_order(split_attr):
    category = ("category", "5")
    with pytest.raises(ConflictingSimpleSplitError):
        decode_transaction([category, split_attr])
    with pytest.raises(ConflictingSimpleSplitError):
        decode_transaction([split_attr, category])


SPLIT_LISTS = [("scat", "1||2||3"), ("samt", "-1||-2"), ("smem", "a||b||c")]


@pytest.mark.parametrize("order", list(itertools.permutations(SPLIT_LISTS)))
def test_mismatched_split_lists_fail_in_any_order(order):
    with pytest.raises(MismatchedSplitError) as exc:
        decode_transaction(list(order))
    first_count = len(order[0][1].split("||"))
    assert exc.value.expected == first_count
    assert exc.value.found != first_count


@pytest.mark.parametrize(
    "order",
    list(itertools.permutations([("scat", "1||2"), ("samt", "-1||-2"), ("smem", "a||b")])),
)
def test_split_lists_stay_aligned_in_any_order(order):
    tr = decode_transaction(list(order))
    assert tr.categories == [1, 2]
    assert tr.amounts == [Decimal(-1), Decimal(-2)]
    assert tr.memos == ["a", "b"]


@pytest.mark.parametrize(
    "attrs,field",
    [
        ([("kxfer", "0"), ("dst_account", "2")], "kxfer"),
        ([("dst_account", "2"), ("kxfer", "0")], "kxfer"),
        ([("kxfer", "4")], "dst_account"),
        ([("dst_account", "0"), ("kxfer", "4")], "dst_account"),
        ([("dst_account", "3")], "kxfer"),
    ],
)
def test_invalid_transfers(attrs, field):
    with pytest.raises(InvalidTransferError) as exc:
        decode_transaction(attrs)
    assert exc.value.field == field


@pytest.mark.parametrize("amount", ["-200", "200", "0"])
def test_valid_transfer_is_never_reclassified(amount):
    attrs = [("amount", amount), ("kxfer", "1"), ("dst_account", "3")]
    for order in itertools.permutations(attrs):
        tr = decode_transaction(list(order))
        assert tr.txn_type == TransactionType.transfer(1, 3)


@pytest.mark.parametrize("amount,kind", [("0", TransactionKind.EXPENSE), ("-0.01", TransactionKind.EXPENSE), ("0.01", TransactionKind.INCOME)])
def test_type_from_amount_sign(amount, kind):
    assert decode_transaction([("amount", amount)]).txn_type.kind is kind


@pytest.mark.parametrize(
    "field,value",
    [
        ("date", "yesterday"),
        ("amount", "1,00"),
        ("account", "-1"),
        ("paymode", "11"),
        ("st", "5"),
        ("payee", "x"),
        ("category", "food"),
        ("scat", "1||x"),
        ("samt", "1||"),
        ("kxfer", "k"),
        ("dst_account", "-3"),
    ],
)
def test_malformed_values_name_the_field(field, value):
    with pytest.raises(TransactionDecodeError) as exc:
        decode_transaction([(field, value)])
    assert exc.value.field == field
    assert exc.value.value == value


def test_unknown_attributes_are_ignored():
    tr = decode_transaction([("amount", "-3"), ("colour", "blue"), ("dspl", "1")])
    assert tr.amount == Decimal(-3)
