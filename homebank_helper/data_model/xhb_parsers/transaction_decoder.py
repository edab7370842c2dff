# homebank_helper/data_model/xhb_parsers/transaction_decoder.py
"""
Decoder for ``<ope>`` elements.

Attributes arrive in any order, so the decoder folds them into three scratch
records (simple, split, transfer) and only decides what kind of transaction
it built once every attribute has been seen.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ...utilities import parse_amount, parse_int, parse_julian, parse_key
from ..hb_wrapper import (
    HbTransaction,
    SimpleTransaction,
    SplitTransaction,
    TransactionComplexity,
    TransactionType,
)
from ..interfaces import PayMode, TransactionStatus
from .decode_errors import (
    ConflictingSimpleSplitError,
    InvalidTransferError,
    MismatchedSplitError,
    TransactionDecodeError,
)

SPLIT_SEPARATOR = "||"
TAG_SEPARATOR = " "

_SPLIT_FIELDS = ("scat", "samt", "smem")

# region Scratch records


@dataclass
class _SimpleScratch:
    category: Optional[int] = None
    seen_category: bool = False


@dataclass
class _SplitScratch:
    n: Optional[int] = None
    categories: Optional[list[Optional[int]]] = None
    amounts: Optional[list[Decimal]] = None
    memos: Optional[list[Optional[str]]] = None

    @property
    def seen(self) -> bool:
        return self.n is not None

    def check_count(self, name: str, value: str, found: int) -> None:
        """The first list parsed fixes ``n``; later lists must agree."""
        if self.n is None:
            self.n = found
        elif found != self.n:
            raise MismatchedSplitError(name, self.n, found, value)

    def build(self) -> SplitTransaction:
        n = self.n or 0
        return SplitTransaction(
            categories=tuple(self.categories or [None] * n),
            amounts=tuple(self.amounts or [Decimal(0)] * n),
            memos=tuple(self.memos or [None] * n),
        )


@dataclass
class _TransferScratch:
    seen: bool = False
    transfer_key: int = 0
    destination: int = 0

    def build(self) -> TransactionType:
        if self.transfer_key == 0:
            raise InvalidTransferError("kxfer", str(self.transfer_key))
        if self.destination == 0:
            raise InvalidTransferError("dst_account", str(self.destination))
        return TransactionType.transfer(self.transfer_key, self.destination)


@dataclass
class _BaseScratch:
    date: date = date(2000, 1, 1)
    amount: Decimal = Decimal(0)
    account: int = 0
    paymode: PayMode = PayMode.NONE
    status: TransactionStatus = TransactionStatus.NONE
    flags: Optional[int] = None
    payee: Optional[int] = None
    memo: Optional[str] = None
    info: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None


# endregion Scratch records

# region Field parsers


def split_values(value: str) -> list[str]:
    return value.split(SPLIT_SEPARATOR)


def split_tags(value: str) -> Optional[tuple[str, ...]]:
    """Space-separated tags with empty entries removed; no tags gives ``None``."""
    tags = tuple(t for t in value.split(TAG_SEPARATOR) if t)
    return tags or None


def _optional_text(value: str) -> Optional[str]:
    return value if value else None


def _parse_split_categories(name: str, value: str) -> list[Optional[int]]:
    out: list[Optional[int]] = []
    for part in split_values(value):
        try:
            out.append(parse_key(part))
        except ValueError as e:
            raise TransactionDecodeError(name, value, f"bad category {part!r}") from e
    return out


def _parse_split_amounts(name: str, value: str) -> list[Decimal]:
    out: list[Decimal] = []
    for part in split_values(value):
        try:
            out.append(parse_amount(part))
        except ValueError as e:
            raise TransactionDecodeError(name, value, f"bad amount {part!r}") from e
    return out


def _parse_split_memos(value: str) -> list[Optional[str]]:
    return [_optional_text(part) for part in split_values(value)]


# endregion Field parsers


def decode_transaction(attrs: Iterable[tuple[str, str]]) -> HbTransaction:
    """
    Decode the attributes of one ``<ope>`` element.

    Raises a :class:`TransactionDecodeError` (or one of its subclasses) for a
    malformed value, a transaction that mixes ``category`` with split lists,
    split lists of different lengths, or a transfer with a zero key or
    destination.
    """
    base = _BaseScratch()
    simple = _SimpleScratch()
    split = _SplitScratch()
    xfer = _TransferScratch()

    for name, value in attrs:
        try:
            if name == "date":
                base.date = parse_julian(value)
            elif name == "amount":
                base.amount = parse_amount(value)
            elif name == "account":
                base.account = parse_key(value)
            elif name == "paymode":
                base.paymode = PayMode.from_index(parse_int(value))
            elif name == "st":
                base.status = TransactionStatus.from_index(parse_int(value))
            elif name == "flags":
                base.flags = parse_int(value)
            elif name == "payee":
                base.payee = parse_key(value)
            elif name == "wording":
                base.memo = _optional_text(value)
            elif name == "info":
                base.info = _optional_text(value)
            elif name == "tags":
                base.tags = split_tags(value)
            elif name == "category":
                if split.seen:
                    raise ConflictingSimpleSplitError(name, value)
                simple.category = parse_key(value)
                simple.seen_category = True
            elif name in _SPLIT_FIELDS:
                if simple.seen_category:
                    raise ConflictingSimpleSplitError(name, value)
                if name == "scat":
                    parsed_cats = _parse_split_categories(name, value)
                    split.check_count(name, value, len(parsed_cats))
                    split.categories = parsed_cats
                elif name == "samt":
                    parsed_amts = _parse_split_amounts(name, value)
                    split.check_count(name, value, len(parsed_amts))
                    split.amounts = parsed_amts
                else:
                    parsed_memos = _parse_split_memos(value)
                    split.check_count(name, value, len(parsed_memos))
                    split.memos = parsed_memos
            elif name == "kxfer":
                xfer.transfer_key = parse_key(value)
                xfer.seen = True
            elif name == "dst_account":
                xfer.destination = parse_key(value)
                xfer.seen = True
        except TransactionDecodeError:
            raise
        except ValueError as e:
            raise TransactionDecodeError(name, value, str(e)) from e

    if xfer.seen:
        txn_type = xfer.build()
    elif base.amount > 0:
        txn_type = TransactionType.income()
    else:
        txn_type = TransactionType.expense()

    complexity: TransactionComplexity
    if split.seen:
        complexity = split.build()
    else:
        complexity = SimpleTransaction(simple.category, base.amount, base.memo)

    return HbTransaction(
        date=base.date,
        amount=base.amount,
        account=base.account,
        paymode=base.paymode,
        status=base.status,
        flags=base.flags,
        payee=base.payee,
        memo=base.memo,
        info=base.info,
        tags=base.tags,
        txn_type=txn_type,
        complexity=complexity,
    )
