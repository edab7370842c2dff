from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional, Union

from ..interfaces import (
    IToDict,
    PayMode,
    RecursiveDictStr,
    TransactionKind,
    TransactionStatus,
)

if TYPE_CHECKING:
    from .hb_database import HomeBankDb

_MISSING_DATE = date(2000, 1, 1)


# region Transaction type


@dataclass(frozen=True)
class TransactionType:
    """
    Expense, Income, or a Transfer carrying its linkage key and destination.
    """

    kind: TransactionKind
    transfer_key: Optional[int] = None
    destination: Optional[int] = None

    def __post_init__(self) -> None:
        is_transfer = self.kind is TransactionKind.TRANSFER
        has_payload = self.transfer_key is not None or self.destination is not None
        if is_transfer != has_payload:
            raise ValueError(f"Inconsistent transaction type: {self!r}")

    @classmethod
    def expense(cls) -> "TransactionType":
        return cls(TransactionKind.EXPENSE)

    @classmethod
    def income(cls) -> "TransactionType":
        return cls(TransactionKind.INCOME)

    @classmethod
    def transfer(cls, transfer_key: int, destination: int) -> "TransactionType":
        return cls(TransactionKind.TRANSFER, transfer_key, destination)

    def __str__(self) -> str:
        return self.kind.value


# endregion Transaction type

# region Complexity


@dataclass(frozen=True)
class SimpleTransaction:
    """A single category, amount and memo."""

    category: Optional[int] = None
    amount: Decimal = Decimal(0)
    memo: Optional[str] = None

    @property
    def n(self) -> int:
        return 1

    @property
    def categories(self) -> list[Optional[int]]:
        return [self.category]

    @property
    def amounts(self) -> list[Decimal]:
        return [self.amount]

    @property
    def memos(self) -> list[Optional[str]]:
        return [self.memo]

    def subset(self, indices: Iterable[int]) -> Optional["SimpleTransaction"]:
        return self if set(indices) == {0} else None


@dataclass(frozen=True)
class SplitTransaction:
    """
    ``n`` aligned components; component ``i`` is
    ``(categories[i], amounts[i], memos[i])``.
    """

    categories: tuple[Optional[int], ...] = ()
    amounts: tuple[Decimal, ...] = ()
    memos: tuple[Optional[str], ...] = ()

    def __post_init__(self) -> None:
        if not len(self.categories) == len(self.amounts) == len(self.memos):
            raise ValueError(
                "Split components are not aligned: "
                f"{len(self.categories)} categories, {len(self.amounts)} amounts, "
                f"{len(self.memos)} memos"
            )

    @property
    def n(self) -> int:
        return len(self.categories)

    @property
    def total(self) -> Decimal:
        return sum(self.amounts, Decimal(0))

    def subset(self, indices: Iterable[int]) -> Optional["SplitTransaction"]:
        """
        Keep the selected components in their original order.

        An empty selection, or one with any index out of range, gives ``None``.
        """
        keep = sorted(set(indices))
        if not keep or keep[0] < 0 or keep[-1] >= self.n:
            return None
        return SplitTransaction(
            categories=tuple(self.categories[i] for i in keep),
            amounts=tuple(self.amounts[i] for i in keep),
            memos=tuple(self.memos[i] for i in keep),
        )


TransactionComplexity = Union[SimpleTransaction, SplitTransaction]

# endregion Complexity


@dataclass(frozen=True)
class HbTransaction:
    """
    A transaction (``<ope>``).

    ``amount`` is the stored total; for a split it is the sum of the parts
    as written in the file, and for a subset it is the sum of the selected
    parts.
    """

    # region Core Fields

    date: date = _MISSING_DATE
    amount: Decimal = Decimal(0)
    account: int = 0
    paymode: PayMode = PayMode.NONE
    status: TransactionStatus = TransactionStatus.NONE
    flags: Optional[int] = None
    payee: Optional[int] = None
    memo: Optional[str] = None
    info: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None
    txn_type: TransactionType = field(default_factory=TransactionType.expense)
    complexity: TransactionComplexity = field(default_factory=SimpleTransaction)

    # endregion Core Fields

    # region Accessors

    @property
    def is_split(self) -> bool:
        return isinstance(self.complexity, SplitTransaction)

    @property
    def num_splits(self) -> int:
        return self.complexity.n if self.is_split else 0

    @property
    def is_transfer(self) -> bool:
        return self.txn_type.kind is TransactionKind.TRANSFER

    @property
    def transfer_key(self) -> Optional[int]:
        return self.txn_type.transfer_key

    @property
    def transfer_destination(self) -> Optional[int]:
        return self.txn_type.destination

    @property
    def categories(self) -> list[Optional[int]]:
        return list(self.complexity.categories)

    @property
    def amounts(self) -> list[Decimal]:
        return list(self.complexity.amounts)

    @property
    def memos(self) -> list[Optional[str]]:
        return list(self.complexity.memos)

    # endregion Accessors

    # region Name resolution

    def category_names(self, db: "HomeBankDb") -> list[Optional[str]]:
        """Full name of each component's category, ``None`` where unresolved."""
        names: list[Optional[str]] = []
        for key in self.complexity.categories:
            cat = db.categories.get(key) if key is not None else None
            names.append(cat.full_name(db) if cat is not None else None)
        return names

    def account_name(self, db: "HomeBankDb") -> Optional[str]:
        acct = db.accounts.get(self.account)
        return acct.name if acct is not None else None

    def payee_name(self, db: "HomeBankDb") -> Optional[str]:
        if self.payee is None:
            return None
        pay = db.payees.get(self.payee)
        return pay.name if pay is not None else None

    # endregion Name resolution

    def subset(self, indices: Iterable[int]) -> Optional["HbTransaction"]:
        """
        Narrow this transaction to the selected components.

        A simple transaction survives only the selection ``{0}``; a split
        keeps the selected parts and its ``amount`` becomes their sum.
        """
        sub = self.complexity.subset(indices)
        if sub is None:
            return None
        if isinstance(sub, SplitTransaction):
            return replace(self, complexity=sub, amount=sub.total)
        return self

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {
            "date": self.date.isoformat(),
            "amount": str(self.amount),
            "account": str(self.account),
            "type": str(self.txn_type),
            "status": self.status.name,
            "paymode": self.paymode.name,
        }
        if self.payee is not None:
            d["payee"] = str(self.payee)
        if self.memo:
            d["memo"] = self.memo
        if self.info:
            d["info"] = self.info
        if self.tags:
            d["tags"] = list(self.tags)
        if self.is_split:
            d["splits"] = [
                {
                    "category": "" if c is None else str(c),
                    "amount": str(a),
                    "memo": m or "",
                }
                for c, a, m in zip(self.categories, self.amounts, self.memos)
            ]
        return d


if TYPE_CHECKING:
    _is_IToDict: type[IToDict] = HbTransaction
