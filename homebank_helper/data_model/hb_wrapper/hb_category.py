from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Final, Optional

from ...utilities import first_of_months
from ..interfaces import IKeyed, IToDict, RecursiveDictStr

if TYPE_CHECKING:
    from .hb_database import HomeBankDb

# Bits of the ``flags`` attribute of a ``<cat>``.
GF_SUB: Final[int] = 1 << 0
GF_INCOME: Final[int] = 1 << 1
GF_CUSTOM: Final[int] = 1 << 2
GF_BUDGET: Final[int] = 1 << 3
GF_FORCED: Final[int] = 1 << 4

BUDGET_SLOTS: Final[int] = 13


@dataclass(frozen=True)
class CategoryBudget:
    """
    The budget of a category.

    Slot 0 (``b0``) applies to every month and, when set, takes precedence
    over slots 1..12 (``b1``..``b12``, January..December).
    """

    slots: tuple[Optional[Decimal], ...] = field(
        default_factory=lambda: (None,) * BUDGET_SLOTS
    )

    def __post_init__(self) -> None:
        if len(self.slots) != BUDGET_SLOTS:
            raise ValueError(
                f"A budget has {BUDGET_SLOTS} slots, got {len(self.slots)}"
            )

    @classmethod
    def from_mapping(cls, values: dict[int, Decimal]) -> "CategoryBudget":
        slots: list[Optional[Decimal]] = [None] * BUDGET_SLOTS
        for index, amount in values.items():
            if not 0 <= index < BUDGET_SLOTS:
                raise ValueError(f"Budget slot out of range: {index}")
            slots[index] = amount
        return cls(tuple(slots))

    @property
    def every_month(self) -> Optional[Decimal]:
        return self.slots[0]

    def is_empty(self) -> bool:
        return all(s is None for s in self.slots)

    def amount(self, month: int) -> Optional[Decimal]:
        """The budget for ``month`` (1..12); ``None`` for any other index."""
        if not 1 <= month <= 12:
            return None
        if self.every_month is not None:
            return self.every_month
        return self.slots[month]

    def amount_over_interval(self, date_from: date, date_to: date) -> Optional[Decimal]:
        """
        Total budget for every month starting in ``[date_from, date_to)``.

        Only the first day of a month counts: an interval that does not
        contain one sums to ``0``. An empty budget gives ``None``.
        """
        if self.is_empty():
            return None
        total = Decimal(0)
        for first in first_of_months(date_from, date_to):
            monthly = self.amount(first.month)
            if monthly is not None:
                total += monthly
        return total


@dataclass(frozen=True)
class HbCategory:
    """
    A category (``<cat>``); ``parent`` is the key of the parent category.
    """

    key: int = 0
    flags: int = 0
    name: str = ""
    parent: Optional[int] = None
    budget: CategoryBudget = field(default_factory=CategoryBudget)

    @property
    def is_income(self) -> bool:
        return bool(self.flags & GF_INCOME)

    def has_budget(self) -> bool:
        return not self.budget.is_empty()

    def parent_name(self, db: "HomeBankDb") -> Optional[str]:
        if self.parent is None:
            return None
        parent = db.categories.get(self.parent)
        return parent.name if parent is not None else None

    def full_name(self, db: "HomeBankDb") -> str:
        """``Parent:Child`` when the parent resolves, else just the name."""
        parent = self.parent_name(db)
        return f"{parent}:{self.name}" if parent is not None else self.name

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {"key": str(self.key), "name": self.name}
        if self.parent is not None:
            d["parent"] = str(self.parent)
        if self.has_budget():
            d["budget"] = [
                "" if s is None else str(s) for s in self.budget.slots
            ]
        return d


if TYPE_CHECKING:
    _is_IKeyed: type[IKeyed] = HbCategory
    _is_IToDict: type[IToDict] = HbCategory
