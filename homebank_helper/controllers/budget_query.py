# homebank_helper/controllers/budget_query.py
"""
Budget progress per category.

Nothing in here reads the clock: callers pass the interval, and
:func:`default_budget_interval` turns an injected ``today`` into the
current-month interval the command line uses by default.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Optional

from homebank_helper.data_model import HbCategory, HomeBankDb
from homebank_helper.utilities import add_months, first_of_month
from homebank_helper.utilities.core_util import (
    RegexLike,
    compile_regex,
    exact_name_regex,
)

from .transaction_query import TransactionQuery, sum_transactions

_CENT = Decimal("0.01")


def default_budget_interval(today: date) -> tuple[date, date]:
    """``(first of today's month, first of the next month)``."""
    start = first_of_month(today)
    return start, add_months(start, 1)


@dataclass(frozen=True)
class BudgetSummary:
    """Spending against the allotment of one category over an interval."""

    name: str
    progress: Decimal
    allotment: Optional[Decimal]

    @property
    def progress_frac(self) -> Optional[Decimal]:
        if self.allotment is None or self.allotment == 0:
            return None
        return self.progress / self.allotment

    @property
    def progress_rounded(self) -> Decimal:
        return self.progress.quantize(_CENT, rounding=ROUND_HALF_EVEN)

    @property
    def allotment_rounded(self) -> Optional[Decimal]:
        if self.allotment is None:
            return None
        return self.allotment.quantize(_CENT, rounding=ROUND_HALF_EVEN)


def budget_summary(
    db: HomeBankDb, category: HbCategory, date_from: date, date_to: date
) -> BudgetSummary:
    """
    Summarise ``category`` over ``[date_from, date_to)``.

    Progress only counts transaction parts filed under exactly this
    category, not under its sub-categories.
    """
    full_name = category.full_name(db)
    allotment = category.budget.amount_over_interval(date_from, date_to)
    query = TransactionQuery(
        date_from=date_from,
        date_to=date_to,
        category=exact_name_regex(full_name),
    )
    progress = sum_transactions(query.exec(db))
    return BudgetSummary(full_name, progress, allotment)


@dataclass(frozen=True)
class BudgetQuery:
    """
    Summaries for every budgeted category whose full name matches ``name``.
    """

    date_from: date
    date_to: date
    name: Optional[RegexLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", compile_regex(self.name))

    def exec(self, db: HomeBankDb) -> list[BudgetSummary]:
        pattern = self.name
        chosen = [
            c
            for c in db.categories.values()
            if c.has_budget()
            and (pattern is None or pattern.search(c.full_name(db)) is not None)
        ]
        chosen.sort(key=lambda c: c.full_name(db))
        return [budget_summary(db, c, self.date_from, self.date_to) for c in chosen]
