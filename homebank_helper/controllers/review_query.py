# homebank_helper/controllers/review_query.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from homebank_helper.data_model import HomeBankDb
from homebank_helper.utilities.core_util import exact_name_regex

from .transaction_query import TransactionQuery, sum_transactions


@dataclass(frozen=True)
class ReviewRow:
    category: str
    subcategory: Optional[str]
    count: int
    total: Decimal


@dataclass(frozen=True)
class ReviewQuery:
    """
    Spending per (sub)category over ``[date_from, date_to)``.

    A sub-category row is reported under its parent's name; parts filed
    under a sub-category do not count towards the parent's row.
    """

    date_from: date
    date_to: date
    exclude_empty: bool = False

    def exec(self, db: HomeBankDb) -> list[ReviewRow]:
        rows: list[ReviewRow] = []
        for cat in db.categories.values():
            query = TransactionQuery(
                date_from=self.date_from,
                date_to=self.date_to,
                category=exact_name_regex(cat.full_name(db)),
            )
            found = query.exec(db)
            if self.exclude_empty and not found:
                continue
            parent = cat.parent_name(db)
            if parent is None:
                row = ReviewRow(cat.name, None, len(found), sum_transactions(found))
            else:
                row = ReviewRow(parent, cat.name, len(found), sum_transactions(found))
            rows.append(row)
        rows.sort(key=lambda r: (r.category, r.subcategory or ""))
        return rows
