# homebank_helper/controllers/frames.py
from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from homebank_helper.data_model import HbTransaction, HomeBankDb
from homebank_helper.data_model.interfaces import IToDict

from .budget_query import BudgetSummary
from .review_query import ReviewRow

TRANSACTION_COLUMNS = [
    "date",
    "account",
    "payee",
    "category",
    "amount",
    "type",
    "status",
    "paymode",
    "memo",
    "info",
    "tags",
]

SUMMARY_COLUMNS = ["name", "progress", "allotment", "progress_frac"]

REVIEW_COLUMNS = ["category", "subcategory", "count", "total"]


def transactions_frame(db: HomeBankDb, txns: Iterable[HbTransaction]) -> pd.DataFrame:
    """Tabulate transactions with their keys resolved to names.

    Parameters
    ----------
    db : HomeBankDb
        Database used to resolve account, payee and category keys.
    txns : Iterable[HbTransaction]
        Transactions to tabulate, typically the result of a query.

    Returns
    -------
    pandas.DataFrame
        One row per transaction in the order given. Split categories are
        joined with ``"; "``; unresolved names are empty strings. Amounts are
        kept as ``Decimal`` (object dtype).
    """
    rows = []
    for tr in txns:
        rows.append(
            {
                "date": tr.date,
                "account": tr.account_name(db) or "",
                "payee": tr.payee_name(db) or "",
                "category": "; ".join(n or "" for n in tr.category_names(db)),
                "amount": tr.amount,
                "type": str(tr.txn_type),
                "status": tr.status.name,
                "paymode": tr.paymode.name,
                "memo": tr.memo or "",
                "info": tr.info or "",
                "tags": ",".join(tr.tags) if tr.tags else "",
            }
        )
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


def summaries_frame(summaries: Iterable[BudgetSummary]) -> pd.DataFrame:
    """One row per budget summary; absent allotment or fraction is ``None``."""
    rows = [
        {
            "name": s.name,
            "progress": s.progress_rounded,
            "allotment": s.allotment_rounded,
            "progress_frac": s.progress_frac,
        }
        for s in summaries
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def review_frame(rows: Iterable[ReviewRow]) -> pd.DataFrame:
    data = [
        {
            "category": r.category,
            "subcategory": r.subcategory or "",
            "count": r.count,
            "total": r.total,
        }
        for r in rows
    ]
    return pd.DataFrame(data, columns=REVIEW_COLUMNS)


def records_frame(records: Sequence[IToDict]) -> pd.DataFrame:
    """Tabulate any records that expose ``to_dict`` (accounts, payees, ...)."""
    return pd.DataFrame([r.to_dict() for r in records])
