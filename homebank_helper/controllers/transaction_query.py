# homebank_helper/controllers/transaction_query.py
"""
Transaction filtering.

A :class:`TransactionQuery` is a bag of optional predicates. Every predicate
that is set must accept a transaction for it to be kept; the category
predicate runs last and may narrow a split transaction down to the parts
whose category matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from homebank_helper.data_model import (
    HbTransaction,
    HomeBankDb,
    PayMode,
    TransactionKind,
    TransactionStatus,
)
from homebank_helper.utilities.core_util import RegexLike, compile_regex


def _search(pattern: Optional[re.Pattern[str]], text: Optional[str]) -> bool:
    """Unset pattern accepts everything; absent text never matches a set pattern."""
    if pattern is None:
        return True
    if text is None:
        return False
    return pattern.search(text) is not None


@dataclass(frozen=True)
class TransactionQuery:
    """
    Optional predicates over transactions, AND-ed together.

    Date and amount bounds are half-open: ``from`` is included, ``to`` is
    excluded. Regex fields take a pattern string or a compiled pattern.
    """

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    amount_from: Optional[Decimal] = None
    amount_to: Optional[Decimal] = None
    status: Optional[frozenset[TransactionStatus]] = None
    category: Optional[RegexLike] = None
    payee: Optional[RegexLike] = None
    account: Optional[RegexLike] = None
    paymode: Optional[frozenset[PayMode]] = None
    memo: Optional[RegexLike] = None
    info: Optional[RegexLike] = None
    tags: Optional[RegexLike] = None
    txn_type: Optional[frozenset[TransactionKind]] = None

    def __post_init__(self) -> None:
        # normalise regex and set fields in place on the frozen instance
        for name in ("category", "payee", "account", "memo", "info", "tags"):
            object.__setattr__(self, name, compile_regex(getattr(self, name)))
        for name in ("status", "paymode", "txn_type"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, frozenset(value))

    # region Predicates

    def filter_date_from(self, tr: HbTransaction) -> bool:
        return self.date_from is None or tr.date >= self.date_from

    def filter_date_to(self, tr: HbTransaction) -> bool:
        return self.date_to is None or tr.date < self.date_to

    def filter_amount_from(self, tr: HbTransaction) -> bool:
        return self.amount_from is None or tr.amount >= self.amount_from

    def filter_amount_to(self, tr: HbTransaction) -> bool:
        return self.amount_to is None or tr.amount < self.amount_to

    def filter_status(self, tr: HbTransaction) -> bool:
        return self.status is None or tr.status in self.status

    def filter_paymode(self, tr: HbTransaction) -> bool:
        return self.paymode is None or tr.paymode in self.paymode

    def filter_txn_type(self, tr: HbTransaction) -> bool:
        return self.txn_type is None or tr.txn_type.kind in self.txn_type

    def filter_payee(self, tr: HbTransaction, db: HomeBankDb) -> bool:
        if self.payee is None:
            return True
        return _search(self.payee, tr.payee_name(db))

    def filter_account(self, tr: HbTransaction, db: HomeBankDb) -> bool:
        if self.account is None:
            return True
        return _search(self.account, tr.account_name(db))

    def filter_memo(self, tr: HbTransaction) -> bool:
        return _search(self.memo, tr.memo)

    def filter_info(self, tr: HbTransaction) -> bool:
        return _search(self.info, tr.info)

    def filter_tags(self, tr: HbTransaction) -> bool:
        if self.tags is None:
            return True
        joined = ",".join(tr.tags) if tr.tags else None
        return _search(self.tags, joined)

    def filter_category(
        self, tr: HbTransaction, db: HomeBankDb
    ) -> Optional[HbTransaction]:
        """
        Keep only the components whose category full name matches.

        Returns the transaction unchanged when no category pattern is set and
        ``None`` when nothing matches. Unresolved categories never match.
        """
        if self.category is None:
            return tr
        matching = [
            i
            for i, name in enumerate(tr.category_names(db))
            if _search(self.category, name)
        ]
        return tr.subset(matching)

    # endregion Predicates

    def accepts(self, tr: HbTransaction, db: HomeBankDb) -> bool:
        return (
            self.filter_date_from(tr)
            and self.filter_date_to(tr)
            and self.filter_amount_from(tr)
            and self.filter_amount_to(tr)
            and self.filter_status(tr)
            and self.filter_payee(tr, db)
            and self.filter_account(tr, db)
            and self.filter_paymode(tr)
            and self.filter_memo(tr)
            and self.filter_info(tr)
            and self.filter_tags(tr)
            and self.filter_txn_type(tr)
        )

    def exec(self, db: HomeBankDb) -> list[HbTransaction]:
        out: list[HbTransaction] = []
        for tr in db.transactions:
            if not self.accepts(tr, db):
                continue
            narrowed = self.filter_category(tr, db)
            if narrowed is not None:
                out.append(narrowed)
        return out


def sum_transactions(txns: Iterable[HbTransaction]) -> Decimal:
    """Total ``amount`` of the transactions (already narrowed by any query)."""
    return sum((tr.amount for tr in txns), Decimal(0))
