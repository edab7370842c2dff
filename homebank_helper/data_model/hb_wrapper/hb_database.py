from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from .hb_account import HbAccount
from .hb_category import HbCategory
from .hb_currency import HbCurrency
from .hb_group import HbGroup
from .hb_payee import HbPayee
from .hb_properties import DbProperties, DbSchema
from .hb_transaction import HbTransaction


@dataclass
class LoadReport:
    """
    Per-element tallies of one load.

    ``decoded`` counts records that made it into the database and
    ``dropped`` counts elements rejected by their decoder, both keyed by
    XML tag.
    """

    decoded: Counter[str] = field(default_factory=Counter)
    dropped: Counter[str] = field(default_factory=Counter)

    @property
    def total_dropped(self) -> int:
        return sum(self.dropped.values())

    def __str__(self) -> str:
        kept = ", ".join(f"{k}={v}" for k, v in sorted(self.decoded.items()))
        lost = ", ".join(f"{k}={v}" for k, v in sorted(self.dropped.items()))
        return f"decoded: [{kept}] dropped: [{lost}]"


@dataclass
class HomeBankDb:
    """
    The whole database in memory.

    Keyed maps hold the last record seen for each key; ``transactions`` keeps
    file order. Nothing here is modified once the builder returns it.
    """

    schema: DbSchema = field(default_factory=DbSchema)
    properties: DbProperties = field(default_factory=DbProperties)
    currencies: dict[int, HbCurrency] = field(default_factory=dict)
    groups: dict[int, HbGroup] = field(default_factory=dict)
    accounts: dict[int, HbAccount] = field(default_factory=dict)
    payees: dict[int, HbPayee] = field(default_factory=dict)
    categories: dict[int, HbCategory] = field(default_factory=dict)
    transactions: list[HbTransaction] = field(default_factory=list)
    report: LoadReport = field(default_factory=LoadReport)
