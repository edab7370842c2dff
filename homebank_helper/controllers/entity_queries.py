# homebank_helper/controllers/entity_queries.py
"""
Name-based queries over the keyed maps of a :class:`HomeBankDb`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from homebank_helper.data_model import (
    AccountType,
    HbAccount,
    HbCategory,
    HbCurrency,
    HbGroup,
    HbPayee,
    HomeBankDb,
)
from homebank_helper.utilities.core_util import RegexLike, compile_regex


def _matches(pattern: Optional[re.Pattern[str]], text: Optional[str]) -> bool:
    if pattern is None:
        return True
    return text is not None and pattern.search(text) is not None


@dataclass(frozen=True)
class AccountQuery:
    """
    Accounts by name, type, group name and institution.

    An account with no group, or one whose group key does not resolve, never
    matches a group pattern.
    """

    name: Optional[RegexLike] = None
    types: Optional[frozenset[AccountType]] = None
    group: Optional[RegexLike] = None
    institution: Optional[RegexLike] = None

    def __post_init__(self) -> None:
        for attr in ("name", "group", "institution"):
            object.__setattr__(self, attr, compile_regex(getattr(self, attr)))
        if self.types is not None:
            object.__setattr__(self, "types", frozenset(self.types))

    def accepts(self, acct: HbAccount, db: HomeBankDb) -> bool:
        return (
            _matches(self.name, acct.name)
            and (self.types is None or acct.account_type in self.types)
            and _matches(self.group, acct.group_name(db))
            and _matches(self.institution, acct.institution)
        )

    def exec(self, db: HomeBankDb) -> list[HbAccount]:
        return [a for a in db.accounts.values() if self.accepts(a, db)]


@dataclass(frozen=True)
class CategoryQuery:
    """Categories whose full name (``Parent:Child``) matches, sorted by full name."""

    name: Optional[RegexLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", compile_regex(self.name))

    def exec(self, db: HomeBankDb) -> list[HbCategory]:
        found = [
            c for c in db.categories.values() if _matches(self.name, c.full_name(db))
        ]
        return sorted(found, key=lambda c: c.full_name(db))


@dataclass(frozen=True)
class CurrencyQuery:
    name: Optional[RegexLike] = None
    iso: Optional[RegexLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", compile_regex(self.name))
        object.__setattr__(self, "iso", compile_regex(self.iso))

    def exec(self, db: HomeBankDb) -> list[HbCurrency]:
        return [
            c
            for c in db.currencies.values()
            if _matches(self.name, c.name) and _matches(self.iso, c.iso)
        ]


@dataclass(frozen=True)
class GroupQuery:
    name: Optional[RegexLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", compile_regex(self.name))

    def exec(self, db: HomeBankDb) -> list[HbGroup]:
        return [g for g in db.groups.values() if _matches(self.name, g.name)]


@dataclass(frozen=True)
class PayeeQuery:
    name: Optional[RegexLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", compile_regex(self.name))

    def exec(self, db: HomeBankDb) -> list[HbPayee]:
        return [p for p in db.payees.values() if _matches(self.name, p.name)]
