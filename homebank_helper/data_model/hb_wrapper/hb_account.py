from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Final, Optional

from ..interfaces import AccountType, IKeyed, IToDict, RecursiveDictStr

if TYPE_CHECKING:
    from .hb_database import HomeBankDb

# Bits of the ``flags`` attribute of an ``<account>``.
AF_CLOSED: Final[int] = 1 << 1
AF_NOSUMMARY: Final[int] = 1 << 4
AF_NOBUDGET: Final[int] = 1 << 5
AF_NOREPORT: Final[int] = 1 << 6


@dataclass(frozen=True)
class HbAccount:
    """
    An account (``<account>``).

    ``currency`` and ``group`` are keys into the database; they are only
    resolved on demand and a dangling key simply resolves to ``None``.
    """

    key: int = 0
    flags: int = 0
    pos: int = 0
    account_type: AccountType = AccountType.NONE
    currency: int = 0
    name: str = ""
    institution: str = ""
    initial: Decimal = Decimal(0)
    minimum: Decimal = Decimal(0)
    maximum: Decimal = Decimal(0)
    notes: str = ""
    group: Optional[int] = None
    reconciled: Optional[date] = None

    # region Flags

    @property
    def closed(self) -> bool:
        return bool(self.flags & AF_CLOSED)

    @property
    def no_summary(self) -> bool:
        return bool(self.flags & AF_NOSUMMARY)

    @property
    def no_budget(self) -> bool:
        return bool(self.flags & AF_NOBUDGET)

    @property
    def no_report(self) -> bool:
        return bool(self.flags & AF_NOREPORT)

    # endregion Flags

    def group_name(self, db: "HomeBankDb") -> Optional[str]:
        if self.group is None:
            return None
        grp = db.groups.get(self.group)
        return grp.name if grp is not None else None

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "key": str(self.key),
            "name": self.name,
            "type": self.account_type.name,
            "institution": self.institution,
            "initial": str(self.initial),
            "closed": str(self.closed),
        }


if TYPE_CHECKING:
    _is_IKeyed: type[IKeyed] = HbAccount
    _is_IToDict: type[IToDict] = HbAccount
