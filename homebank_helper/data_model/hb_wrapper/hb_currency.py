from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from ..interfaces import IKeyed, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class HbCurrency:
    """
    A currency declared in the database (``<cur>``).
    """

    key: int = 0
    flags: int = 0
    iso: str = ""
    name: str = ""
    symbol: str = "$"
    symbol_prefix: bool = False
    decimal_char: str = "."
    group_char: str = " "
    frac_digits: int = 2
    rate: Decimal = Decimal(1)
    modified: Optional[date] = None

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "key": str(self.key),
            "iso": self.iso,
            "name": self.name,
            "symbol": self.symbol,
            "rate": str(self.rate),
        }


if TYPE_CHECKING:
    _is_IKeyed: type[IKeyed] = HbCurrency
    _is_IToDict: type[IToDict] = HbCurrency
