from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..interfaces import IKeyed, IToDict, PayMode, RecursiveDictStr

if TYPE_CHECKING:
    from .hb_database import HomeBankDb


@dataclass(frozen=True)
class HbPayee:
    """
    A payee (``<pay>``), optionally with a default category and payment method.
    """

    key: int = 0
    name: str = ""
    category: Optional[int] = None
    paymode: Optional[PayMode] = None

    def category_name(self, db: "HomeBankDb") -> Optional[str]:
        if self.category is None:
            return None
        cat = db.categories.get(self.category)
        return cat.full_name(db) if cat is not None else None

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        d: dict[str, RecursiveDictStr] = {"key": str(self.key), "name": self.name}
        if self.paymode is not None:
            d["paymode"] = self.paymode.name
        return d


if TYPE_CHECKING:
    _is_IKeyed: type[IKeyed] = HbPayee
    _is_IToDict: type[IToDict] = HbPayee
