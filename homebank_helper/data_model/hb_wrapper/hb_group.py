from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..interfaces import IKeyed, IToDict, RecursiveDictStr


@dataclass(frozen=True)
class HbGroup:
    """An account group (``<grp>``)."""

    key: int = 0
    name: str = ""

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {"key": str(self.key), "name": self.name}


if TYPE_CHECKING:
    _is_IKeyed: type[IKeyed] = HbGroup
    _is_IToDict: type[IToDict] = HbGroup
