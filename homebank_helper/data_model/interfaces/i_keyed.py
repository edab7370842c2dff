# homebank_helper/data_model/interfaces/i_keyed.py
from __future__ import annotations

from typing import runtime_checkable

from typing_extensions import Protocol


@runtime_checkable
class IKeyed(Protocol):
    """Structural shape of any record stored in a keyed map of the database."""

    key: int
    name: str
