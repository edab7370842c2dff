from __future__ import annotations

from enum import IntEnum


class TransactionStatus(IntEnum):
    """
    Review status of a transaction, indexed as stored in XHB ``st``.
    """

    NONE = 0
    CLEARED = 1
    RECONCILED = 2
    REMIND = 3
    VOID = 4

    @classmethod
    def from_index(cls, index: int) -> "TransactionStatus":
        try:
            return cls(index)
        except ValueError:
            raise ValueError(f"Unknown transaction status index: {index}") from None

    @classmethod
    def from_str(cls, text: str) -> "TransactionStatus":
        key = text.strip()
        if key.isdigit():
            return cls.from_index(int(key))
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown transaction status: {text}") from None
