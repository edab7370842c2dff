from __future__ import annotations

from enum import Enum


class TransactionKind(Enum):
    """
    The kind of a transaction type, without any transfer payload.

    Used to compare transaction types structurally.
    """

    EXPENSE = "Expense"
    INCOME = "Income"
    TRANSFER = "Transfer"

    @classmethod
    def from_str(cls, text: str) -> "TransactionKind":
        key = text.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.value[0].lower()):
                return member
        raise ValueError(f"Unknown transaction type: {text}")
