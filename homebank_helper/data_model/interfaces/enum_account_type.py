from __future__ import annotations

from enum import IntEnum


class AccountType(IntEnum):
    """
    Enum representing the kind of an account, indexed as stored in XHB ``type``.
    """

    NONE = 0
    BANK = 1
    CASH = 2
    ASSET = 3
    CREDIT_CARD = 4
    LIABILITY = 5
    CHEQUING = 6
    SAVINGS = 7

    @classmethod
    def from_index(cls, index: int) -> "AccountType":
        try:
            return cls(index)
        except ValueError:
            raise ValueError(f"Unknown account type index: {index}") from None

    @classmethod
    def from_str(cls, text: str) -> "AccountType":
        """Parse a user-facing name or alias (``Bank``, ``cc``, ``checking``, ``3``)."""
        key = text.strip().lower()
        if key.isdigit():
            return cls.from_index(int(key))
        for member, aliases in _ALIASES.items():
            if key in aliases:
                return member
        raise ValueError(f"Unknown account type: {text}")


_ALIASES = {
    AccountType.NONE: {"none", "n"},
    AccountType.BANK: {"bank", "b"},
    AccountType.CASH: {"cash", "ca"},
    AccountType.ASSET: {"asset", "a"},
    AccountType.CREDIT_CARD: {"credit", "creditcard", "credit_card", "cc"},
    AccountType.LIABILITY: {"liability", "l"},
    AccountType.CHEQUING: {"chequing", "checking", "ch"},
    AccountType.SAVINGS: {"savings", "s"},
}
