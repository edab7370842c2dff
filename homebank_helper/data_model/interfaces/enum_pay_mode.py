from __future__ import annotations

from enum import IntEnum


class PayMode(IntEnum):
    """
    Payment method of a transaction, indexed as stored in XHB ``paymode``.
    """

    NONE = 0
    CREDIT_CARD = 1
    CHEQUE = 2
    CASH = 3
    BANK_TRANSFER = 4
    DEBIT_CARD = 5
    STANDING_ORDER = 6
    ELECTRONIC_PAYMENT = 7
    DEPOSIT = 8
    FI_FEE = 9
    DIRECT_DEBIT = 10

    @classmethod
    def from_index(cls, index: int) -> "PayMode":
        try:
            return cls(index)
        except ValueError:
            raise ValueError(f"Unknown payment method index: {index}") from None

    @classmethod
    def from_str(cls, text: str) -> "PayMode":
        key = text.strip().lower()
        if key.isdigit():
            return cls.from_index(int(key))
        for member, aliases in _ALIASES.items():
            if key in aliases:
                return member
        raise ValueError(f"Unknown payment method: {text}")


_ALIASES = {
    PayMode.NONE: {"none"},
    PayMode.CREDIT_CARD: {"creditcard", "credit_card", "credit"},
    PayMode.CHEQUE: {"cheque", "check"},
    PayMode.CASH: {"cash"},
    PayMode.BANK_TRANSFER: {"banktransfer", "bank_transfer", "transfer"},
    PayMode.DEBIT_CARD: {"debitcard", "debit_card", "debit"},
    PayMode.STANDING_ORDER: {"standingorder", "standing_order"},
    PayMode.ELECTRONIC_PAYMENT: {
        "electronicpayment",
        "electronic_payment",
        "etransfer",
        "e-transfer",
    },
    PayMode.DEPOSIT: {"deposit"},
    PayMode.FI_FEE: {"fifee", "fi_fee", "fee"},
    PayMode.DIRECT_DEBIT: {"directdebit", "direct_debit"},
}
