# homebank_helper/data_model/xhb_parsers/decode_errors.py
"""
Errors raised while turning XHB element attributes into records.

Every decoder raises a subclass of :class:`DecodeError` naming the attribute
that failed and the raw text it held. The builder catches these per element,
so a bad record is dropped without aborting the load.
"""

from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """An element attribute could not be decoded."""

    entity = "record"

    def __init__(self, field: str, value: Optional[str] = None, reason: str = ""):
        self.field = field
        self.value = value
        self.reason = reason
        msg = f"Invalid {self.entity} field {field!r}"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class CurrencyDecodeError(DecodeError):
    entity = "currency"


class GroupDecodeError(DecodeError):
    entity = "group"


class AccountDecodeError(DecodeError):
    entity = "account"


class PayeeDecodeError(DecodeError):
    entity = "payee"


class CategoryDecodeError(DecodeError):
    entity = "category"


class PropertiesDecodeError(DecodeError):
    entity = "properties"


class SchemaDecodeError(DecodeError):
    entity = "schema"


class TransactionDecodeError(DecodeError):
    entity = "transaction"


class ConflictingSimpleSplitError(TransactionDecodeError):
    """``category`` and ``scat``/``samt``/``smem`` on the same transaction."""

    def __init__(self, field: str, value: Optional[str] = None):
        super().__init__(field, value, "simple and split information conflict")


class MismatchedSplitError(TransactionDecodeError):
    """Split lists of different lengths on one transaction."""

    def __init__(self, field: str, expected: int, found: int, value: Optional[str] = None):
        self.expected = expected
        self.found = found
        super().__init__(field, value, f"expected {expected} splits, found {found}")


class InvalidTransferError(TransactionDecodeError):
    """A transfer whose ``kxfer`` or ``dst_account`` is missing or ``0``."""

    def __init__(self, field: str, value: Optional[str] = None):
        super().__init__(field, value, "transfers need a non-zero key and destination")
