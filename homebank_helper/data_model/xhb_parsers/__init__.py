# homebank_helper/data_model/xhb_parsers/__init__.py
from .decode_errors import (
    AccountDecodeError,
    CategoryDecodeError,
    ConflictingSimpleSplitError,
    CurrencyDecodeError,
    DecodeError,
    GroupDecodeError,
    InvalidTransferError,
    MismatchedSplitError,
    PayeeDecodeError,
    PropertiesDecodeError,
    SchemaDecodeError,
    TransactionDecodeError,
)
from .entity_decoders import (
    decode_account,
    decode_category,
    decode_currency,
    decode_group,
    decode_payee,
    decode_properties,
    decode_schema,
)
from .transaction_decoder import decode_transaction
from .xhb_file_parser import XhbFileParser, build_database

__all__ = [
    "DecodeError",
    "AccountDecodeError",
    "CategoryDecodeError",
    "CurrencyDecodeError",
    "GroupDecodeError",
    "PayeeDecodeError",
    "PropertiesDecodeError",
    "SchemaDecodeError",
    "TransactionDecodeError",
    "ConflictingSimpleSplitError",
    "MismatchedSplitError",
    "InvalidTransferError",
    "decode_account",
    "decode_category",
    "decode_currency",
    "decode_group",
    "decode_payee",
    "decode_properties",
    "decode_schema",
    "decode_transaction",
    "XhbFileParser",
    "build_database",
]
