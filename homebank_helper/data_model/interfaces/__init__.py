# homebank_helper/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the HomeBank data model.
"""

from .enum_account_type import AccountType
from .enum_pay_mode import PayMode
from .enum_schedule_mode import ScheduleModeKind
from .enum_transaction_kind import TransactionKind
from .enum_transaction_status import TransactionStatus
from .i_keyed import IKeyed
from .i_to_dict import IToDict, RecursiveDictStr

__all__ = [
    "AccountType",
    "PayMode",
    "ScheduleModeKind",
    "TransactionKind",
    "TransactionStatus",
    "IKeyed",
    "IToDict",
    "RecursiveDictStr",
]
