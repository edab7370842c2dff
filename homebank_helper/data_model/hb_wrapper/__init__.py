# homebank_helper/data_model/hb_wrapper/__init__.py

from .hb_account import HbAccount
from .hb_category import CategoryBudget, HbCategory
from .hb_currency import HbCurrency
from .hb_database import HomeBankDb, LoadReport
from .hb_group import HbGroup
from .hb_payee import HbPayee
from .hb_properties import DbProperties, DbSchema, ScheduleMode
from .hb_transaction import (
    HbTransaction,
    SimpleTransaction,
    SplitTransaction,
    TransactionComplexity,
    TransactionType,
)

__all__ = [
    "HbAccount",
    "CategoryBudget",
    "HbCategory",
    "HbCurrency",
    "HomeBankDb",
    "LoadReport",
    "HbGroup",
    "HbPayee",
    "DbProperties",
    "DbSchema",
    "ScheduleMode",
    "HbTransaction",
    "SimpleTransaction",
    "SplitTransaction",
    "TransactionComplexity",
    "TransactionType",
]
