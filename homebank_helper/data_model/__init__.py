# homebank_helper/data_model/__init__.py
from .hb_wrapper import (
    CategoryBudget,
    DbProperties,
    DbSchema,
    HbAccount,
    HbCategory,
    HbCurrency,
    HbGroup,
    HbPayee,
    HbTransaction,
    HomeBankDb,
    LoadReport,
    ScheduleMode,
    SimpleTransaction,
    SplitTransaction,
    TransactionType,
)
from .interfaces import (
    AccountType,
    PayMode,
    ScheduleModeKind,
    TransactionKind,
    TransactionStatus,
)

__all__ = [
    "CategoryBudget", "DbProperties", "DbSchema", "HbAccount", "HbCategory",
    "HbCurrency", "HbGroup", "HbPayee", "HbTransaction", "HomeBankDb",
    "LoadReport", "ScheduleMode", "SimpleTransaction", "SplitTransaction",
    "TransactionType", "AccountType", "PayMode", "ScheduleModeKind",
    "TransactionKind", "TransactionStatus"]
