# homebank_helper/__init__.py
"""
Read-only queries over HomeBank (``.xhb``) personal-finance databases.
"""

from .controllers import (
    BudgetQuery,
    BudgetSummary,
    DataSession,
    HomeBankDbError,
    ReviewQuery,
    TransactionQuery,
    budget_summary,
    load_database,
    sum_transactions,
)
from .data_model import HomeBankDb

__all__ = [
    "BudgetQuery",
    "BudgetSummary",
    "DataSession",
    "HomeBankDbError",
    "HomeBankDb",
    "ReviewQuery",
    "TransactionQuery",
    "budget_summary",
    "load_database",
    "sum_transactions",
]
