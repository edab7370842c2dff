# homebank_helper/controllers/__init__.py
from .budget_query import (
    BudgetQuery,
    BudgetSummary,
    budget_summary,
    default_budget_interval,
)
from .data_session import DataSession
from .entity_queries import (
    AccountQuery,
    CategoryQuery,
    CurrencyQuery,
    GroupQuery,
    PayeeQuery,
)
from .frames import records_frame, review_frame, summaries_frame, transactions_frame
from .review_query import ReviewQuery, ReviewRow
from .transaction_query import TransactionQuery, sum_transactions
from .xhb_loader import (
    CouldNotOpenError,
    CouldNotParseError,
    CouldNotReadError,
    DoesNotExistError,
    HomeBankDbError,
    load_database,
)

__all__ = [
    "BudgetQuery",
    "BudgetSummary",
    "budget_summary",
    "default_budget_interval",
    "DataSession",
    "AccountQuery",
    "CategoryQuery",
    "CurrencyQuery",
    "GroupQuery",
    "PayeeQuery",
    "records_frame",
    "review_frame",
    "summaries_frame",
    "transactions_frame",
    "ReviewQuery",
    "ReviewRow",
    "TransactionQuery",
    "sum_transactions",
    "CouldNotOpenError",
    "CouldNotParseError",
    "CouldNotReadError",
    "DoesNotExistError",
    "HomeBankDbError",
    "load_database",
]
