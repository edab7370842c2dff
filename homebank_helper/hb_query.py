#!/usr/bin/env python3
"""
hb_query.py: query a HomeBank ``.xhb`` database from the command line.

Usage:
  hb-query [-f FILE] [--csv] [--log-level LEVEL] query accounts [-n RE] [-T TYPE] [-g RE] [-i RE]
  hb-query [-f FILE] query categories|currencies|groups|payees [-n RE]
  hb-query [-f FILE] query transactions [transaction filters]
  hb-query [-f FILE] sum [transaction filters]
  hb-query [-f FILE] budget [NAME] [-d DATE] [-D DATE]
  hb-query [-f FILE] review [-d DATE] [-D DATE] [-x]

FILE defaults to the HOMEBANK_XHB environment variable. Dates are
``YYYY-MM-DD``; budget and review default to the current month.
"""

from __future__ import annotations

import argparse
import logging
import logging.config
import os
import re
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

import pandas as pd

from homebank_helper.controllers import (
    AccountQuery,
    BudgetQuery,
    CategoryQuery,
    CurrencyQuery,
    DataSession,
    GroupQuery,
    HomeBankDbError,
    PayeeQuery,
    ReviewQuery,
    TransactionQuery,
    default_budget_interval,
    records_frame,
    review_frame,
    summaries_frame,
    sum_transactions,
    transactions_frame,
)
from homebank_helper.data_model import (
    AccountType,
    HomeBankDb,
    PayMode,
    TransactionKind,
    TransactionStatus,
)
from homebank_helper.utilities import logging_config, parse_amount

log = logging.getLogger(__name__)

ENV_FILE = "HOMEBANK_XHB"

_SESSION = DataSession()


# region Argument types


def _regex(text: str) -> re.Pattern[str]:
    try:
        return re.compile(text)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regex {text!r}: {e}") from e


def _date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {text!r} (YYYY-MM-DD)") from e


def _amount(text: str) -> Decimal:
    try:
        return parse_amount(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _enum_arg(from_str: Callable[[str], object]) -> Callable[[str], object]:
    def convert(text: str) -> object:
        try:
            return from_str(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    return convert


# endregion Argument types

# region Parser


def _add_interval_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("-d", "--date-from", type=_date, metavar="date",
                    help="Start of the interval (included); default: first of this month")
    ap.add_argument("-D", "--date-to", type=_date, metavar="date",
                    help="End of the interval (excluded); default: first of next month")


def _add_transaction_filters(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("-d", "--date-from", type=_date, metavar="date",
                    help="Include transactions on or after this date")
    ap.add_argument("-D", "--date-to", type=_date, metavar="date",
                    help="Include transactions before this date")
    ap.add_argument("-l", "--amount-lower", type=_amount, metavar="amount",
                    help="Include amounts greater than or equal to this")
    ap.add_argument("-u", "--amount-upper", type=_amount, metavar="amount",
                    help="Include amounts less than this")
    ap.add_argument("-s", "--status", type=_enum_arg(TransactionStatus.from_str),
                    action="append", metavar="status",
                    help="Include this status (repeatable): None, Cleared, Reconciled, Remind, Void")
    ap.add_argument("-c", "--category", type=_regex, metavar="regex",
                    help="Include transaction parts whose category full name matches")
    ap.add_argument("-p", "--payee", type=_regex, metavar="regex")
    ap.add_argument("-a", "--account", type=_regex, metavar="regex")
    ap.add_argument("-M", "--method", type=_enum_arg(PayMode.from_str),
                    action="append", metavar="method",
                    help="Include this payment method (repeatable)")
    ap.add_argument("-m", "--memo", type=_regex, metavar="regex")
    ap.add_argument("-i", "--info", type=_regex, metavar="regex")
    ap.add_argument("-t", "--tag", type=_regex, metavar="regex",
                    help="Match against the comma-joined tags")
    ap.add_argument("-T", "--type", type=_enum_arg(TransactionKind.from_str),
                    action="append", metavar="type",
                    help="Include this transaction type (repeatable): Expense, Income, Transfer")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hb-query", description="Query a HomeBank (.xhb) database."
    )
    ap.add_argument("-f", "--file", type=Path,
                    help=f"Path to the .xhb file (default: ${ENV_FILE})")
    ap.add_argument("--csv", action="store_true", help="Print CSV instead of a table")
    ap.add_argument("--log-level", default=None,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    help="Console log level (default: WARNING)")
    sub = ap.add_subparsers(dest="command", required=True)

    q = sub.add_parser("query", help="List records matching filters")
    qsub = q.add_subparsers(dest="entity", required=True)

    qa = qsub.add_parser("accounts")
    qa.add_argument("-n", "--name", type=_regex, metavar="regex")
    qa.add_argument("-T", "--type", type=_enum_arg(AccountType.from_str),
                    action="append", metavar="type",
                    help="None, Bank, Cash, Asset, CreditCard, Liability, Chequing, Savings")
    qa.add_argument("-g", "--group", type=_regex, metavar="regex")
    qa.add_argument("-i", "--institution", type=_regex, metavar="regex")

    for name in ("categories", "currencies", "groups", "payees"):
        qe = qsub.add_parser(name)
        qe.add_argument("-n", "--name", type=_regex, metavar="regex")

    qt = qsub.add_parser("transactions")
    _add_transaction_filters(qt)

    s = sub.add_parser("sum", help="Total of the matching transactions")
    _add_transaction_filters(s)

    b = sub.add_parser("budget", help="Budget progress per category")
    b.add_argument("name", nargs="?", type=_regex, help="Category full-name regex")
    _add_interval_args(b)

    r = sub.add_parser("review", help="Spending per (sub)category")
    _add_interval_args(r)
    r.add_argument("-x", "--exclude-empty", action="store_true",
                   help="Leave out categories without transactions")
    return ap


# endregion Parser

# region Commands


def transaction_query_from_args(args: argparse.Namespace) -> TransactionQuery:
    return TransactionQuery(
        date_from=args.date_from,
        date_to=args.date_to,
        amount_from=args.amount_lower,
        amount_to=args.amount_upper,
        status=frozenset(args.status) if args.status else None,
        category=args.category,
        payee=args.payee,
        account=args.account,
        paymode=frozenset(args.method) if args.method else None,
        memo=args.memo,
        info=args.info,
        tags=args.tag,
        txn_type=frozenset(args.type) if args.type else None,
    )


def _interval(args: argparse.Namespace, today: date) -> tuple[date, date]:
    start, end = default_budget_interval(today)
    return args.date_from or start, args.date_to or end


def _emit(df: pd.DataFrame, as_csv: bool, out: TextIO) -> None:
    if as_csv:
        df.to_csv(out, index=False)
    elif df.empty:
        out.write("No results.\n")
    else:
        out.write(df.to_string(index=False) + "\n")


def run_query(args: argparse.Namespace, db: HomeBankDb, out: TextIO) -> None:
    if args.entity == "transactions":
        txns = transaction_query_from_args(args).exec(db)
        _emit(transactions_frame(db, txns), args.csv, out)
        return
    if args.entity == "accounts":
        records = AccountQuery(
            name=args.name,
            types=frozenset(args.type) if args.type else None,
            group=args.group,
            institution=args.institution,
        ).exec(db)
    elif args.entity == "categories":
        records = CategoryQuery(name=args.name).exec(db)
    elif args.entity == "currencies":
        records = CurrencyQuery(name=args.name).exec(db)
    elif args.entity == "groups":
        records = GroupQuery(name=args.name).exec(db)
    else:
        records = PayeeQuery(name=args.name).exec(db)
    _emit(records_frame(records), args.csv, out)


def run_sum(args: argparse.Namespace, db: HomeBankDb, out: TextIO) -> None:
    total = sum_transactions(transaction_query_from_args(args).exec(db))
    out.write(f"{total}\n")


def run_budget(args: argparse.Namespace, db: HomeBankDb, out: TextIO, today: date) -> None:
    date_from, date_to = _interval(args, today)
    summaries = BudgetQuery(date_from, date_to, args.name).exec(db)
    _emit(summaries_frame(summaries), args.csv, out)


def run_review(args: argparse.Namespace, db: HomeBankDb, out: TextIO, today: date) -> None:
    date_from, date_to = _interval(args, today)
    rows = ReviewQuery(date_from, date_to, args.exclude_empty).exec(db)
    _emit(review_frame(rows), args.csv, out)


# endregion Commands


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    today: Optional[date] = None,
    out: Optional[TextIO] = None,
) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.config.dictConfig(logging_config(args.log_level))
    out = out if out is not None else sys.stdout
    today = today if today is not None else date.today()

    path = args.file or os.environ.get(ENV_FILE)
    if not path:
        ap.error(f"no database given: pass --file or set {ENV_FILE}")

    try:
        db = _SESSION.load(path)
    except HomeBankDbError as e:
        log.debug("Load failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    if args.command == "query":
        run_query(args, db, out)
    elif args.command == "sum":
        run_sum(args, db, out)
    elif args.command == "budget":
        run_budget(args, db, out, today)
    else:
        run_review(args, db, out, today)
    return 0


if __name__ == "__main__":
    sys.exit(main())
