from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from homebank_helper.controllers.budget_query import (
    BudgetQuery,
    BudgetSummary,
    budget_summary,
    default_budget_interval,
)
from homebank_helper.data_model import (
    CategoryBudget,
    HbCategory,
    HbTransaction,
    HomeBankDb,
    SimpleTransaction,
)

JAN = date(2024, 1, 1)
MAR = date(2024, 3, 1)


@pytest.mark.parametrize(
    "today,expected",
    [
        (date(2024, 2, 14), (date(2024, 2, 1), date(2024, 3, 1))),
        (date(2024, 12, 31), (date(2024, 12, 1), date(2025, 1, 1))),
        (date(2024, 1, 1), (date(2024, 1, 1), date(2024, 2, 1))),
    ],
)
def test_default_budget_interval(today, expected):
    assert default_budget_interval(today) == expected


def test_every_month_budget_over_two_months(sample_db):
    food = sample_db.categories[1]
    summary = budget_summary(sample_db, food, JAN, MAR)
    assert summary.name == "Food"
    assert summary.allotment == Decimal("-800")
    # nothing is filed directly under Food
    assert summary.progress == Decimal(0)


def test_progress_counts_only_exact_category(sample_db):
    groceries = sample_db.categories[2]
    summary = budget_summary(sample_db, groceries, JAN, MAR)
    assert summary.name == "Food:Groceries"
    assert summary.allotment == Decimal("-550")
    assert summary.progress == Decimal("-150.25")
    assert summary.progress_frac == Decimal("-150.25") / Decimal("-550")


def test_budget_query_selects_budgeted_categories_sorted(sample_db):
    found = BudgetQuery(JAN, MAR).exec(sample_db)
    assert [s.name for s in found] == ["Food", "Food:Groceries", "Rent"]
    rent = found[-1]
    assert rent.allotment == Decimal("-3000")
    assert rent.progress == Decimal("-1500")
    assert rent.progress_frac == Decimal("0.5")


def test_budget_query_name_filter(sample_db):
    found = BudgetQuery(JAN, MAR, name="Groc").exec(sample_db)
    assert [s.name for s in found] == ["Food:Groceries"]


def test_budget_name_with_regex_metacharacters_is_matched_literally():
    # Arrange
    db = HomeBankDb(
        categories={
            1: HbCategory(key=1, name="Car (fuel)", budget=CategoryBudget.from_mapping({0: Decimal(-100)})),
            2: HbCategory(key=2, name="Car fuel"),
        },
        transactions=[
            HbTransaction(date=JAN, amount=Decimal(-40), complexity=SimpleTransaction(1, Decimal(-40))),
            HbTransaction(date=JAN, amount=Decimal(-7), complexity=SimpleTransaction(2, Decimal(-7))),
        ],
    )

    # Act
    summary = budget_summary(db, db.categories[1], JAN, date(2024, 2, 1))

    # Assert
    assert summary.progress == Decimal(-40)
    assert summary.allotment == Decimal(-100)


def test_interval_without_first_of_month_has_zero_allotment(sample_db):
    food = sample_db.categories[1]
    summary = budget_summary(sample_db, food, date(2024, 1, 2), date(2024, 1, 31))
    assert summary.allotment == Decimal(0)
    assert summary.progress_frac is None


def test_rounding_and_missing_allotment():
    s = BudgetSummary("X", Decimal("10.125"), None)
    assert s.progress_rounded == Decimal("10.12")
    assert s.allotment_rounded is None
    assert s.progress_frac is None
    assert BudgetSummary("Y", Decimal("1"), Decimal("3.335")).allotment_rounded == Decimal("3.34")
