from __future__ import annotations

from datetime import date
from decimal import Decimal

from homebank_helper.controllers.review_query import ReviewQuery, ReviewRow

JAN = date(2024, 1, 1)
MAR = date(2024, 3, 1)


def test_review_reports_every_category(sample_db):
    rows = ReviewQuery(JAN, MAR).exec(sample_db)
    assert rows == [
        ReviewRow("Food", None, 0, Decimal(0)),
        ReviewRow("Food", "Groceries", 2, Decimal("-150.25")),
        ReviewRow("Food", "Restaurants", 1, Decimal("-50")),
        ReviewRow("Rent", None, 1, Decimal("-1500")),
        ReviewRow("Salary", None, 1, Decimal("2500")),
    ]


def test_review_exclude_empty(sample_db):
    rows = ReviewQuery(JAN, MAR, exclude_empty=True).exec(sample_db)
    assert [(r.category, r.subcategory) for r in rows] == [
        ("Food", "Groceries"),
        ("Food", "Restaurants"),
        ("Rent", None),
        ("Salary", None),
    ]


def test_review_interval_is_half_open(sample_db):
    rows = ReviewQuery(JAN, date(2024, 2, 1), exclude_empty=True).exec(sample_db)
    assert [(r.category, r.subcategory, r.total) for r in rows] == [
        ("Food", "Groceries", Decimal("-80.25")),
        ("Salary", None, Decimal("2500")),
    ]
