"""
Aggregation service - functional core for dashboard figures.

Derives the running balance, a per-month income/expense/net series and
highlight statistics from a list of transactions.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer
- storage backends

All functions are pure. Inputs are iterated once and never mutated; outputs
are freshly constructed on each call.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from pocketledger.config import DEFAULT_LOCALE, DEFAULT_MAX_MONTHS, MONTH_ABBREVIATIONS, NO_CATEGORY
from pocketledger.model.transaction import Transaction, TransactionKind

ZERO = Decimal("0")


@dataclass
class MonthlyBucket:
    """Income, expense and net totals for one calendar month."""

    period_key: int  # year * 12 + (month - 1); sortable, not for display
    label: str
    income: Decimal = ZERO
    expenses: Decimal = ZERO
    net: Decimal = ZERO

    @property
    def year(self) -> int:
        return self.period_key // 12

    @property
    def month(self) -> int:
        return self.period_key % 12 + 1

    def add(self, transaction: Transaction) -> None:
        if transaction.kind == TransactionKind.income:
            self.income += transaction.amount
        else:
            self.expenses += transaction.amount
        self.net = self.income - self.expenses


@dataclass
class Highlights:
    """Summary statistics shown on the dashboard."""

    largest_expense: Transaction | None
    largest_income: Transaction | None
    most_frequent_category: str
    total_count: int


def period_key(year: int, month: int) -> int:
    return year * 12 + (month - 1)


def month_label(year: int, month: int, locale: str = DEFAULT_LOCALE) -> str:
    """Short display label, e.g. "Fev/24".

    Raises:
        ValueError: if the locale has no abbreviation table
    """
    try:
        names = MONTH_ABBREVIATIONS[locale]
    except KeyError:
        raise ValueError(f"Unknown locale for month labels: {locale}") from None
    return f"{names[month - 1]}/{year % 100:02d}"


def compute_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Total income minus total expenses. Zero for empty input."""
    total_income = ZERO
    total_expenses = ZERO
    for t in transactions:
        if t.kind == TransactionKind.income:
            total_income += t.amount
        else:
            total_expenses += t.amount
    return total_income - total_expenses


def compute_monthly_series(
    transactions: Iterable[Transaction],
    max_months: int = DEFAULT_MAX_MONTHS,
    *,
    locale: str = DEFAULT_LOCALE,
    preserve_input_order: bool = False,
) -> list[MonthlyBucket]:
    """Group transactions by calendar month and total each month.

    By default the most recent `max_months` months are returned in ascending
    chronological order, whatever order the input arrives in.

    With `preserve_input_order=True`, months are kept in the order they are
    first seen, the first `max_months` are taken and that list is reversed.
    This matches the chronological result only when the input is sorted by
    date descending and each month's transactions are contiguous, which is
    how the transaction store returns them.

    Args:
        transactions: Transactions to aggregate
        max_months: Maximum number of buckets to return (>= 1)
        locale: Key into MONTH_ABBREVIATIONS for labels
        preserve_input_order: Use first-seen month order instead of sorting

    Returns:
        List of MonthlyBucket, empty for empty input

    Raises:
        ValueError: if max_months < 1 or the locale is unknown
    """
    if max_months < 1:
        raise ValueError(f"max_months must be at least 1, got {max_months}")
    if locale not in MONTH_ABBREVIATIONS:
        raise ValueError(f"Unknown locale for month labels: {locale}")

    buckets: dict[int, MonthlyBucket] = {}
    for t in transactions:
        key = period_key(t.date.year, t.date.month)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = MonthlyBucket(period_key=key, label=month_label(t.date.year, t.date.month, locale))
            buckets[key] = bucket
        bucket.add(t)

    if preserve_input_order:
        ordered = list(buckets.values())
    else:
        ordered = sorted(buckets.values(), key=lambda b: b.period_key, reverse=True)

    recent = ordered[:max_months]
    recent.reverse()
    return recent


def _largest(transactions: tuple[Transaction, ...]) -> Transaction | None:
    # Strict '>' keeps the first of several equal maxima.
    largest = None
    for t in transactions:
        if largest is None or t.amount > largest.amount:
            largest = t
    return largest


def most_frequent_category(transactions: Iterable[Transaction]) -> str:
    """Category used most often; first seen wins ties. NO_CATEGORY if empty."""
    counts: dict[str, int] = {}
    for t in transactions:
        counts[t.category] = counts.get(t.category, 0) + 1

    best = NO_CATEGORY
    best_count = 0
    for category, count in counts.items():
        if count > best_count:
            best, best_count = category, count
    return best


def compute_highlights(transactions: Iterable[Transaction]) -> Highlights:
    """Largest expense and income, most frequent category and total count."""
    items = tuple(transactions)
    if not items:
        return Highlights(
            largest_expense=None,
            largest_income=None,
            most_frequent_category=NO_CATEGORY,
            total_count=0,
        )

    expenses = tuple(t for t in items if t.kind == TransactionKind.expense)
    incomes = tuple(t for t in items if t.kind == TransactionKind.income)

    return Highlights(
        largest_expense=_largest(expenses),
        largest_income=_largest(incomes),
        most_frequent_category=most_frequent_category(items),
        total_count=len(items),
    )


__all__ = [
    "Highlights",
    "MonthlyBucket",
    "compute_balance",
    "compute_highlights",
    "compute_monthly_series",
    "month_label",
    "most_frequent_category",
    "period_key",
]
