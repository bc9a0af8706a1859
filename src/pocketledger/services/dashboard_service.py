"""
Dashboard service - fetches an owner's transactions and aggregates them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from pocketledger.config import DEFAULT_LOCALE, DEFAULT_MAX_MONTHS
from pocketledger.services.aggregation_service import (
    Highlights,
    MonthlyBucket,
    compute_balance,
    compute_highlights,
    compute_monthly_series,
)
from pocketledger.storage.base import TransactionStore

logger = logging.getLogger(__name__)


@dataclass
class DashboardSummary:
    """Everything the dashboard shows for one owner."""

    owner_id: str
    balance: Decimal
    highlights: Highlights
    monthly: list[MonthlyBucket] = field(default_factory=list)

    @property
    def is_positive(self) -> bool:
        return self.balance >= 0


class DashboardService:
    """Builds dashboard summaries from a transaction store."""

    def __init__(
        self,
        transaction_store: TransactionStore,
        max_months: int = DEFAULT_MAX_MONTHS,
        locale: str = DEFAULT_LOCALE,
    ):
        self.transaction_store = transaction_store
        self.max_months = max_months
        self.locale = locale

    def build(self, owner_id: str) -> DashboardSummary:
        """Fetch the owner's transactions and compute dashboard figures.

        Raises:
            StoreError: if the transactions cannot be fetched
        """
        transactions = self.transaction_store.fetch(owner_id)
        logger.info("Aggregating %d transactions for owner %s", len(transactions), owner_id)

        return DashboardSummary(
            owner_id=owner_id,
            balance=compute_balance(transactions),
            highlights=compute_highlights(transactions),
            monthly=compute_monthly_series(transactions, self.max_months, locale=self.locale),
        )


__all__ = [
    "DashboardService",
    "DashboardSummary",
]
