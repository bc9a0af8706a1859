"""
Service layer for pocketledger.

This package contains the functional core separated from the imperative
shell (CLI). Services hold business logic only.

Principles:
- No UI framework imports (Rich, Typer)
- All dependencies injected through constructors
- Functions return data structures, not void
- Fully testable with simple unit tests
"""

from pocketledger.services.aggregation_service import (
    Highlights,
    MonthlyBucket,
    compute_balance,
    compute_highlights,
    compute_monthly_series,
)
from pocketledger.services.category_service import CategoryService
from pocketledger.services.dashboard_service import DashboardService, DashboardSummary
from pocketledger.services.entry_service import (
    EntryForm,
    EntryService,
    ReceiptUpload,
    ValidatedEntry,
    parse_amount,
    sanitize_amount_input,
)

__all__ = [
    "Highlights",
    "MonthlyBucket",
    "compute_balance",
    "compute_highlights",
    "compute_monthly_series",
    "CategoryService",
    "DashboardService",
    "DashboardSummary",
    "EntryForm",
    "EntryService",
    "ReceiptUpload",
    "ValidatedEntry",
    "parse_amount",
    "sanitize_amount_input",
]
