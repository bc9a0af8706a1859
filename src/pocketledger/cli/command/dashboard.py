from __future__ import annotations

"""
Dashboard: balance, monthly income/expense series and highlights.
"""

from typing import Optional

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pocketledger.errors import PocketLedgerError
from pocketledger.model.transaction import Transaction
from pocketledger.services.dashboard_service import DashboardService, DashboardSummary
from pocketledger.storage import SQLiteTransactionStore
from pocketledger.workspace import Workspace

from .util import console, fmt_money, fmt_signed, load_workspace_settings, print_error, resolve_owner


def run(
    *,
    workspace: Workspace,
    owner: Optional[str] = None,
    months: Optional[int] = None,
) -> int:
    """Display the dashboard for one owner.

    Args:
        workspace: Workspace providing database and settings paths
        owner: Owner id (default: settings owner_id)
        months: Number of months in the monthly table (default: settings)

    Returns:
        Exit code (0 = success, 1 = error)
    """
    settings = load_workspace_settings(workspace)
    if settings is None:
        return 1

    if months is not None and months < 1:
        console.print("[red]Error:[/] --months must be at least 1")
        return 1

    owner_id = resolve_owner(owner, settings)
    try:
        store = SQLiteTransactionStore(workspace.database_path)
        service = DashboardService(
            store,
            max_months=months or settings.dashboard_months,
            locale=settings.locale,
        )
        summary = service.build(owner_id)
    except PocketLedgerError as e:
        print_error(f"Failed to load dashboard data: {e}")
        return 1

    _display_dashboard(summary, settings.currency_symbol, settings.locale)
    return 0


def _display_dashboard(summary: DashboardSummary, symbol: str, locale: str) -> None:
    # Balance
    status = "[green]✓ Positive[/]" if summary.is_positive else "[red]⚠ Negative[/]"
    console.print(f"[bold]Owner:[/] {escape(summary.owner_id)}")
    console.print(Text.assemble(("Total balance: ", "bold"), fmt_signed(summary.balance, symbol, locale)))
    console.print(status)

    # Monthly series
    if summary.monthly:
        table = Table(title=f"Monthly Analysis (last {len(summary.monthly)} months)", show_lines=False)
        table.add_column("Month", style="cyan", no_wrap=True)
        table.add_column("Income", style="green", justify="right")
        table.add_column("Expenses", style="red", justify="right")
        table.add_column("Net", justify="right")
        for bucket in summary.monthly:
            table.add_row(
                bucket.label,
                Text(fmt_money(bucket.income, symbol, locale)),
                Text(fmt_money(bucket.expenses, symbol, locale)),
                fmt_signed(bucket.net, symbol, locale),
            )
        console.print(table)
    else:
        console.print("\n[yellow]No transactions yet.[/]")

    # Highlights
    h = summary.highlights
    table = Table(title="Highlights", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("Detail", style="dim")
    table.add_row("Largest expense", *_transaction_cells(h.largest_expense, symbol, locale))
    table.add_row("Largest income", *_transaction_cells(h.largest_income, symbol, locale))
    table.add_row("Most used category", Text(h.most_frequent_category), "")
    table.add_row("Total transactions", str(h.total_count), "")
    console.print(table)


def _transaction_cells(
    transaction: Transaction | None, symbol: str, locale: str
) -> tuple[str | Text, str | Text]:
    if transaction is None:
        return "—", ""
    return Text(fmt_money(transaction.amount, symbol, locale)), Text(transaction.description)
