from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from pocketledger.errors import PocketLedgerError
from pocketledger.storage import SQLiteTransactionStore
from pocketledger.workspace import Workspace

from .util import console, fmt_signed, load_workspace_settings, print_error, resolve_owner


def run(
    *,
    workspace: Workspace,
    owner: Optional[str] = None,
    limit: Optional[int] = None,
) -> int:
    """List an owner's transactions, newest first, as a Rich table.

    Returns an exit code (0 for success, non-zero for error).
    """
    settings = load_workspace_settings(workspace)
    if settings is None:
        return 1
    owner_id = resolve_owner(owner, settings)

    try:
        transactions = SQLiteTransactionStore(workspace.database_path).fetch(owner_id)
    except PocketLedgerError as e:
        print_error(e)
        return 1

    if limit is not None:
        transactions = transactions[:limit]

    if not transactions:
        console.print(f"[yellow]No transactions for owner[/] [bold]{escape(owner_id)}[/].")
        return 0

    table = Table(title=f"Transactions: {escape(owner_id)}", show_lines=False)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Category", style="yellow")
    table.add_column("Amount", justify="right")
    table.add_column("Receipt", style="dim", no_wrap=True)
    table.add_column("TxnID8", style="dim", no_wrap=True)

    for t in transactions:
        table.add_row(
            t.date.strftime("%Y-%m-%d"),
            Text(t.description),
            Text(t.category),
            fmt_signed(t.signed_amount, settings.currency_symbol, settings.locale),
            "📎" if t.receipt_reference else "",
            t.transaction_id[:8],
        )

    console.print(table)
    return 0
