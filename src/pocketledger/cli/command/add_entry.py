from __future__ import annotations

"""
Record a new expense or income.
"""

import mimetypes
from datetime import date
from pathlib import Path
from typing import Optional

from rich.markup import escape

from pocketledger.errors import PocketLedgerError
from pocketledger.model.transaction import TransactionKind
from pocketledger.services.entry_service import EntryForm, EntryService, ReceiptUpload
from pocketledger.storage import FileBlobStore, SQLiteTransactionStore
from pocketledger.workspace import Workspace

from .util import console, fmt_money, load_workspace_settings, print_error, resolve_owner


def _read_receipt(path: Path) -> ReceiptUpload:
    if not path.is_file():
        raise FileNotFoundError(f"Receipt file not found: {path}")
    content_type, _ = mimetypes.guess_type(path.name)
    return ReceiptUpload(data=path.read_bytes(), content_type=content_type or "application/octet-stream")


def run(
    *,
    kind: TransactionKind,
    amount: str,
    description: str,
    category: str,
    workspace: Workspace,
    owner: Optional[str] = None,
    on_date: Optional[date] = None,
    receipt: Optional[Path] = None,
) -> int:
    """Validate and store a new transaction.

    Args:
        kind: income or expense
        amount: Amount as typed (decimal comma or point)
        description: Free-text description
        category: Category (expense) or source (income), decorated or plain
        workspace: Workspace providing database and receipt paths
        owner: Owner id (default: settings owner_id)
        on_date: Transaction date (default: today)
        receipt: Optional receipt image (expenses only)

    Returns:
        Exit code (0 = stored, 1 = validation or store error)
    """
    settings = load_workspace_settings(workspace)
    if settings is None:
        return 1
    owner_id = resolve_owner(owner, settings)

    try:
        upload = _read_receipt(receipt) if receipt is not None else None
    except OSError as e:
        print_error(e)
        return 1

    form = EntryForm(
        amount_text=amount,
        description=description,
        category=category,
        date=on_date or date.today(),
        receipt=upload,
    )

    try:
        service = EntryService(
            SQLiteTransactionStore(workspace.database_path),
            FileBlobStore(workspace.receipts_dir),
        )
        if kind == TransactionKind.expense:
            transaction = service.submit_expense(owner_id, form)
        else:
            transaction = service.submit_income(owner_id, form)
    except PocketLedgerError as e:
        print_error(e)
        return 1

    noun = "Expense" if kind == TransactionKind.expense else "Income"
    money = fmt_money(transaction.amount, settings.currency_symbol, settings.locale)
    console.print(
        f"[green]✓ {noun} recorded:[/] {escape(money)} "
        f"[yellow]{escape(transaction.category)}[/] on {transaction.date.isoformat()} "
        f"[dim]({transaction.transaction_id[:8]})[/dim]"
    )
    if transaction.receipt_reference:
        console.print(f"[dim]Receipt: {escape(transaction.receipt_reference)}[/dim]")
    return 0
