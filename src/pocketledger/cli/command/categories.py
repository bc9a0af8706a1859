from __future__ import annotations

from typing import Optional

from rich.table import Table
from rich.text import Text

from pocketledger.errors import PocketLedgerError
from pocketledger.model.transaction import TransactionKind
from pocketledger.services.category_service import CategoryService
from pocketledger.storage import SQLiteCategoryStore
from pocketledger.workspace import Workspace

from .util import console, load_workspace_settings, print_error, resolve_owner


def run(
    *,
    workspace: Workspace,
    owner: Optional[str] = None,
    kind: Optional[TransactionKind] = None,
) -> int:
    """List the categories offered for each transaction kind.

    Falls back to the built-in defaults when the owner has none.
    """
    settings = load_workspace_settings(workspace)
    if settings is None:
        return 1
    owner_id = resolve_owner(owner, settings)

    try:
        service = CategoryService(SQLiteCategoryStore(workspace.database_path))
    except PocketLedgerError as e:
        print_error(e)
        return 1

    kinds = [kind] if kind is not None else [TransactionKind.expense, TransactionKind.income]
    for k in kinds:
        title = "Expense categories" if k == TransactionKind.expense else "Income sources"
        table = Table(title=title, show_lines=False)
        table.add_column("", no_wrap=True)
        table.add_column("Name", style="cyan")
        for entry in service.load(owner_id, k):
            table.add_row(Text(entry.icon), Text(entry.label))
        console.print(table)

    return 0
