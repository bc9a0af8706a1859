from __future__ import annotations

from typing import Optional

from rich.markup import escape

from pocketledger.errors import PocketLedgerError
from pocketledger.model.transaction import TransactionKind
from pocketledger.services.category_service import CategoryService
from pocketledger.storage import SQLiteCategoryStore
from pocketledger.workspace import Workspace

from .util import console, load_workspace_settings, print_error, resolve_owner


def run(
    *,
    add: str,
    kind: TransactionKind,
    workspace: Workspace,
    owner: Optional[str] = None,
) -> int:
    """Add a category (or income source) for an owner.

    The first category added for a kind is stored after a copy of that
    kind's defaults, which remain on offer.

    Returns:
        Exit code (0 = added, 1 = invalid, duplicate or store error)
    """
    settings = load_workspace_settings(workspace)
    if settings is None:
        return 1
    owner_id = resolve_owner(owner, settings)

    try:
        service = CategoryService(SQLiteCategoryStore(workspace.database_path))
        entry = service.add(owner_id, kind, add)
    except PocketLedgerError as e:
        print_error(e)
        return 1

    console.print(f"[green]✓ Added {kind.value} category:[/] {escape(entry.name)}")
    return 0
