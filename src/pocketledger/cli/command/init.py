"""Initialize a new pocketledger workspace directory."""

from __future__ import annotations

from rich.markup import escape

from pocketledger.model.settings import Settings
from pocketledger.model.settings_io import save_settings
from pocketledger.storage import SQLiteCategoryStore, SQLiteTransactionStore, StoreError
from pocketledger.workspace import Workspace

from .util import console, print_error


def run(*, workspace: Workspace, owner: str | None = None) -> int:
    """Create the data directories, the database and a starter settings file.

    Skips anything that already exists (safe to run on an existing workspace).

    Args:
        workspace: Workspace to initialize
        owner: Owner id written to a new settings file (default: "local")

    Returns:
        Exit code (0 = success, 1 = database could not be created)
    """
    root = workspace.root
    console.print(f"[bold cyan]Initializing workspace:[/] {escape(str(root))}\n")

    created = []
    skipped = []

    for directory in [workspace.data_dir, workspace.receipts_dir, workspace.config_dir]:
        if directory.exists():
            skipped.append(str(directory.relative_to(root)) + "/")
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(str(directory.relative_to(root)) + "/")

    if workspace.settings_path.exists():
        skipped.append(str(workspace.settings_path.relative_to(root)))
    else:
        settings = Settings(owner_id=owner) if owner else Settings()
        save_settings(workspace.settings_path, settings)
        created.append(str(workspace.settings_path.relative_to(root)))

    db_existed = workspace.database_path.exists()
    try:
        SQLiteTransactionStore(workspace.database_path)
        SQLiteCategoryStore(workspace.database_path)
    except StoreError as e:
        print_error(e)
        return 1
    if db_existed:
        skipped.append(str(workspace.database_path.relative_to(root)))
    else:
        created.append(str(workspace.database_path.relative_to(root)))

    if created:
        console.print("[green]Created:[/]")
        for c in created:
            console.print(f"  {escape(c)}")

    if skipped:
        console.print("[dim]Already exists (skipped):[/dim]")
        for s in skipped:
            console.print(f"  [dim]{escape(s)}[/dim]")

    if not created:
        console.print("[green]Workspace already fully initialized.[/]")
    else:
        console.print(f"\n[green]Workspace ready at {escape(str(root))}[/]")
        console.print("\n[dim]Next steps:[/dim]")
        console.print("  1. Run: pocketledger add-income 3500 -d 'Monthly salary' -s Salário")
        console.print("  2. Run: pocketledger add-expense 42,90 -d 'Lunch' -c Alimentação")
        console.print("  3. Run: pocketledger dashboard")

    return 0
