from __future__ import annotations

"""
pocketledger CLI (Typer + Rich)

Record income and expenses and view the dashboard.

All paths are resolved from a single workspace root:
  --data-dir / POCKETLEDGER_DATA env var / current working directory
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from pocketledger.model.transaction import TransactionKind
from pocketledger.workspace import Workspace

APP_HELP = "pocketledger - personal income and expense ledger"
HELP_OWNER = "Owner id (default: owner_id from config/settings.yml)"
HELP_DATE = "Transaction date as YYYY-MM-DD (default: today)"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar="POCKETLEDGER_DATA",
        help="Workspace root directory (default: current directory)",
    ),
    owner: Optional[str] = typer.Option(None, "--owner", envvar="POCKETLEDGER_OWNER", help=HELP_OWNER),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log service activity"),
):
    """pocketledger: all paths resolved from a single workspace root."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)
    ctx.obj["owner"] = owner


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


def _owner(ctx: typer.Context) -> Optional[str]:
    return ctx.obj["owner"]


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace: data directories, database and settings.

    Safe to run on an existing workspace; skips anything that already exists.

    Examples:
      pocketledger --data-dir ~/finances init
      pocketledger --owner ana init
    """
    from pocketledger.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx), owner=_owner(ctx))
    raise typer.Exit(code=code)


@app.command()
def dashboard(
    ctx: typer.Context,
    months: Optional[int] = typer.Option(None, "--months", "-m", min=1, help="Months in the monthly table"),
):
    """Show balance, monthly income/expenses and highlights.

    Examples:
      pocketledger dashboard
      pocketledger dashboard --months 12
    """
    from pocketledger.cli.command import dashboard as cmd_dashboard

    code = cmd_dashboard.run(workspace=_ws(ctx), owner=_owner(ctx), months=months)
    raise typer.Exit(code=code)


@app.command()
def transactions(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Max number of rows to show"),
):
    """List transactions, newest first."""
    from pocketledger.cli.command import transactions as cmd_transactions

    code = cmd_transactions.run(workspace=_ws(ctx), owner=_owner(ctx), limit=limit)
    raise typer.Exit(code=code)


@app.command("add-expense")
def add_expense(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Amount, e.g. 42,90 or 42.90"),
    description: str = typer.Option(..., "--description", "-d", help="What the expense was for"),
    category: str = typer.Option(..., "--category", "-c", help="Expense category"),
    on_date: Optional[datetime] = typer.Option(None, "--date", formats=["%Y-%m-%d"], help=HELP_DATE),
    receipt: Optional[Path] = typer.Option(None, "--receipt", "-r", help="Receipt image to attach"),
):
    """Record an expense, optionally with a receipt image.

    Examples:
      pocketledger add-expense 42,90 -d "Lunch" -c Alimentação
      pocketledger add-expense 120 -d "Pharmacy" -c Saúde --receipt ~/receipt.jpg
    """
    from pocketledger.cli.command import add_entry as cmd_add_entry

    code = cmd_add_entry.run(
        kind=TransactionKind.expense,
        amount=amount,
        description=description,
        category=category,
        workspace=_ws(ctx),
        owner=_owner(ctx),
        on_date=on_date.date() if on_date else None,
        receipt=receipt,
    )
    raise typer.Exit(code=code)


@app.command("add-income")
def add_income(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Amount, e.g. 3500,00"),
    description: str = typer.Option(..., "--description", "-d", help="What the income was"),
    source: str = typer.Option(..., "--source", "-s", help="Income source"),
    on_date: Optional[datetime] = typer.Option(None, "--date", formats=["%Y-%m-%d"], help=HELP_DATE),
):
    """Record an income.

    Examples:
      pocketledger add-income 3500 -d "October salary" -s Salário --date 2026-10-05
    """
    from pocketledger.cli.command import add_entry as cmd_add_entry

    code = cmd_add_entry.run(
        kind=TransactionKind.income,
        amount=amount,
        description=description,
        category=source,
        workspace=_ws(ctx),
        owner=_owner(ctx),
        on_date=on_date.date() if on_date else None,
    )
    raise typer.Exit(code=code)


@app.command()
def categories(
    ctx: typer.Context,
    kind: Optional[TransactionKind] = typer.Option(None, "--kind", "-k", help="Only show this kind"),
):
    """List expense categories and income sources (defaults when none are defined)."""
    from pocketledger.cli.command import categories as cmd_categories

    code = cmd_categories.run(workspace=_ws(ctx), owner=_owner(ctx), kind=kind)
    raise typer.Exit(code=code)


@app.command()
def category(
    ctx: typer.Context,
    add: str = typer.Option(..., "--add", help="Category name, optionally with a leading emoji"),
    kind: TransactionKind = typer.Option(TransactionKind.expense, "--kind", "-k", help="expense or income"),
):
    """Add a category or income source.

    Examples:
      pocketledger category --add "🐶 Pets"
      pocketledger category --add "💡 Consulting" --kind income
    """
    from pocketledger.cli.command import category as cmd_category

    code = cmd_category.run(add=add, kind=kind, workspace=_ws(ctx), owner=_owner(ctx))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
