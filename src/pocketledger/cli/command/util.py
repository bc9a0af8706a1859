from __future__ import annotations

from decimal import Decimal

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from pocketledger.config import DEFAULT_LOCALE, NUMBER_SEPARATORS
from pocketledger.model.settings import Settings
from pocketledger.model.settings_io import load_settings
from pocketledger.workspace import Workspace

console = Console()


def print_error(message: object) -> None:
    console.print(f"[red]Error:[/] {escape(str(message))}")


def load_workspace_settings(workspace: Workspace) -> Settings | None:
    """Load settings, printing the problem and returning None if they are invalid."""
    try:
        return load_settings(workspace.settings_path)
    except (ValidationError, yaml.YAMLError) as e:
        print_error(f"Invalid settings in {workspace.settings_path}: {e}")
        return None


def resolve_owner(owner: str | None, settings: Settings) -> str:
    return owner or settings.owner_id


def fmt_money(amount: Decimal, symbol: str = "R$", locale: str = DEFAULT_LOCALE) -> str:
    """Format an amount with the locale's separators, e.g. "R$ 1.234,56" for pt-BR."""
    thousands, decimal = NUMBER_SEPARATORS[locale]
    digits = f"{abs(amount):,.2f}".translate(str.maketrans({",": thousands, ".": decimal}))
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {digits}"


def fmt_signed(amount: Decimal, symbol: str = "R$", locale: str = DEFAULT_LOCALE) -> Text:
    s = fmt_money(amount, symbol, locale)
    if amount < 0:
        return Text(s, style="bold red")
    elif amount > 0:
        return Text(s, style="bold green")
    return Text(s)
