"""
Category models and default category sets.

Categories are displayed with a leading pictograph ("🍔 Alimentação") but are
stored on transactions without it. Helpers here convert between the two forms.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from .transaction import TransactionKind

# A leading run of non-word characters (emoji, symbols) followed by whitespace.
_DECORATION_RE = re.compile(r"^[^\w]+\s")

DEFAULT_EXPENSE_CATEGORIES: tuple[str, ...] = (
    "🍔 Alimentação",
    "🚗 Transporte",
    "🏠 Moradia",
    "🏥 Saúde",
    "🎓 Educação",
    "🎮 Lazer",
    "🛍️ Compras",
    "📦 Outros",
)

DEFAULT_INCOME_SOURCES: tuple[str, ...] = (
    "💰 Salário",
    "💼 Freelance",
    "📈 Investimentos",
    "🎁 Presente",
    "🏆 Bônus",
    "🔄 Reembolso",
    "🏢 Aluguel",
    "📊 Dividendos",
)


class CategoryEntry(BaseModel):
    """A selectable category (or income source) for one transaction kind."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1, description="Display name, possibly decorated")
    kind: TransactionKind

    @property
    def label(self) -> str:
        """Name without decoration, as stored on transactions."""
        return strip_decoration(self.name)

    @property
    def icon(self) -> str:
        return split_decoration(self.name)[0]


def strip_decoration(name: str) -> str:
    """Remove a leading pictograph and its separating space.

    "🍔 Alimentação" -> "Alimentação"; undecorated names are returned unchanged.
    """
    return _DECORATION_RE.sub("", name, count=1)


def split_decoration(name: str) -> tuple[str, str]:
    """Split a display name into (icon, label). Icon is "" when undecorated."""
    label = strip_decoration(name)
    if label == name:
        return "", name
    return name[: len(name) - len(label)].strip(), label


def default_categories(kind: TransactionKind) -> list[CategoryEntry]:
    """Default category set for a kind; ids are the display names."""
    names = DEFAULT_INCOME_SOURCES if kind == TransactionKind.income else DEFAULT_EXPENSE_CATEGORIES
    return [CategoryEntry(id=name, name=name, kind=kind) for name in names]


__all__ = [
    "CategoryEntry",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_SOURCES",
    "default_categories",
    "split_decoration",
    "strip_decoration",
]
