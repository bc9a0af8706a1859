from __future__ import annotations

import pytest

from pocketledger.model.category import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_SOURCES,
    CategoryEntry,
    default_categories,
    split_decoration,
    strip_decoration,
)
from pocketledger.model.transaction import TransactionKind


class DescribeStripDecoration:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("🍔 Alimentação", "Alimentação"),
            ("🛍️ Compras", "Compras"),
            ("💰 Salário", "Salário"),
            ("Alimentação", "Alimentação"),
            ("Saúde e bem-estar", "Saúde e bem-estar"),
            ("Água e luz", "Água e luz"),
        ],
    )
    def it_should_remove_only_a_leading_pictograph(self, name, expected):
        assert strip_decoration(name) == expected

    def it_should_strip_every_default_name(self):
        for name in DEFAULT_EXPENSE_CATEGORIES + DEFAULT_INCOME_SOURCES:
            label = strip_decoration(name)
            assert label != name
            assert label[0].isalpha()


class DescribeSplitDecoration:
    def it_should_split_icon_and_label(self):
        assert split_decoration("🏠 Moradia") == ("🏠", "Moradia")

    def it_should_return_empty_icon_for_plain_names(self):
        assert split_decoration("Moradia") == ("", "Moradia")


class DescribeDefaultCategories:
    def it_should_return_eight_expense_categories(self):
        entries = default_categories(TransactionKind.expense)

        assert len(entries) == 8
        assert entries[0] == CategoryEntry(id="🍔 Alimentação", name="🍔 Alimentação", kind="expense")

    def it_should_return_income_sources_for_income(self):
        labels = [e.label for e in default_categories(TransactionKind.income)]

        assert labels == [
            "Salário",
            "Freelance",
            "Investimentos",
            "Presente",
            "Bônus",
            "Reembolso",
            "Aluguel",
            "Dividendos",
        ]

    def it_should_expose_icons(self):
        assert default_categories(TransactionKind.income)[0].icon == "💰"
