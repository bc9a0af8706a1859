from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory

from pocketledger.cli.command import categories, category
from pocketledger.model.transaction import TransactionKind
from pocketledger.workspace import Workspace


class DescribeCategoriesCommand:
    def it_should_list_defaults_for_a_new_owner(self, capsys):
        with TemporaryDirectory() as tmpdir:
            rc = categories.run(workspace=Workspace(root=Path(tmpdir)))

            out = capsys.readouterr().out
            assert rc == 0
            assert "Alimentação" in out
            assert "Dividendos" in out

    def it_should_list_only_the_requested_kind(self, capsys):
        with TemporaryDirectory() as tmpdir:
            rc = categories.run(workspace=Workspace(root=Path(tmpdir)), kind=TransactionKind.income)

            out = capsys.readouterr().out
            assert rc == 0
            assert "Freelance" in out
            assert "Transporte" not in out


class DescribeCategoryCommand:
    def it_should_add_a_category_alongside_the_defaults(self, capsys):
        with TemporaryDirectory() as tmpdir:
            ws = Workspace(root=Path(tmpdir))

            rc = category.run(add="🐶 Pets", kind=TransactionKind.expense, workspace=ws)
            assert rc == 0
            capsys.readouterr()

            categories.run(workspace=ws, kind=TransactionKind.expense)
            out = capsys.readouterr().out
            assert "Pets" in out
            assert "Alimentação" in out

    def it_should_fail_on_duplicates(self, capsys):
        with TemporaryDirectory() as tmpdir:
            ws = Workspace(root=Path(tmpdir))
            category.run(add="Pets", kind=TransactionKind.expense, workspace=ws)

            rc = category.run(add="🐶 pets", kind=TransactionKind.expense, workspace=ws)

            assert rc == 1
            assert "already exists" in capsys.readouterr().out

    def it_should_print_bracketed_names_literally(self, capsys):
        with TemporaryDirectory() as tmpdir:
            ws = Workspace(root=Path(tmpdir))

            rc = category.run(add="[/] Misc", kind=TransactionKind.expense, workspace=ws)
            assert rc == 0
            assert "[/]" in capsys.readouterr().out

            rc = categories.run(workspace=ws, kind=TransactionKind.expense)
            assert rc == 0
            assert "[/]" in capsys.readouterr().out
