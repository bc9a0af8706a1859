from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory

from pocketledger.cli.command.init import run
from pocketledger.model.settings_io import load_settings
from pocketledger.workspace import Workspace


class DescribeInitCommand:
    def it_should_create_directories_database_and_settings(self):
        with TemporaryDirectory() as tmpdir:
            ws = Workspace(root=Path(tmpdir))

            rc = run(workspace=ws, owner="ana")

            assert rc == 0
            assert ws.receipts_dir.is_dir()
            assert ws.database_path.exists()
            assert load_settings(ws.settings_path).owner_id == "ana"

    def it_should_be_safe_to_run_twice(self, capsys):
        with TemporaryDirectory() as tmpdir:
            ws = Workspace(root=Path(tmpdir))
            run(workspace=ws)
            capsys.readouterr()

            rc = run(workspace=ws, owner="someone-else")

            assert rc == 0
            assert "already fully initialized" in capsys.readouterr().out
            assert load_settings(ws.settings_path).owner_id == "local"
