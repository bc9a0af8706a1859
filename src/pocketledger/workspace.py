"""
Workspace - centralized data path resolution for pocketledger.

A Workspace represents the root directory holding the ledger database,
stored receipt images and configuration. All paths are computed relative
to this root.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. POCKETLEDGER_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_DATA_DIR = "POCKETLEDGER_DATA"


@dataclass
class Workspace:
    """Root directory for all ledger data paths."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD."""
        if explicit is not None:
            return cls(root=explicit)
        env = os.environ.get(ENV_DATA_DIR)
        if env:
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def database_path(self) -> Path:
        return self.data_dir / "pocketledger.db"

    @property
    def receipts_dir(self) -> Path:
        return self.data_dir / "receipts"

    @property
    def config_dir(self) -> Path:
        return self.root / "config"

    @property
    def settings_path(self) -> Path:
        return self.config_dir / "settings.yml"


__all__ = ["Workspace"]
