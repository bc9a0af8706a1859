"""
Settings I/O (YAML loading and saving).

Reads and writes config/settings.yml. Follows the same conventions as the
rest of the workspace config: safe YAML loader, parent dirs created on save.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from .settings import Settings


def load_settings(path: Path) -> Settings:
    """Load settings from YAML.

    Returns default Settings if the file does not exist. An empty file is
    treated the same way.

    Raises:
        pydantic.ValidationError: if the file holds invalid values
        yaml.YAMLError: if the file is not valid YAML
    """
    if not path.exists():
        return Settings()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return Settings.model_validate(data)


def save_settings(path: Path, settings: Settings) -> None:
    """Write settings to YAML, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)

    data = settings.model_dump(mode="json")

    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


__all__ = [
    "load_settings",
    "save_settings",
]
