from __future__ import annotations

# Command implementations for the pocketledger CLI.
# Each command module exposes a `run(...)` function that performs the action
# and prints to the console. Typer wrappers in pocketledger.cli.app delegate here.

__all__ = [
    "init",
    "dashboard",
    "transactions",
    "add_entry",
    "categories",
    "category",
]
