"""pocketledger - personal income and expense ledger with dashboard aggregation."""

__version__ = "0.1.0"
