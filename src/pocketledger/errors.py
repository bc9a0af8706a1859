"""Exception types for pocketledger."""


class PocketLedgerError(Exception):
    """Base exception for pocketledger."""
    pass


class StoreError(PocketLedgerError):
    """A transaction, category, or blob store could not complete a request."""
    pass


class EntryValidationError(PocketLedgerError):
    """User-supplied entry data failed validation before persistence."""
    pass
