"""
Entry service - validation and submission of new income and expense records.

Handles what the entry forms need before anything is persisted:
- Filtering keystrokes in the amount field
- Parsing amounts written with either decimal comma or point
- Checking required fields
- Uploading an optional receipt image and recording its reference
- Building and inserting the Transaction

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer

Stores are injected. Validation failures raise EntryValidationError; store
failures propagate as StoreError.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from uuid import uuid4

from pocketledger.errors import EntryValidationError
from pocketledger.model.category import strip_decoration
from pocketledger.model.transaction import Transaction, TransactionKind, check_amount_scale
from pocketledger.storage.base import BlobStore, TransactionStore

logger = logging.getLogger(__name__)

_AMOUNT_CHARS_RE = re.compile(r"[^0-9,.]")


def _normalize_decimal_comma(text: str) -> str:
    # Only the first comma is treated as a decimal separator.
    return text.replace(",", ".", 1)


def _is_number(text: str) -> bool:
    try:
        Decimal(text)
    except InvalidOperation:
        return False
    return True


def sanitize_amount_input(text: str, previous: str = "") -> str:
    """Filter a keystroke update for the amount field.

    Drops everything except digits, ',' and '.'. The cleaned text is accepted
    when it is empty or reads as a number; otherwise the previous value is kept.

    >>> sanitize_amount_input("R$ 12,5")
    '12,5'
    >>> sanitize_amount_input("12,5,", previous="12,5")
    '12,5'
    """
    cleaned = _AMOUNT_CHARS_RE.sub("", text)
    if cleaned == "" or _is_number(_normalize_decimal_comma(cleaned)):
        return cleaned
    return previous


def parse_amount(text: str) -> Decimal:
    """Parse a user-entered amount, accepting a decimal comma.

    Raises:
        EntryValidationError: if the text is not a finite number greater than zero,
            or has more whole digits or decimal places than an amount allows
    """
    try:
        value = Decimal(_normalize_decimal_comma(text.strip()))
    except InvalidOperation:
        raise EntryValidationError("Enter a valid amount greater than zero") from None
    if not value.is_finite() or value <= 0:
        raise EntryValidationError("Enter a valid amount greater than zero")
    try:
        check_amount_scale(value)
    except ValueError as e:
        raise EntryValidationError(str(e)) from None
    return value


@dataclass
class ReceiptUpload:
    """Binary receipt image attached to an expense form."""

    data: bytes
    content_type: str = "image/jpeg"


@dataclass
class EntryForm:
    """Raw values collected by an entry form."""

    amount_text: str
    description: str
    category: str  # may carry display decoration
    date: date = field(default_factory=date.today)
    receipt: ReceiptUpload | None = None


@dataclass
class ValidatedEntry:
    """Entry that passed validation and is ready to persist."""

    kind: TransactionKind
    amount: Decimal
    description: str
    category: str  # decoration stripped
    date: date
    receipt: ReceiptUpload | None = None


class EntryService:
    """Validates and submits new transactions."""

    def __init__(self, transaction_store: TransactionStore, blob_store: BlobStore | None = None):
        self.transaction_store = transaction_store
        self.blob_store = blob_store

    def validate(self, kind: TransactionKind, form: EntryForm) -> ValidatedEntry:
        """Check a form and normalize its values.

        Raises:
            EntryValidationError: on missing fields, a bad amount, or a receipt on an income
        """
        category_label = "source" if kind == TransactionKind.income else "category"
        missing = [
            name
            for name, value in (
                ("amount", form.amount_text),
                ("description", form.description),
                (category_label, form.category),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise EntryValidationError(f"Please fill in: {', '.join(missing)}")

        amount = parse_amount(form.amount_text)

        if form.receipt is not None and kind == TransactionKind.income:
            raise EntryValidationError("Receipts can only be attached to expenses")

        return ValidatedEntry(
            kind=kind,
            amount=amount,
            description=form.description.strip(),
            category=strip_decoration(form.category.strip()),
            date=form.date,
            receipt=form.receipt,
        )

    def submit_expense(self, owner_id: str, form: EntryForm) -> Transaction:
        return self._submit(owner_id, self.validate(TransactionKind.expense, form))

    def submit_income(self, owner_id: str, form: EntryForm) -> Transaction:
        return self._submit(owner_id, self.validate(TransactionKind.income, form))

    def _submit(self, owner_id: str, entry: ValidatedEntry) -> Transaction:
        receipt_reference = None
        if entry.receipt is not None:
            if self.blob_store is None:
                raise EntryValidationError("No receipt storage configured")
            receipt_reference = self.blob_store.upload(entry.receipt.data, entry.receipt.content_type)

        transaction = Transaction(
            transaction_id=uuid4().hex,
            owner_id=owner_id,
            kind=entry.kind,
            amount=entry.amount,
            description=entry.description,
            category=entry.category,
            date=entry.date,
            receipt_reference=receipt_reference,
        )
        self.transaction_store.insert(transaction)

        logger.info(
            "Recorded %s %s for owner %s%s",
            entry.kind.value,
            transaction.transaction_id[:8],
            owner_id,
            " with receipt" if receipt_reference else "",
        )
        return transaction


__all__ = [
    "EntryForm",
    "EntryService",
    "ReceiptUpload",
    "ValidatedEntry",
    "parse_amount",
    "sanitize_amount_input",
]
