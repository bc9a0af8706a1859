"""
Transaction model for income and expense records.

Scope
- Pure Pydantic v2 model; no I/O.
- Instances are frozen so aggregation code can share them freely without
  worrying about callers mutating records mid-computation.

Privacy
- Descriptions are user-entered free text. Do not log them; log ids only.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, computed_field, model_validator

from pocketledger.config import AMOUNT_DECIMAL_PLACES, AMOUNT_WHOLE_DIGITS

_AMOUNT_LIMIT = Decimal(10) ** AMOUNT_WHOLE_DIGITS
_AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_DECIMAL_PLACES)


def check_amount_scale(value: Decimal) -> Decimal:
    """Reject amounts too large or too precise to sum exactly.

    Raises:
        ValueError: if the amount has too many whole digits or decimal places
    """
    if value.is_finite() and value.adjusted() >= AMOUNT_WHOLE_DIGITS:
        raise ValueError(f"Amount must be less than {_AMOUNT_LIMIT:,}")
    if value.is_finite() and value != value.quantize(_AMOUNT_QUANTUM):
        raise ValueError(f"Amount must have at most {AMOUNT_DECIMAL_PLACES} decimal places")
    return value


Amount = Annotated[Decimal, Field(ge=0, allow_inf_nan=False), AfterValidator(check_amount_scale)]


class TransactionKind(StrEnum):
    """Direction of a transaction; determines its sign in the balance."""

    income = "income"
    expense = "expense"


class Transaction(BaseModel):
    """A single income or expense record owned by one user.

    Amounts are always non-negative; `kind` carries the sign. Categories are
    stored without their display decoration (see `model.category`).
    """

    model_config = ConfigDict(frozen=True)

    transaction_id: str = Field(min_length=1)
    owner_id: str = Field(min_length=1)
    kind: TransactionKind
    amount: Amount
    description: str = ""
    category: str = ""
    date: date
    receipt_reference: str | None = Field(
        default=None, description="Blob store reference for an attached receipt (expenses only)"
    )

    @computed_field  # type: ignore[misc]
    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.kind == TransactionKind.income else -self.amount

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.income

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionKind.expense

    @model_validator(mode="after")
    def _validate_receipt(self) -> Transaction:
        """Receipts only make sense for expenses."""
        if self.receipt_reference and self.kind == TransactionKind.income:
            raise ValueError("Income transactions cannot carry a receipt reference")
        return self

    @classmethod
    def from_store_row(cls, row: dict) -> Transaction:
        """Construct a Transaction from a store row dict.

        Store rows keep amounts as text (exact decimal) and dates as ISO strings:
        - 'amount' → Decimal
        - 'date' → date
        - 'receipt_reference' → None when empty

        Raises:
            pydantic.ValidationError: if the row is malformed
        """
        return cls(
            transaction_id=row["transaction_id"],
            owner_id=row["owner_id"],
            kind=row["kind"],
            amount=row["amount"],
            description=row.get("description") or "",
            category=row.get("category") or "",
            date=row["date"],
            receipt_reference=row.get("receipt_reference") or None,
        )


__all__ = [
    "Amount",
    "Transaction",
    "TransactionKind",
    "check_amount_scale",
]
