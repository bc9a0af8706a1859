from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pocketledger.model.transaction import Transaction, TransactionKind


def _base(**overrides) -> dict:
    data = dict(
        transaction_id="t1",
        owner_id="ana",
        kind="expense",
        amount="19.90",
        description="Cinema",
        category="Lazer",
        date="2024-08-17",
    )
    data.update(overrides)
    return data


class DescribeTransaction:
    def it_should_coerce_store_values(self):
        t = Transaction.model_validate(_base())

        assert t.kind == TransactionKind.expense
        assert t.amount == Decimal("19.90")
        assert t.date == date(2024, 8, 17)

    def it_should_sign_amounts_by_kind(self):
        assert Transaction.model_validate(_base()).signed_amount == Decimal("-19.90")
        assert Transaction.model_validate(_base(kind="income")).signed_amount == Decimal("19.90")

    def it_should_expose_kind_predicates(self):
        t = Transaction.model_validate(_base())
        assert t.is_expense and not t.is_income

    @pytest.mark.parametrize("amount", ["-1", "NaN", "Infinity", "abc"])
    def it_should_reject_malformed_amounts(self, amount):
        with pytest.raises(ValidationError):
            Transaction.model_validate(_base(amount=amount))

    @pytest.mark.parametrize(
        "amount",
        ["1e1000000", "12345678901234567890123456789.01", "10000000000000", "1.005"],
    )
    def it_should_reject_amounts_too_large_or_too_precise(self, amount):
        with pytest.raises(ValidationError, match="Amount must"):
            Transaction.model_validate(_base(amount=amount))

    @pytest.mark.parametrize("amount", ["9999999999999.99", "0", "19.900", "7E+2"])
    def it_should_accept_amounts_within_bounds(self, amount):
        assert Transaction.model_validate(_base(amount=amount)).amount == Decimal(amount)

    def it_should_reject_unparseable_dates(self):
        with pytest.raises(ValidationError):
            Transaction.model_validate(_base(date="17/08/2024"))

    def it_should_reject_unknown_kinds(self):
        with pytest.raises(ValidationError):
            Transaction.model_validate(_base(kind="transfer"))

    def it_should_reject_receipt_on_income(self):
        with pytest.raises(ValidationError, match="receipt"):
            Transaction.model_validate(_base(kind="income", receipt_reference="file:///r.jpg"))

    def it_should_allow_receipt_on_expense(self):
        t = Transaction.model_validate(_base(receipt_reference="file:///r.jpg"))
        assert t.receipt_reference == "file:///r.jpg"

    def it_should_be_immutable(self):
        t = Transaction.model_validate(_base())
        with pytest.raises(ValidationError):
            t.amount = Decimal("1")

    class DescribeFromStoreRow:
        def it_should_treat_empty_receipt_as_absent(self):
            row = _base(receipt_reference="")
            t = Transaction.from_store_row(row)
            assert t.receipt_reference is None

        def it_should_default_missing_text_fields(self):
            row = _base(description=None, category=None)
            t = Transaction.from_store_row(row)
            assert t.description == ""
            assert t.category == ""
