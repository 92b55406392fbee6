"""API schemas — camelCase on the wire, snake_case in Python."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from fincalc.core.domain_types import ProfileId
from fincalc.core.records import FinancialProfile
from fincalc.schemas.account import AccountCreated
from fincalc.schemas.calculation import LoanPaymentRequest
from fincalc.schemas.financial import FinancialCreate, FinancialRecord


def test_request_accepts_camel_case_keys():
    body = FinancialCreate.model_validate(
        {"userId": 2, "monthlyIncome": 10, "investmentDuration": 6},
    )
    assert body.user_id == 2
    assert body.monthly_income == 10.0
    assert body.loan_amount is None


def test_request_accepts_snake_case_keys():
    assert FinancialCreate(user_id=2).user_id == 2


def test_response_dumps_camel_case():
    now = datetime.now(timezone.utc)
    dumped = AccountCreated(user_id=1, email="a@b.c", created_at=now).model_dump(
        by_alias=True,
    )
    assert set(dumped) == {"userId", "email", "createdAt"}


def test_record_from_profile_copies_every_field():
    now = datetime.now(timezone.utc)
    profile = FinancialProfile(
        id=ProfileId(4), user_id=9, created_at=now, loan_amount=1200.0, loan_term=12.0,
    )
    record = FinancialRecord.from_profile(profile)
    assert record.id == 4
    assert record.loan_term == 12.0
    assert record.model_dump(by_alias=True)["loanAmount"] == 1200.0


def test_loan_request_rejects_text_amount():
    with pytest.raises(ValidationError):
        LoanPaymentRequest.model_validate(
            {"loanAmount": "a lot", "interestRate": 1, "loanTerm": 12},
        )


def test_include_schedule_defaults_false():
    req = LoanPaymentRequest.model_validate(
        {"loanAmount": 1, "interestRate": 1, "loanTerm": 1},
    )
    assert req.include_schedule is False
