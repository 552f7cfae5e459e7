"""Tests for loan models."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from amortize.config import BoundsConfig, Range
from amortize.exceptions import (
    InvalidAmountError,
    InvalidLoanTermsError,
    InvalidRecordError,
    InvalidTermError,
)
from amortize.models import LoanField, LoanTerms, PaymentRecord, Schedule, cents_to_dollars, to_cents


class TestMoneyConversion:
    """Tests for cents conversion helpers."""

    @pytest.mark.parametrize(
        ("amount", "cents"),
        [
            (0.01, 1),
            (1000, 100_000),
            (19.99, 1999),
            (0.015, 2),
            (0.025, 3),
            (Decimal("123.455"), 12346),
            (1_000_000_000_000, 100_000_000_000_000),
        ],
    )
    def test_to_cents_rounds_half_up(self, amount: object, cents: int) -> None:
        assert to_cents(amount) == cents

    def test_cents_to_dollars(self) -> None:
        assert cents_to_dollars(8885) == Decimal("88.85")
        assert str(cents_to_dollars(0)) == "0.00"
        assert str(cents_to_dollars(5)) == "0.05"


class TestLoanTermsCreate:
    """Tests for LoanTerms.create."""

    def test_create(self) -> None:
        terms = LoanTerms.create(amount=1000, rate=12.0, years=1)

        assert terms.principal_cents == 100_000
        assert terms.annual_percentage_rate == 12.0
        assert terms.term_months == 12
        assert terms.term_years == 1
        assert terms.principal == Decimal("1000.00")
        assert terms.monthly_rate == pytest.approx(0.01)

    def test_minimum_inputs_accepted(self) -> None:
        terms = LoanTerms.create(amount=0.01, rate=0.000001, years=1)

        assert terms.principal_cents == 1
        assert terms.term_months == 12

    def test_maximum_inputs_accepted(self) -> None:
        terms = LoanTerms.create(amount=1_000_000_000_000, rate=100, years=1_000_000)

        assert terms.principal_cents == 100_000_000_000_000
        assert terms.term_months == 12_000_000

    def test_amount_below_minimum(self) -> None:
        with pytest.raises(InvalidLoanTermsError) as exc_info:
            LoanTerms.create(amount=0.00999, rate=5.0, years=1)

        assert exc_info.value.fields == (LoanField.AMOUNT,)
        assert isinstance(exc_info.value.errors[0], InvalidAmountError)
        assert "amount" in str(exc_info.value)

    def test_zero_years(self) -> None:
        with pytest.raises(InvalidLoanTermsError) as exc_info:
            LoanTerms.create(amount=1000, rate=5.0, years=0)

        assert exc_info.value.fields == (LoanField.TERM,)
        assert isinstance(exc_info.value.errors[0], InvalidTermError)

    def test_every_invalid_field_reported(self) -> None:
        with pytest.raises(InvalidLoanTermsError) as exc_info:
            LoanTerms.create(amount=-1, rate=150, years=0)

        assert exc_info.value.fields == (LoanField.AMOUNT, LoanField.RATE, LoanField.TERM)

    def test_custom_bounds(self) -> None:
        bounds = BoundsConfig(amount=Range(100, 500_000), rate=Range(1, 30), term_years=Range(1, 40))

        with pytest.raises(InvalidLoanTermsError):
            LoanTerms.create(amount=50, rate=5.0, years=10, bounds=bounds)

        terms = LoanTerms.create(amount=150, rate=5.0, years=10, bounds=bounds)
        assert terms.bounds is bounds

    def test_equal_terms_compare_equal(self) -> None:
        assert LoanTerms.create(1000, 12.0, 1) == LoanTerms.create(1000.0, 12, 1)

    def test_immutable(self) -> None:
        terms = LoanTerms.create(1000, 12.0, 1)

        with pytest.raises(FrozenInstanceError):
            terms.principal_cents = 1  # type: ignore[misc]


class TestLoanTermsDirect:
    """Tests for direct LoanTerms construction."""

    def test_valid(self) -> None:
        terms = LoanTerms(principal_cents=100_000, annual_percentage_rate=12.0, term_months=12)

        assert terms.term_years == 1

    def test_zero_principal(self) -> None:
        with pytest.raises(InvalidLoanTermsError) as exc_info:
            LoanTerms(principal_cents=0, annual_percentage_rate=12.0, term_months=12)

        assert exc_info.value.fields == ("amount",)

    def test_partial_year_term(self) -> None:
        with pytest.raises(InvalidLoanTermsError) as exc_info:
            LoanTerms(principal_cents=100_000, annual_percentage_rate=12.0, term_months=18)

        assert exc_info.value.fields == ("term",)
        assert "18 months" in str(exc_info.value)

    def test_rate_out_of_range(self) -> None:
        with pytest.raises(InvalidLoanTermsError) as exc_info:
            LoanTerms(principal_cents=100_000, annual_percentage_rate=0.0, term_months=12)

        assert exc_info.value.fields == ("rate",)


def _record(**overrides: int) -> PaymentRecord:
    values = dict(
        period_number=1,
        payment_amount_cents=8885,
        interest_portion_cents=1000,
        remaining_balance_cents=92115,
        cumulative_payment_cents=8885,
        cumulative_interest_cents=1000,
    )
    values.update(overrides)
    return PaymentRecord(**values)


class TestPaymentRecord:
    """Tests for PaymentRecord."""

    def test_valid_record(self) -> None:
        record = _record()

        assert record.principal_portion_cents == 7885
        assert record.is_disbursement is False

    def test_disbursement(self) -> None:
        record = PaymentRecord(0, 0, 0, 100_000, 0, 0)

        assert record.is_disbursement is True
        assert record.principal_portion_cents == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"period_number": -1},
            {"payment_amount_cents": -1},
            {"remaining_balance_cents": -1},
            {"interest_portion_cents": 9000},
            {"cumulative_payment_cents": 100},
            {"cumulative_interest_cents": 10},
        ],
    )
    def test_invariant_violations_fail_fast(self, overrides: dict) -> None:
        with pytest.raises(InvalidRecordError):
            _record(**overrides)


class TestSchedule:
    """Tests for the Schedule container."""

    def _schedule(self) -> Schedule:
        terms = LoanTerms(principal_cents=1000, annual_percentage_rate=12.0, term_months=12)
        return Schedule(
            terms=terms,
            monthly_payment_cents=600,
            records=(
                PaymentRecord(0, 0, 0, 1000, 0, 0),
                PaymentRecord(1, 600, 10, 410, 600, 10),
                PaymentRecord(2, 414, 4, 0, 1014, 14),
            ),
        )

    def test_sequence_protocol(self) -> None:
        schedule = self._schedule()

        assert len(schedule) == 3
        assert [r.period_number for r in schedule] == [0, 1, 2]
        assert schedule[1].payment_amount_cents == 600
        assert len(schedule[1:]) == 2

    def test_properties(self) -> None:
        schedule = self._schedule()

        assert schedule.disbursement.remaining_balance_cents == 1000
        assert len(schedule.payments) == 2
        assert schedule.final_record.period_number == 2
        assert schedule.number_of_payments == 2
        assert schedule.total_payment_cents == 1014
        assert schedule.total_interest_cents == 14
        assert schedule.total_principal_cents == 1000

    def test_summary(self) -> None:
        assert self._schedule().summary() == {
            "principal_cents": 1000,
            "monthly_payment_cents": 600,
            "number_of_payments": 2,
            "total_payment_cents": 1014,
            "total_interest_cents": 14,
        }

    def test_requires_disbursement_first(self) -> None:
        terms = LoanTerms(principal_cents=1000, annual_percentage_rate=12.0, term_months=12)

        with pytest.raises(InvalidRecordError):
            Schedule(terms=terms, monthly_payment_cents=600, records=())
        with pytest.raises(InvalidRecordError):
            Schedule(terms=terms, monthly_payment_cents=600, records=(PaymentRecord(1, 600, 10, 410, 600, 10),))
