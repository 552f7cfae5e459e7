"""Loan models: terms, payment records and schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, overload

from amortize.config import BoundsConfig
from amortize.exceptions import (
    InvalidAmountError,
    InvalidFieldError,
    InvalidLoanTermsError,
    InvalidRateError,
    InvalidRecordError,
    InvalidTermError,
)
from amortize.validation import collect_errors

MONTHS_PER_YEAR = 12


def to_cents(amount: float | Decimal | str) -> int:
    """Convert a dollar amount to integer cents, rounding half-up."""
    cents = (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


def cents_to_dollars(cents: int) -> Decimal:
    """Convert integer cents to an exact two-decimal dollar amount."""
    return Decimal(cents).scaleb(-2)


@dataclass(frozen=True)
class LoanTerms:
    """Validated, immutable loan parameters.

    Use :meth:`create` to build terms from user-facing values (dollars,
    percent, years). Direct construction takes the stored representation
    and checks it against the same bounds.
    """

    principal_cents: int
    annual_percentage_rate: float
    term_months: int
    bounds: BoundsConfig = field(default_factory=BoundsConfig, repr=False, compare=False)

    def __post_init__(self) -> None:
        errors: list[InvalidFieldError] = []
        if not self.bounds.amount.contains(self.principal_cents / 100):
            errors.append(InvalidAmountError(cents_to_dollars(self.principal_cents), self.bounds.amount))
        if not self.bounds.rate.contains(self.annual_percentage_rate):
            errors.append(InvalidRateError(self.annual_percentage_rate, self.bounds.rate))
        if self.term_months % MONTHS_PER_YEAR or not self.bounds.term_years.contains(
            self.term_months // MONTHS_PER_YEAR
        ):
            errors.append(
                InvalidTermError(
                    self.term_months,
                    self.bounds.term_years,
                    message=f"Invalid term: {self.term_months} months is not a whole number of years "
                    f"between {self.bounds.term_years.describe()}",
                )
            )
        if errors:
            raise InvalidLoanTermsError(errors)

    @classmethod
    def create(
        cls,
        amount: float | Decimal,
        rate: float,
        years: int,
        bounds: BoundsConfig | None = None,
    ) -> LoanTerms:
        """Build loan terms from dollars, annual percent and whole years.

        Parameters
        ----------
        amount : float | Decimal
            Amount to borrow in dollars.
        rate : float
            Annual percentage rate (5.0 means 5%).
        years : int
            Term in whole years.
        bounds : BoundsConfig | None
            Accepted ranges (defaults to the standard bounds).

        Returns
        -------
        LoanTerms
            Terms whose monthly payment is known to be consistent.

        Raises
        ------
        InvalidLoanTermsError
            If any field is out of range, listing every invalid field.
        PaymentDerivationError
            If the derived monthly payment exceeds the principal.
        """
        from amortize.engine import compute_monthly_payment

        bounds = bounds or BoundsConfig()
        errors = collect_errors(amount, rate, years, bounds)
        if errors:
            raise InvalidLoanTermsError(errors)

        terms = cls(
            principal_cents=to_cents(amount),
            annual_percentage_rate=float(rate),
            term_months=int(years) * MONTHS_PER_YEAR,
            bounds=bounds,
        )
        compute_monthly_payment(terms.principal_cents, terms.annual_percentage_rate, terms.term_months)
        return terms

    @property
    def monthly_rate(self) -> float:
        """Monthly interest rate as a fraction (J = APR / 1200)."""
        return self.annual_percentage_rate / (MONTHS_PER_YEAR * 100)

    @property
    def term_years(self) -> int:
        return self.term_months // MONTHS_PER_YEAR

    @property
    def principal(self) -> Decimal:
        """Principal in dollars."""
        return cents_to_dollars(self.principal_cents)


@dataclass(frozen=True)
class PaymentRecord:
    """One period of an amortization schedule.

    Period 0 is the disbursement record: no payment, full principal
    outstanding.
    """

    period_number: int
    payment_amount_cents: int
    interest_portion_cents: int
    remaining_balance_cents: int
    cumulative_payment_cents: int
    cumulative_interest_cents: int

    def __post_init__(self) -> None:
        if self.period_number < 0:
            raise InvalidRecordError(f"Negative period number: {self.period_number}")
        for name in (
            "payment_amount_cents",
            "interest_portion_cents",
            "remaining_balance_cents",
            "cumulative_payment_cents",
            "cumulative_interest_cents",
        ):
            if getattr(self, name) < 0:
                raise InvalidRecordError(
                    f"Period {self.period_number}: {name} is negative ({getattr(self, name)})"
                )
        if self.interest_portion_cents > self.payment_amount_cents:
            raise InvalidRecordError(
                f"Period {self.period_number}: interest {self.interest_portion_cents} "
                f"exceeds payment {self.payment_amount_cents}"
            )
        if (
            self.cumulative_payment_cents < self.payment_amount_cents
            or self.cumulative_interest_cents < self.interest_portion_cents
        ):
            raise InvalidRecordError(f"Period {self.period_number}: cumulative totals below period amounts")

    @property
    def principal_portion_cents(self) -> int:
        return self.payment_amount_cents - self.interest_portion_cents

    @property
    def is_disbursement(self) -> bool:
        return self.period_number == 0


@dataclass(frozen=True)
class Schedule:
    """Ordered, read-only sequence of payment records.

    ``records[0]`` is the disbursement record; ``records[1:]`` are payments.
    """

    terms: LoanTerms
    monthly_payment_cents: int
    records: tuple[PaymentRecord, ...]

    def __post_init__(self) -> None:
        if not self.records or not self.records[0].is_disbursement:
            raise InvalidRecordError("Schedule must start with the disbursement record")

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[PaymentRecord]:
        return iter(self.records)

    @overload
    def __getitem__(self, index: int) -> PaymentRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[PaymentRecord, ...]: ...

    def __getitem__(self, index: int | slice) -> PaymentRecord | tuple[PaymentRecord, ...]:
        return self.records[index]

    @property
    def disbursement(self) -> PaymentRecord:
        return self.records[0]

    @property
    def payments(self) -> tuple[PaymentRecord, ...]:
        return self.records[1:]

    @property
    def final_record(self) -> PaymentRecord:
        return self.records[-1]

    @property
    def number_of_payments(self) -> int:
        return len(self.records) - 1

    @property
    def total_payment_cents(self) -> int:
        return self.final_record.cumulative_payment_cents

    @property
    def total_interest_cents(self) -> int:
        return self.final_record.cumulative_interest_cents

    @property
    def total_principal_cents(self) -> int:
        return self.total_payment_cents - self.total_interest_cents

    def summary(self) -> dict[str, int]:
        """Get schedule totals."""
        return {
            "principal_cents": self.terms.principal_cents,
            "monthly_payment_cents": self.monthly_payment_cents,
            "number_of_payments": self.number_of_payments,
            "total_payment_cents": self.total_payment_cents,
            "total_interest_cents": self.total_interest_cents,
        }
