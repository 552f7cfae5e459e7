"""Amortization schedule engine.

Derives the fixed monthly payment for a set of loan terms and walks the
loan period by period until the balance reaches zero. All amounts are
integer cents; only the payment formula itself runs in floating point.
"""

from __future__ import annotations

import math
from typing import Iterator

from amortize.config import EngineConfig
from amortize.exceptions import PaymentDerivationError, ScheduleLimitError
from amortize.logging import get_logger
from amortize.models import LoanTerms, PaymentRecord, Schedule

logger = get_logger(__name__)

# Periods allowed beyond the term: one of slack for rounding drift and the
# forced payoff period.
EXTRA_PERIODS = 2


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return math.floor(value + 0.5)


def compute_monthly_payment(principal_cents: int, annual_percentage_rate: float, term_months: int) -> int:
    """Derive the fixed monthly payment in cents.

    ``M = P * J / (1 - (1 + J) ** -N)`` with ``J = APR / 1200``, rounded
    half-up to the nearest cent.

    Parameters
    ----------
    principal_cents : int
        Amount borrowed, in cents.
    annual_percentage_rate : float
        Annual rate in percent.
    term_months : int
        Number of monthly payments.

    Returns
    -------
    int
        Monthly payment in cents.

    Raises
    ------
    PaymentDerivationError
        If the formula has no finite result or the payment exceeds the
        principal (only possible outside the validated input ranges).
    """
    j = annual_percentage_rate / 1200
    try:
        payment = principal_cents * j / (1 - (1 + j) ** -term_months)
    except (ZeroDivisionError, OverflowError) as e:
        raise PaymentDerivationError(
            f"Monthly payment calculation failed for rate {annual_percentage_rate}% "
            f"over {term_months} months: {e}"
        ) from e

    if not math.isfinite(payment):
        raise PaymentDerivationError(f"Monthly payment calculation produced {payment}")

    rounded = round_half_up(payment)
    if rounded > principal_cents:
        raise PaymentDerivationError(
            f"Monthly payment calculation produced an inconsistent result: "
            f"payment {rounded} exceeds principal {principal_cents} (cents)"
        )
    return rounded


class ScheduleEngine:
    """Generate amortization schedules.

    Engines hold no per-loan state, so one instance can serve any number
    of loans, from any thread.

    Parameters
    ----------
    config : EngineConfig | None
        Engine configuration (hard cap on schedule length).
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def monthly_payment(self, terms: LoanTerms) -> int:
        """Derive the fixed monthly payment for ``terms`` in cents."""
        return compute_monthly_payment(terms.principal_cents, terms.annual_percentage_rate, terms.term_months)

    def iter_records(self, terms: LoanTerms, monthly_payment_cents: int | None = None) -> Iterator[PaymentRecord]:
        """Yield the schedule's records lazily, disbursement first.

        The period cap is checked here, before any record is produced.

        Raises
        ------
        ScheduleLimitError
            If the schedule could need more periods than ``max_periods``.
        """
        max_periods = self.config.max_periods
        if max_periods is not None and terms.term_months + EXTRA_PERIODS > max_periods:
            raise ScheduleLimitError(
                f"A {terms.term_months}-month loan may need up to {terms.term_months + EXTRA_PERIODS} "
                f"payment periods, above the configured limit of {max_periods}"
            )
        if monthly_payment_cents is None:
            monthly_payment_cents = self.monthly_payment(terms)
        return self._generate(terms, monthly_payment_cents)

    def build(self, terms: LoanTerms) -> Schedule:
        """Compute the complete schedule for ``terms``."""
        monthly_payment = self.monthly_payment(terms)
        logger.debug(
            "Monthly payment %d cents for principal %d cents at %s%% over %d months",
            monthly_payment,
            terms.principal_cents,
            terms.annual_percentage_rate,
            terms.term_months,
        )
        records = tuple(self.iter_records(terms, monthly_payment))
        logger.debug(
            "Built schedule with %d payments",
            len(records) - 1,
            extra={
                "extra": {
                    "principal_cents": terms.principal_cents,
                    "term_months": terms.term_months,
                    "monthly_payment_cents": monthly_payment,
                    "number_of_payments": len(records) - 1,
                }
            },
        )
        return Schedule(terms=terms, monthly_payment_cents=monthly_payment, records=records)

    def _generate(self, terms: LoanTerms, monthly_payment: int) -> Iterator[PaymentRecord]:
        """Walk the loan until it is paid off."""
        j = terms.monthly_rate
        balance = terms.principal_cents
        period = 0
        total_payments = 0
        total_interest = 0

        yield PaymentRecord(
            period_number=period,
            payment_amount_cents=0,
            interest_portion_cents=0,
            remaining_balance_cents=balance,
            cumulative_payment_cents=0,
            cumulative_interest_cents=0,
        )

        last_period = terms.term_months + 1
        while balance > 0 and period <= last_period:
            interest = round_half_up(balance * j)
            payoff = balance + interest

            # Never pay more than what retires the loan
            payment = min(monthly_payment, payoff)

            # Nothing may remain after the last allowed period. A 1-cent payment
            # on a 17-cent loan at the lowest rate is neither zero nor the
            # interest, yet still leaves 4 cents owing here.
            if period == last_period and payment < payoff:
                payment = payoff

            balance -= payment - interest
            total_payments += payment
            total_interest += interest
            period += 1

            yield PaymentRecord(
                period_number=period,
                payment_amount_cents=payment,
                interest_portion_cents=interest,
                remaining_balance_cents=balance,
                cumulative_payment_cents=total_payments,
                cumulative_interest_cents=total_interest,
            )


def build_schedule(terms: LoanTerms, config: EngineConfig | None = None) -> Schedule:
    """Compute the schedule for ``terms`` with a default engine."""
    return ScheduleEngine(config).build(terms)
