"""Loan terms generator."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from amortize.config import BoundsConfig
from amortize.generators.base import BaseGenerator
from amortize.models import LoanProfile, LoanTerms


class LoanTermsGenerator(BaseGenerator):
    """Generate realistic, valid loan terms."""

    PROFILES = list(LoanProfile)

    # (amount range in dollars, APR range in percent, term choices in years)
    PROFILE_RANGES = {
        LoanProfile.PERSONAL: ((1_000, 50_000), (6.0, 36.0), (1, 2, 3, 4, 5, 7)),
        LoanProfile.AUTO: ((5_000, 80_000), (3.0, 15.0), (2, 3, 4, 5, 6, 7)),
        LoanProfile.MORTGAGE: ((50_000, 2_000_000), (2.5, 9.0), (10, 15, 20, 25, 30)),
        LoanProfile.STUDENT: ((2_000, 150_000), (3.0, 12.0), (5, 10, 15, 20, 25)),
    }

    def generate(self, profile: LoanProfile | None = None) -> LoanTerms:
        """Generate loan terms.

        Parameters
        ----------
        profile : LoanProfile | None
            Loan profile; picked at random when omitted.

        Returns
        -------
        LoanTerms
            Generated terms.
        """
        if profile is None:
            profile = self.fake.random_element(self.PROFILES)
        (min_amount, max_amount), (min_rate, max_rate), years = self.PROFILE_RANGES[profile]

        amount = Decimal(self.fake.random_int(min=min_amount * 100, max=max_amount * 100)).scaleb(-2)
        rate = self.fake.random_int(min=round(min_rate * 1000), max=round(max_rate * 1000)) / 1000

        return LoanTerms.create(
            amount=amount,
            rate=rate,
            years=self.fake.random_element(years),
        )

    def generate_batch(self, count: int, profile: LoanProfile | None = None) -> Iterator[LoanTerms]:
        """Generate ``count`` loan terms."""
        for _ in range(count):
            yield self.generate(profile)

    @staticmethod
    def boundary_cases(bounds: BoundsConfig | None = None) -> list[LoanTerms]:
        """Terms at the edges of the accepted amount and rate ranges.

        Terms stay short so the resulting schedules are cheap to build.
        """
        bounds = bounds or BoundsConfig()
        amounts = (Decimal(str(bounds.amount.low)), Decimal(str(bounds.amount.high)))
        rates = (bounds.rate.low, bounds.rate.high)
        years = (int(bounds.term_years.low), 30)
        return [
            LoanTerms.create(amount=amount, rate=rate, years=term, bounds=bounds)
            for amount in amounts
            for rate in rates
            for term in years
        ]
