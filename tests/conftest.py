"""Pytest configuration and fixtures."""

import pytest

from amortize.models import LoanTerms


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def one_year_terms() -> LoanTerms:
    """$1,000 at 12% over one year (monthly rate exactly 1%)."""
    return LoanTerms.create(amount=1000, rate=12.0, years=1)


@pytest.fixture
def mortgage_terms() -> LoanTerms:
    """$250,000 at 6.5% over 30 years."""
    return LoanTerms.create(amount=250_000, rate=6.5, years=30)


@pytest.fixture
def minimum_terms() -> LoanTerms:
    """Smallest accepted amount, rate and term."""
    return LoanTerms.create(amount=0.01, rate=0.000001, years=1)
