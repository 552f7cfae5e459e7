"""Tests for loan terms generators."""

from decimal import Decimal

from amortize.generators import LoanTermsGenerator
from amortize.models import LoanProfile, LoanTerms
from amortize.validation import is_valid_amount, is_valid_rate, is_valid_term


class TestLoanTermsGenerator:
    """Tests for LoanTermsGenerator."""

    def test_generate(self, seed: int) -> None:
        terms = LoanTermsGenerator(seed=seed).generate()

        assert isinstance(terms, LoanTerms)
        assert is_valid_amount(terms.principal)
        assert is_valid_rate(terms.annual_percentage_rate)
        assert is_valid_term(terms.term_years)

    def test_generate_for_each_profile(self, seed: int) -> None:
        gen = LoanTermsGenerator(seed=seed)

        for profile in LoanProfile:
            (min_amount, max_amount), (min_rate, max_rate), years = gen.PROFILE_RANGES[profile]
            for _ in range(20):
                terms = gen.generate(profile)
                assert Decimal(min_amount) <= terms.principal <= Decimal(max_amount)
                assert min_rate <= terms.annual_percentage_rate <= max_rate
                assert terms.term_years in years

    def test_generate_batch(self, seed: int) -> None:
        terms = list(LoanTermsGenerator(seed=seed).generate_batch(10, LoanProfile.MORTGAGE))

        assert len(terms) == 10
        assert all(t.term_years >= 10 for t in terms)

    def test_reproducible(self, seed: int) -> None:
        first = list(LoanTermsGenerator(seed=seed).generate_batch(5))
        second = list(LoanTermsGenerator(seed=seed).generate_batch(5))

        assert first == second

    def test_boundary_cases(self) -> None:
        cases = LoanTermsGenerator.boundary_cases()

        assert len(cases) == 8
        assert min(t.principal_cents for t in cases) == 1
        assert max(t.principal_cents for t in cases) == 100_000_000_000_000
        assert {t.annual_percentage_rate for t in cases} == {0.000001, 100.0}
        assert {t.term_years for t in cases} == {1, 30}
