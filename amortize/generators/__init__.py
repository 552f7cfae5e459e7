"""Generators for sample loan terms."""

from amortize.generators.terms import LoanTermsGenerator

__all__ = ["LoanTermsGenerator"]
