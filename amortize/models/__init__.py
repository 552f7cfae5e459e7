"""Domain models for loan amortization."""

from amortize.models.enums import LoanField, LoanProfile
from amortize.models.loan import (
    LoanTerms,
    PaymentRecord,
    Schedule,
    cents_to_dollars,
    to_cents,
)

__all__ = [
    "LoanField",
    "LoanProfile",
    "LoanTerms",
    "PaymentRecord",
    "Schedule",
    "cents_to_dollars",
    "to_cents",
]
