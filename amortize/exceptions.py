"""Custom exception hierarchy for amortize."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from amortize.config import Range


class AmortizeError(Exception):
    """Base exception for all amortize errors."""


class LoanTermsError(AmortizeError):
    """Raised when loan terms cannot be constructed."""


class InvalidFieldError(LoanTermsError):
    """Raised when a single input field is unparsable or out of range.

    ``field`` matches the values of :class:`amortize.models.enums.LoanField`.
    """

    field = "value"

    def __init__(self, value: Any, bounds: Range | None = None, message: str | None = None) -> None:
        self.value = value
        self.bounds = bounds
        if message is None:
            message = f"Invalid {self.field}: {value!r}"
            if bounds is not None:
                message += f" (expected a value between {bounds.describe()})"
        super().__init__(message)


class InvalidAmountError(InvalidFieldError):
    """Raised when the amount to borrow is invalid."""

    field = "amount"


class InvalidRateError(InvalidFieldError):
    """Raised when the annual percentage rate is invalid."""

    field = "rate"


class InvalidTermError(InvalidFieldError):
    """Raised when the term in years is invalid."""

    field = "term"


class InvalidLoanTermsError(LoanTermsError):
    """Raised when one or more fields fail validation.

    Carries every field failure found so callers can report them together.
    """

    def __init__(self, errors: list[InvalidFieldError] | tuple[InvalidFieldError, ...]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(str(e) for e in self.errors))

    @property
    def fields(self) -> tuple[str, ...]:
        """Fields that failed validation, in input order."""
        return tuple(e.field for e in self.errors)


class PaymentDerivationError(LoanTermsError):
    """Raised when the derived monthly payment is inconsistent with the principal."""


class ScheduleLimitError(AmortizeError):
    """Raised when a schedule would exceed the configured period cap."""


class InvalidRecordError(AmortizeError):
    """Raised when a payment record violates its invariants."""


class InputAbortedError(AmortizeError):
    """Raised when interactive input ends before all values were read."""


class ConfigurationError(AmortizeError):
    """Raised when configuration is invalid or missing."""
