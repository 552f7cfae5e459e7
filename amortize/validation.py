"""Input validation for loan amount, rate and term.

The ``is_valid_*`` predicates never raise. The ``validate_*`` and
``parse_*`` helpers raise the field's :class:`InvalidFieldError` subclass,
which callers either report (interactive input) or aggregate
(:meth:`amortize.models.LoanTerms.create`).
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any

from amortize.config import BoundsConfig
from amortize.exceptions import (
    InvalidAmountError,
    InvalidFieldError,
    InvalidRateError,
    InvalidTermError,
)
from amortize.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BOUNDS = BoundsConfig()


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(result) else result


def is_valid_amount(amount: Any, bounds: BoundsConfig = DEFAULT_BOUNDS) -> bool:
    """Check that ``amount`` (dollars) lies within the configured range."""
    value = _as_float(amount)
    return value is not None and bounds.amount.contains(value)


def is_valid_rate(rate: Any, bounds: BoundsConfig = DEFAULT_BOUNDS) -> bool:
    """Check that ``rate`` (annual percent) lies within the configured range."""
    value = _as_float(rate)
    return value is not None and bounds.rate.contains(value)


def is_valid_term(years: Any, bounds: BoundsConfig = DEFAULT_BOUNDS) -> bool:
    """Check that ``years`` is a whole number within the configured range."""
    if isinstance(years, bool) or not isinstance(years, Integral):
        return False
    return bounds.term_years.contains(int(years))


def validate_amount(amount: Any, bounds: BoundsConfig = DEFAULT_BOUNDS) -> Any:
    if not is_valid_amount(amount, bounds):
        raise InvalidAmountError(amount, bounds.amount)
    return amount


def validate_rate(rate: Any, bounds: BoundsConfig = DEFAULT_BOUNDS) -> Any:
    if not is_valid_rate(rate, bounds):
        raise InvalidRateError(rate, bounds.rate)
    return rate


def validate_term(years: Any, bounds: BoundsConfig = DEFAULT_BOUNDS) -> Any:
    if not is_valid_term(years, bounds):
        raise InvalidTermError(years, bounds.term_years)
    return years


def parse_amount(text: str, bounds: BoundsConfig = DEFAULT_BOUNDS) -> float:
    """Parse and validate a dollar amount typed by the user.

    Raises
    ------
    InvalidAmountError
        If the text is not a number or is out of range.
    """
    try:
        amount = float(text.strip())
    except ValueError:
        raise InvalidAmountError(text, bounds.amount) from None
    return validate_amount(amount, bounds)


def parse_rate(text: str, bounds: BoundsConfig = DEFAULT_BOUNDS) -> float:
    """Parse and validate an annual percentage rate typed by the user.

    Raises
    ------
    InvalidRateError
        If the text is not a number or is out of range.
    """
    try:
        rate = float(text.strip())
    except ValueError:
        raise InvalidRateError(text, bounds.rate) from None
    return validate_rate(rate, bounds)


def parse_term(text: str, bounds: BoundsConfig = DEFAULT_BOUNDS) -> int:
    """Parse and validate a term in whole years typed by the user.

    Raises
    ------
    InvalidTermError
        If the text is not an integer or is out of range.
    """
    try:
        years = int(text.strip())
    except ValueError:
        raise InvalidTermError(text, bounds.term_years) from None
    return validate_term(years, bounds)


def collect_errors(
    amount: Any,
    rate: Any,
    years: Any,
    bounds: BoundsConfig = DEFAULT_BOUNDS,
) -> list[InvalidFieldError]:
    """Validate all three inputs and return every failure found."""
    errors: list[InvalidFieldError] = []
    for validator, value in (
        (validate_amount, amount),
        (validate_rate, rate),
        (validate_term, years),
    ):
        try:
            validator(value, bounds)
        except InvalidFieldError as e:
            logger.debug("Rejected %s: %r", e.field, value)
            errors.append(e)
    return errors
