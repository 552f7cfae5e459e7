"""Shared serialization utilities for sinks."""

from dataclasses import fields
from decimal import Decimal
from enum import Enum
from typing import Any

from amortize.models import LoanTerms, Schedule


def to_dict_fast(obj: Any) -> dict:
    """Convert a flat dataclass without the deep copy ``asdict`` makes.

    Schedules can hold millions of records, so records go through here.

    Parameters
    ----------
    obj : Any
        A dataclass instance.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def terms_to_dict(terms: LoanTerms) -> dict:
    """Serialize loan terms without their validation bounds."""
    return {
        "principal_cents": terms.principal_cents,
        "annual_percentage_rate": terms.annual_percentage_rate,
        "term_months": terms.term_months,
    }


def schedule_to_dict(schedule: Schedule) -> dict:
    """Serialize a schedule with its terms, totals and records."""
    return {
        "terms": terms_to_dict(schedule.terms),
        "monthly_payment_cents": schedule.monthly_payment_cents,
        "summary": schedule.summary(),
        "records": [to_dict_fast(record) for record in schedule.records],
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
