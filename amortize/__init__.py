"""Fixed-rate loan amortization schedules."""

from amortize.engine import ScheduleEngine, build_schedule, compute_monthly_payment
from amortize.models import LoanTerms, PaymentRecord, Schedule

__version__ = "0.1.0"

__all__ = [
    "LoanTerms",
    "PaymentRecord",
    "Schedule",
    "ScheduleEngine",
    "__version__",
    "build_schedule",
    "compute_monthly_payment",
]
