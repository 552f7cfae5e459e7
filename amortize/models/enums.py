"""Enumeration types for loan entities."""

from enum import Enum


class LoanField(str, Enum):
    AMOUNT = "amount"
    RATE = "rate"
    TERM = "term"


class LoanProfile(str, Enum):
    PERSONAL = "PERSONAL"
    AUTO = "AUTO"
    MORTGAGE = "MORTGAGE"
    STUDENT = "STUDENT"
