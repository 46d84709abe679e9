"""Deposit request, token and outcome models."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field

CONFIRMATION_PREFIX = "CONF-"
PROVISIONAL_PREFIX = "FAKECONF-"


class ReviewTier(StrEnum):
    SPECIALIST = "specialist"
    REGULATORY = "regulatory"


class DepositStatus(StrEnum):
    RECEIVED = "RECEIVED"
    CLEARED = "CLEARED"
    ESCALATED = "ESCALATED"
    REJECTED = "REJECTED"


class DepositRequest(BaseModel):
    """A single check deposit as submitted by the caller."""

    model_config = {"frozen": True}

    check_number: str
    amount: Decimal = Field(allow_inf_nan=False)


class DepositOutcome(BaseModel):
    """Terminal result of one request in a batch."""

    check_number: str
    status: DepositStatus
    token: str = ""
    error: str = ""  # wrapped error text, set only when REJECTED


def confirmation_token(check_number: str) -> str:
    return CONFIRMATION_PREFIX + check_number


def provisional_token(check_number: str) -> str:
    return PROVISIONAL_PREFIX + check_number


def is_provisional(token: str) -> bool:
    """True for tokens issued while the deposit awaits review."""
    return token.startswith(PROVISIONAL_PREFIX)
