"""CheckDesk exception hierarchy.

``ClassifiedError`` and its subclasses are the validator's verdicts. Each
failure carries exactly one of these classes, so callers branch on type
rather than on message text. ``DepositError`` is what the orchestrator lets
escape to its callers.
"""

from __future__ import annotations

from decimal import Decimal

from checkdesk.models.deposit import ReviewTier


class CheckDeskError(Exception):
    """Base exception for all CheckDesk errors."""


class ClassifiedError(CheckDeskError):
    """A deposit request did not clear validation."""


class InvalidInputError(ClassifiedError):
    """The caller supplied a request that can never clear as-is."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"bad input: {reason}")


class EscalationRequired(ClassifiedError):
    """The deposit is valid but must be reviewed before it clears."""

    tier: ReviewTier

    def __init__(self, check_number: str, amount: Decimal) -> None:
        self.check_number = check_number
        self.amount = amount
        super().__init__(
            f"suspicious activity, {self.tier.value} review required "
            f"for check {check_number}"
        )


class RequiresSpecialistReview(EscalationRequired):
    """Amount is above the specialist threshold."""

    tier = ReviewTier.SPECIALIST


class RequiresRegulatoryReview(EscalationRequired):
    """Amount is above the regulatory threshold."""

    tier = ReviewTier.REGULATORY


class UnexpectedDepositError(ClassifiedError):
    """Validation failed for a reason outside the known rule set."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(cause)


class DepositError(CheckDeskError):
    """A deposit was rejected; carries the rejecting context and its cause."""

    def __init__(self, context: str, cause: Exception) -> None:
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")


class RegistryError(CheckDeskError):
    """A review registry rejected an operation."""
