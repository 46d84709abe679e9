"""DepositValidator: classifies a check deposit by input validity and risk tier.

Rules run in a fixed order and the first match wins:

1. empty check number            -> InvalidInputError
2. negative amount               -> InvalidInputError
3. zero amount                   -> InvalidInputError
4. amount > regulatory threshold -> RequiresRegulatoryReview
5. amount > specialist threshold -> RequiresSpecialistReview
6. otherwise                     -> ``CONF-<check number>``

Both threshold comparisons are strict, so an amount equal to a threshold
clears without review.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from checkdesk.core.config import ReviewThresholdConfig
from checkdesk.core.exceptions import (
    InvalidInputError,
    RequiresRegulatoryReview,
    RequiresSpecialistReview,
)
from checkdesk.core.types import ConfirmationToken, RawAmount
from checkdesk.models.deposit import DepositRequest, confirmation_token

logger = logging.getLogger(__name__)

EMPTY_CHECK_NUMBER = "empty check number"
NEGATIVE_AMOUNT = "amount cannot be negative"
ZERO_AMOUNT = "amount cannot be zero"


class DepositValidator:
    """Pure classifier; holds nothing but its thresholds."""

    def __init__(self, thresholds: ReviewThresholdConfig | None = None) -> None:
        self._thresholds = thresholds or ReviewThresholdConfig()

    @property
    def thresholds(self) -> ReviewThresholdConfig:
        return self._thresholds

    def validate(self, check_number: str, amount: RawAmount) -> ConfirmationToken:
        """Return the confirmation token, or raise the matching ClassifiedError."""
        request = self._build_request(check_number, amount)
        return self.validate_request(request)

    def validate_request(self, request: DepositRequest) -> ConfirmationToken:
        if request.check_number == "":
            raise InvalidInputError(EMPTY_CHECK_NUMBER)

        if request.amount < 0:
            raise InvalidInputError(NEGATIVE_AMOUNT)

        if request.amount == 0:
            raise InvalidInputError(ZERO_AMOUNT)

        if request.amount > self._thresholds.regulatory_threshold:
            raise RequiresRegulatoryReview(request.check_number, request.amount)

        if request.amount > self._thresholds.specialist_threshold:
            raise RequiresSpecialistReview(request.check_number, request.amount)

        token = confirmation_token(request.check_number)
        logger.debug(
            "Check %s of amount %s cleared with %s",
            request.check_number, request.amount, token,
        )
        return token

    @staticmethod
    def _build_request(check_number: Any, amount: Any) -> DepositRequest:
        try:
            return DepositRequest(check_number=check_number, amount=amount)
        except ValidationError as exc:
            # The empty check number rule outranks any amount problem.
            if check_number == "":
                raise InvalidInputError(EMPTY_CHECK_NUMBER) from exc
            field = exc.errors()[0]["loc"][0]
            if field == "amount":
                raise InvalidInputError(f"amount {amount!r} is not a finite decimal") from exc
            raise InvalidInputError(f"check number {check_number!r} is not a string") from exc


_default_validator = DepositValidator()


def validate_deposit(check_number: str, amount: RawAmount) -> ConfirmationToken:
    """Classify with the default thresholds."""
    return _default_validator.validate(check_number, amount)
