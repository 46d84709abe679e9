"""DepositOrchestrator: turns validator verdicts into tokens, registry writes or errors."""

from __future__ import annotations

import logging

from checkdesk.agents.orchestrator.escalation import EscalationRouter
from checkdesk.agents.validator.deposit_validator import DepositValidator
from checkdesk.core.config import AppSettings
from checkdesk.core.exceptions import (
    ClassifiedError,
    DepositError,
    EscalationRequired,
    InvalidInputError,
)
from checkdesk.core.protocols import IDepositValidator, IReviewRegistry
from checkdesk.core.types import ConfirmationToken, RawAmount
from checkdesk.persistence import create_review_registries

logger = logging.getLogger(__name__)

INVALID_INPUT_CONTEXT = "fix the amount"
UNEXPECTED_CONTEXT = "unexpected error"


class DepositOrchestrator:
    """Single entry point for check deposits.

    The orchestrator owns both review registries and is the only layer that
    decides which classified errors reach the caller. Escalations are
    absorbed into a registry write plus a provisional token; everything else
    that fails is raised as DepositError.
    """

    def __init__(
        self,
        *,
        validator: IDepositValidator,
        specialist_registry: IReviewRegistry,
        regulatory_registry: IReviewRegistry,
    ) -> None:
        self._validator = validator
        self._specialist = specialist_registry
        self._regulatory = regulatory_registry
        self._router = EscalationRouter(
            specialist=specialist_registry, regulatory=regulatory_registry,
        )

    @property
    def specialist_registry(self) -> IReviewRegistry:
        return self._specialist

    @property
    def regulatory_registry(self) -> IReviewRegistry:
        return self._regulatory

    def perform_deposit(self, check_number: str, amount: RawAmount) -> ConfirmationToken:
        """Deposit one check and return its confirmation token.

        Raises:
            DepositError: the request was rejected; ``cause`` holds the
                classified error.
        """
        logger.info("Trying to deposit check %s of amount %s", check_number, amount)
        try:
            token = self._validator.validate(check_number, amount)
        except InvalidInputError as exc:
            raise DepositError(INVALID_INPUT_CONTEXT, exc) from exc
        except EscalationRequired as exc:
            return self._router.route(exc)
        except ClassifiedError as exc:
            raise DepositError(UNEXPECTED_CONTEXT, exc) from exc

        logger.info("Check %s deposited, confirmation %s", check_number, token)
        return token

    def in_specialist_review(self, check_number: str) -> bool:
        return self._specialist.contains(check_number)

    def in_regulatory_review(self, check_number: str) -> bool:
        return self._regulatory.contains(check_number)


def create_orchestrator(settings: AppSettings | None = None) -> DepositOrchestrator:
    """Wire a validator and fresh registries from application settings."""
    if settings is None:
        settings = AppSettings()

    specialist, regulatory = create_review_registries()
    return DepositOrchestrator(
        validator=DepositValidator(settings.review),
        specialist_registry=specialist,
        regulatory_registry=regulatory,
    )
