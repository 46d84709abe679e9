"""EscalationRouter: routes escalated deposits to the matching review registry."""

from __future__ import annotations

import logging

from checkdesk.core.exceptions import EscalationRequired
from checkdesk.core.types import ConfirmationToken
from checkdesk.models.deposit import ReviewTier, provisional_token
from checkdesk.persistence.protocols import IReviewRegistry

logger = logging.getLogger(__name__)


class EscalationRouter:
    """Writes each escalation into exactly one registry and issues a provisional token."""

    def __init__(self, *, specialist: IReviewRegistry, regulatory: IReviewRegistry) -> None:
        self._registries: dict[ReviewTier, IReviewRegistry] = {
            ReviewTier.SPECIALIST: specialist,
            ReviewTier.REGULATORY: regulatory,
        }

    def registry_for(self, tier: ReviewTier) -> IReviewRegistry:
        return self._registries[tier]

    def route(self, escalation: EscalationRequired) -> ConfirmationToken:
        registry = self.registry_for(escalation.tier)
        logger.info(
            "Submitting check %s of amount %s for %s review",
            escalation.check_number, escalation.amount, escalation.tier,
        )
        registry.submit(escalation.check_number, escalation.amount)
        return provisional_token(escalation.check_number)
