"""Batch driver: runs deposits in order and never lets one failure stop the rest."""

from __future__ import annotations

import logging
from typing import Iterable

from checkdesk.agents.orchestrator.deposit_orchestrator import DepositOrchestrator
from checkdesk.core.exceptions import DepositError
from checkdesk.core.types import RawAmount
from checkdesk.models.deposit import DepositOutcome, DepositStatus, is_provisional

logger = logging.getLogger(__name__)


def run_deposit(orchestrator: DepositOrchestrator, check_number: str, amount: RawAmount) -> DepositOutcome:
    try:
        token = orchestrator.perform_deposit(check_number, amount)
    except DepositError as exc:
        logger.error("Deposit of check %r rejected: %s", check_number, exc)
        return DepositOutcome(
            check_number=str(check_number), status=DepositStatus.REJECTED, error=str(exc),
        )

    status = DepositStatus.ESCALATED if is_provisional(token) else DepositStatus.CLEARED
    return DepositOutcome(check_number=check_number, status=status, token=token)


def run_batch(
    orchestrator: DepositOrchestrator, deposits: Iterable[tuple[str, RawAmount]]
) -> list[DepositOutcome]:
    """Process (check number, amount) pairs sequentially, logging and continuing on errors."""
    outcomes = [run_deposit(orchestrator, check, amount) for check, amount in deposits]
    rejected = sum(1 for o in outcomes if o.status == DepositStatus.REJECTED)
    logger.info("Batch finished: %d deposits, %d rejected", len(outcomes), rejected)
    return outcomes
