"""Shared fixtures: a fresh orchestrator and its registries per test."""

from __future__ import annotations

import pytest

from checkdesk.agents.orchestrator.deposit_orchestrator import DepositOrchestrator
from checkdesk.agents.validator.deposit_validator import DepositValidator
from checkdesk.models.deposit import ReviewTier
from checkdesk.persistence.memory_backend import MemoryReviewRegistry


@pytest.fixture
def specialist_registry():
    return MemoryReviewRegistry(ReviewTier.SPECIALIST)


@pytest.fixture
def regulatory_registry():
    return MemoryReviewRegistry(ReviewTier.REGULATORY)


@pytest.fixture
def orchestrator(specialist_registry, regulatory_registry):
    return DepositOrchestrator(
        validator=DepositValidator(),
        specialist_registry=specialist_registry,
        regulatory_registry=regulatory_registry,
    )
