"""Tests for EscalationRouter."""

from __future__ import annotations

from decimal import Decimal

import pytest

from checkdesk.agents.orchestrator.escalation import EscalationRouter
from checkdesk.core.exceptions import RequiresRegulatoryReview, RequiresSpecialistReview
from checkdesk.models.deposit import ReviewTier


@pytest.fixture
def router(specialist_registry, regulatory_registry):
    return EscalationRouter(specialist=specialist_registry, regulatory=regulatory_registry)


def test_specialist_escalation_writes_only_specialist(router, specialist_registry, regulatory_registry):
    token = router.route(RequiresSpecialistReview("S1", Decimal("150000")))
    assert token == "FAKECONF-S1"
    assert specialist_registry.get("S1") == Decimal("150000")
    assert len(regulatory_registry) == 0


def test_regulatory_escalation_writes_only_regulatory(router, specialist_registry, regulatory_registry):
    token = router.route(RequiresRegulatoryReview("R1", Decimal("5000000")))
    assert token == "FAKECONF-R1"
    assert regulatory_registry.get("R1") == Decimal("5000000")
    assert len(specialist_registry) == 0


def test_registry_for(router, specialist_registry):
    assert router.registry_for(ReviewTier.SPECIALIST) is specialist_registry
