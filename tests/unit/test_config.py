"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from checkdesk.core.config import AppSettings, ReviewThresholdConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.review.specialist_threshold == Decimal("100000")


def test_review_threshold_defaults():
    config = ReviewThresholdConfig()
    assert config.specialist_threshold == Decimal("100000")
    assert config.regulatory_threshold == Decimal("1000000")


def test_review_thresholds_from_env(monkeypatch):
    monkeypatch.setenv("CHECKDESK_REVIEW_SPECIALIST_THRESHOLD", "5000")
    monkeypatch.setenv("CHECKDESK_REVIEW_REGULATORY_THRESHOLD", "50000")
    settings = AppSettings()
    assert settings.review.specialist_threshold == Decimal("5000")
    assert settings.review.regulatory_threshold == Decimal("50000")


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("CHECKDESK_LOG_LEVEL", "DEBUG")
    assert AppSettings().log_level == "DEBUG"


def test_rejects_inverted_thresholds():
    with pytest.raises(ValidationError):
        ReviewThresholdConfig(
            specialist_threshold=Decimal("500"), regulatory_threshold=Decimal("100"),
        )
