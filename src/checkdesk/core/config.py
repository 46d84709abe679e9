"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class ReviewThresholdConfig(BaseSettings):
    """Amount thresholds that send a deposit to review."""

    model_config = {"env_prefix": "CHECKDESK_REVIEW_"}

    specialist_threshold: Decimal = Decimal("100000")
    regulatory_threshold: Decimal = Decimal("1000000")

    @model_validator(mode="after")
    def _check_ordering(self) -> ReviewThresholdConfig:
        if self.regulatory_threshold < self.specialist_threshold:
            raise ValueError(
                "regulatory_threshold must not be below specialist_threshold"
            )
        return self


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CHECKDESK_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    review: ReviewThresholdConfig = Field(default_factory=ReviewThresholdConfig)
