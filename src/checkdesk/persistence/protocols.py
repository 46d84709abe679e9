"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from checkdesk.core.protocols import IReviewRegistry

__all__ = ["IReviewRegistry"]
