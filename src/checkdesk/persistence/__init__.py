"""Review registry backends behind the IReviewRegistry protocol."""

from __future__ import annotations

from checkdesk.models.deposit import ReviewTier
from checkdesk.persistence.memory_backend import MemoryReviewRegistry


def create_review_registries() -> tuple[MemoryReviewRegistry, MemoryReviewRegistry]:
    """Create empty registries for both review tiers.

    Returns:
        Tuple of (specialist, regulatory).
    """
    return (
        MemoryReviewRegistry(ReviewTier.SPECIALIST),
        MemoryReviewRegistry(ReviewTier.REGULATORY),
    )
