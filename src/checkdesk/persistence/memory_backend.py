"""In-memory review registries: dict-backed, lock-guarded."""

from __future__ import annotations

import threading
from decimal import Decimal

from checkdesk.core.exceptions import RegistryError
from checkdesk.models.deposit import ReviewTier


class MemoryReviewRegistry:
    """IReviewRegistry kept in process memory for the owner's lifetime.

    Every read and write takes the registry lock, so concurrent submissions
    for different checks are never lost and the last submission for a given
    check number wins.
    """

    def __init__(self, tier: ReviewTier) -> None:
        self._tier = tier
        self._entries: dict[str, Decimal] = {}
        self._lock = threading.Lock()

    @property
    def tier(self) -> ReviewTier:
        return self._tier

    def submit(self, check_number: str, amount: Decimal) -> None:
        if not check_number:
            raise RegistryError(f"{self._tier} registry requires a check number")
        with self._lock:
            self._entries[check_number] = amount

    def contains(self, check_number: str) -> bool:
        with self._lock:
            return check_number in self._entries

    def get(self, check_number: str) -> Decimal | None:
        with self._lock:
            return self._entries.get(check_number)

    def entries(self) -> dict[str, Decimal]:
        with self._lock:
            return dict(self._entries)

    def __contains__(self, check_number: object) -> bool:
        return isinstance(check_number, str) and self.contains(check_number)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoryReviewRegistry(tier={self._tier.value!r}, size={len(self)})"
