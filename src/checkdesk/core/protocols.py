"""Protocol interfaces for all CheckDesk abstractions.

All inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable

from checkdesk.core.types import ConfirmationToken, RawAmount
from checkdesk.models.deposit import ReviewTier


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@runtime_checkable
class IDepositValidator(Protocol):
    """Classifies a deposit: returns a confirmation token or raises ClassifiedError."""

    def validate(self, check_number: str, amount: RawAmount) -> ConfirmationToken: ...


# ---------------------------------------------------------------------------
# Persistence: Review Registry
# ---------------------------------------------------------------------------

@runtime_checkable
class IReviewRegistry(Protocol):
    """Check number -> amount map of deposits awaiting one review tier."""

    @property
    def tier(self) -> ReviewTier: ...

    def submit(self, check_number: str, amount: Decimal) -> None: ...

    def contains(self, check_number: str) -> bool: ...

    def get(self, check_number: str) -> Decimal | None: ...

    def entries(self) -> dict[str, Decimal]: ...

    def __contains__(self, check_number: object) -> bool: ...

    def __len__(self) -> int: ...


# ---------------------------------------------------------------------------
# Staffing roles
# ---------------------------------------------------------------------------

@runtime_checkable
class IDeveloper(Protocol):
    """Anyone who can develop a system."""

    def develop(self, system: str) -> str: ...


@runtime_checkable
class IDeployer(Protocol):
    """Anyone who can deploy a system to an environment."""

    def deploy(self, system: str, environment: str) -> str: ...


@runtime_checkable
class ISpecialist(IDeveloper, IDeployer, Protocol):
    """Both capabilities, for systems that only one person may touch."""


@runtime_checkable
class ISpeaker(Protocol):
    def speak(self) -> str: ...
