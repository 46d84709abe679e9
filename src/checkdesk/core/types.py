"""Type aliases used across the CheckDesk package."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

ConfirmationToken = str
RawAmount = Union[Decimal, float, int, str]
