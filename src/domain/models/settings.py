"""Domain model for global planner settings."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.domain.constants import DEFAULT_PRIME_RATE


@dataclass(frozen=True)
class GlobalSettings:
    """Singleton settings holding the prime rate used for variable APRs.

    Attributes:
        prime_rate: Current prime rate as a percentage (8.50 means 8.5%).
        last_updated: When the rate was last changed.
    """

    prime_rate: Decimal = DEFAULT_PRIME_RATE
    last_updated: datetime | None = None


__all__ = ["GlobalSettings"]
