"""Prime rate resolution shared by use cases."""

from decimal import Decimal

from src.application.ports.household_repository import HouseholdRepositoryPort
from src.domain.constants import DEFAULT_PRIME_RATE


def resolve_prime_rate(repository: HouseholdRepositoryPort) -> Decimal:
    """Return the stored prime rate, or the default when none is stored."""
    settings = repository.fetch_global_settings()
    if settings is None:
        return DEFAULT_PRIME_RATE
    return settings.prime_rate


__all__ = ["resolve_prime_rate"]
