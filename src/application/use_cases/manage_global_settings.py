"""Use cases for the global settings singleton."""

from datetime import datetime
from decimal import Decimal

from src.application.ports.household_repository import HouseholdRepositoryPort
from src.domain.models import GlobalSettings
from src.domain.services.validation import validate_prime_rate
from src.infrastructure.logging.logger import get_app_logger


class EnsureGlobalSettingsUseCase:
    """Create the settings singleton with the default prime rate if missing."""

    def __init__(
        self,
        household_repository: HouseholdRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = household_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> GlobalSettings:
        """Return the stored settings, creating them on first use."""
        settings = self._repository.fetch_global_settings()
        if settings is not None:
            return settings
        settings = GlobalSettings(last_updated=datetime.now())
        self._repository.save_global_settings(settings)
        self._logger.info(
            f"Global settings created with prime rate {settings.prime_rate}"
        )
        return settings


class UpdatePrimeRateUseCase:
    """Validate and store a new prime rate."""

    def __init__(
        self,
        household_repository: HouseholdRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = household_repository
        self._logger = logger or get_app_logger()

    def execute(self, prime_rate: Decimal) -> GlobalSettings:
        """Store the prime rate.

        Args:
            prime_rate: New prime rate in percent.

        Returns:
            GlobalSettings: The saved settings.

        Raises:
            ValueError: If the rate is outside 0..30 percent.
        """
        validate_prime_rate(prime_rate)
        settings = GlobalSettings(
            prime_rate=prime_rate,
            last_updated=datetime.now(),
        )
        self._repository.save_global_settings(settings)
        self._logger.info(f"Prime rate updated to {prime_rate}%")
        return settings


__all__ = ["EnsureGlobalSettingsUseCase", "UpdatePrimeRateUseCase"]
