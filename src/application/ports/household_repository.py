"""Port for reading household accounts, balances and settings."""

from typing import Protocol

from src.domain.models import (
    Account,
    BalanceSnapshot,
    GlobalSettings,
    Subscription,
)


class HouseholdRepositoryPort(Protocol):
    """Port exposing the persisted household data the planner reads."""

    def fetch_accounts(self) -> list[Account]:
        """Return every tracked account, active or not."""

    def fetch_balance_snapshots(self) -> list[BalanceSnapshot]:
        """Return the full balance snapshot history."""

    def fetch_subscriptions(self) -> list[Subscription]:
        """Return every recurring subscription."""

    def fetch_global_settings(self) -> GlobalSettings | None:
        """Return the settings singleton, or None when not created yet."""

    def save_global_settings(self, settings: GlobalSettings) -> None:
        """Create or replace the settings singleton."""


__all__ = ["HouseholdRepositoryPort"]
