"""Shared fixtures for use case tests."""

from dataclasses import dataclass, field

import pytest

from src.domain.models import (
    Account,
    BalanceSnapshot,
    GlobalSettings,
    Subscription,
)


@dataclass
class InMemoryHouseholdRepository:
    accounts: list[Account] = field(default_factory=list)
    snapshots: list[BalanceSnapshot] = field(default_factory=list)
    subscriptions: list[Subscription] = field(default_factory=list)
    settings: GlobalSettings | None = None
    saved: list[GlobalSettings] = field(default_factory=list)

    def fetch_accounts(self) -> list[Account]:
        return list(self.accounts)

    def fetch_balance_snapshots(self) -> list[BalanceSnapshot]:
        return list(self.snapshots)

    def fetch_subscriptions(self) -> list[Subscription]:
        return list(self.subscriptions)

    def fetch_global_settings(self) -> GlobalSettings | None:
        return self.settings

    def save_global_settings(self, settings: GlobalSettings) -> None:
        self.saved.append(settings)
        self.settings = settings


@pytest.fixture
def make_repository():
    """Return a factory for in-memory household repositories."""
    return InMemoryHouseholdRepository
