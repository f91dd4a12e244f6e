"""Domain models for recurring subscriptions."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class SubscriptionCategory(str, Enum):
    """Category of a recurring subscription."""

    ENTERTAINMENT = "Entertainment"
    PRODUCTIVITY = "Productivity"
    FITNESS = "Fitness"
    NEWS = "News"
    MUSIC = "Music"
    CLOUD_STORAGE = "Cloud Storage"
    UTILITIES = "Utilities"
    FOOD = "Food"
    SHOPPING = "Shopping"
    EDUCATION = "Education"
    OTHER = "Other"


@dataclass(frozen=True)
class Subscription:
    """A recurring charge billed ``times_per_year`` times."""

    subscription_id: str
    name: str
    amount: Decimal
    times_per_year: int
    category: SubscriptionCategory = SubscriptionCategory.OTHER
    is_active: bool = True
    notes: str = ""

    def __post_init__(self) -> None:
        if self.times_per_year <= 0:
            raise ValueError(
                f"times_per_year must be positive, got {self.times_per_year}"
            )


__all__ = ["SubscriptionCategory", "Subscription"]
