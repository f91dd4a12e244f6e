"""Application ports package."""

from .database import DatabaseEnginePort
from .household_repository import HouseholdRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "HouseholdRepositoryPort",
]
