"""Database ports for the planner.

This module defines the application-layer protocol for accessing the
database engine backing the persistence store. Infrastructure
implementations are expected to provide concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine of the persistence store."""

    def get_engine(self) -> Engine:
        """Get the engine for the planner database.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """


__all__ = ["DatabaseEnginePort"]
