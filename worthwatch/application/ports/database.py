"""Database ports for the finance engine.

Infrastructure implementations provide concrete adapters that satisfy these
protocols so use cases never depend on drivers or configuration.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the document store."""

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance document tables.

        Returns:
            Engine: SQLAlchemy engine connected to the document store.
        """


__all__ = ["DatabaseEnginePort"]
