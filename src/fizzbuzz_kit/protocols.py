"""Protocol interfaces for infrastructure collaborators.

The todo handler depends on these protocols rather than on a concrete
database driver, so tests can inject mocks and callers can swap backends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import QueryResult


class TodoClientProtocol(Protocol):
    """Protocol for a database client that can read the todos table."""

    def connect(self) -> None:
        """Open the connection.

        Raises:
            Exception: Driver-specific error if the database is unreachable.
        """
        ...

    def query(self, sql: str) -> QueryResult:
        """Run a read-only statement.

        Args:
            sql: Statement to execute.

        Returns:
            Rows and row count of the result.

        Raises:
            Exception: Driver-specific error if the statement fails.
        """
        ...

    def end(self) -> None:
        """Close the connection."""
        ...
