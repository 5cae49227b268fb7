"""Todo list handler.

``get_todos`` reads every row of the ``todos`` table through a client that
follows ``TodoClientProtocol`` and reports the outcome through the
``handlers`` module:

- on success it calls ``handlers.success`` with the rows,
- on a failed query it calls ``handlers.failure`` with the exception.

The connection is closed exactly once whenever ``connect`` succeeded.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from . import handlers
from .logging import Events, NullLogger
from .models import QueryResult, TodoItem, TodoPayload

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .logging import Logger
    from .protocols import TodoClientProtocol
    from .responses import APIResponse

DEFAULT_DATABASE = Path("data/todos.db")

SELECT_TODOS = "SELECT * FROM todos;"

SCHEMA = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    done INTEGER NOT NULL DEFAULT 0
);
"""


class ClientError(RuntimeError):
    """Raised when a client is used outside an open connection."""


class SqliteTodoClient:
    """``TodoClientProtocol`` implementation backed by sqlite3."""

    def __init__(self, database: str | Path = DEFAULT_DATABASE) -> None:
        self.database = database
        self._connection: sqlite3.Connection | None = None

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> None:
        if self._connection is not None:
            return
        connection = sqlite3.connect(str(self.database))
        connection.row_factory = sqlite3.Row
        self._connection = connection

    def query(self, sql: str) -> QueryResult:
        if self._connection is None:
            raise ClientError("query() called before connect()")
        rows = [
            TodoItem(id=row["id"], title=row["title"], done=bool(row["done"]))
            for row in self._connection.execute(sql).fetchall()
        ]
        return QueryResult(rows=rows, row_count=len(rows))

    def end(self) -> None:
        if self._connection is None:
            return
        self._connection.close()
        self._connection = None


def init_database(database: str | Path, titles: Iterable[str] = ()) -> None:
    """Create the todos table and insert one open item per title."""
    with sqlite3.connect(str(database)) as connection:
        connection.executescript(SCHEMA)
        connection.executemany(
            "INSERT INTO todos (title, done) VALUES (?, 0)",
            [(title,) for title in titles],
        )
    connection.close()


def get_todos(
    client: TodoClientProtocol | None = None,
    logger: Logger | None = None,
) -> APIResponse[TodoPayload]:
    log = logger or NullLogger()
    if client is None:
        client = SqliteTodoClient()

    client.connect()
    log.debug(Events.DB_CONNECTED, "Connected to todo database")

    try:
        result = client.query(SELECT_TODOS)
    except Exception as exc:
        log.error(
            Events.DB_QUERY_FAILED,
            "Failed to read todos",
            data={"error": str(exc), "type": type(exc).__name__},
        )
        client.end()
        return handlers.failure(exc)

    client.end()
    log.debug(Events.DB_CLOSED, "Closed todo database connection")

    return handlers.success(
        TodoPayload(
            message=f"{result.row_count} item(s) returned",
            data=result.rows,
            status=True,
        )
    )
