"""Structured JSONL logging.

Log lines are pydantic models serialized one JSON object per line, so they can
be piped into ``jq`` or collected by any line-oriented shipper.

Line format: {timestamp, level, event, run_id, phase, message, data}
"""

from __future__ import annotations

import sys
import uuid
from datetime import UTC, datetime
from typing import Literal, TextIO

from pydantic import BaseModel, Field

LogLevel = Literal["debug", "info", "warn", "error"]
LogData = dict[str, str | int | float | bool | None]

LEVEL_ORDER: dict[str, int] = {"debug": 0, "info": 1, "warn": 2, "error": 3}


class LogEntry(BaseModel):
    """Single log line in JSONL format."""

    timestamp: str = Field(..., description="ISO-8601 timestamp")
    level: LogLevel = Field(..., description="Log level")
    event: str = Field(..., description="Event type (e.g., run_started)")
    run_id: str = Field(..., description="Invocation identifier")
    phase: str | None = Field(None, description="Phase if applicable")
    message: str = Field(..., description="Human-readable log message")
    data: LogData | None = Field(None, description="Structured event data")


class Logger:
    """Structured JSONL logger.

    Usage:
        logger = Logger(run_id="abc123")
        logger.info("run_started", "Classifying 3 numbers", data={"count": 3})
        logger.error("query_failed", "Query failed", data={"error": "timeout"})
    """

    def __init__(
        self,
        run_id: str,
        stream: TextIO | None = None,
        min_level: LogLevel = "info",
    ) -> None:
        """Initialize logger.

        Args:
            run_id: Identifier for the current invocation.
            stream: Output stream (defaults to stderr).
            min_level: Minimum log level to output.
        """
        if min_level not in LEVEL_ORDER:
            raise ValueError(f"Unknown log level: {min_level}")
        self.run_id = run_id
        self.stream = stream or sys.stderr
        self.min_level = min_level

    @classmethod
    def for_new_run(
        cls, stream: TextIO | None = None, min_level: LogLevel = "info"
    ) -> Logger:
        return cls(run_id=uuid.uuid4().hex[:12], stream=stream, min_level=min_level)

    def _should_log(self, level: LogLevel) -> bool:
        return LEVEL_ORDER[level] >= LEVEL_ORDER[self.min_level]

    def _emit(
        self,
        level: LogLevel,
        event: str,
        message: str,
        phase: str | None = None,
        data: LogData | None = None,
    ) -> None:
        if not self._should_log(level):
            return

        entry = LogEntry(
            timestamp=datetime.now(UTC).isoformat(),
            level=level,
            event=event,
            run_id=self.run_id,
            phase=phase,
            message=message,
            data=data,
        )
        self.stream.write(entry.model_dump_json() + "\n")
        self.stream.flush()

    def debug(
        self,
        event: str,
        message: str,
        *,
        phase: str | None = None,
        data: LogData | None = None,
    ) -> None:
        self._emit("debug", event, message, phase, data)

    def info(
        self,
        event: str,
        message: str,
        *,
        phase: str | None = None,
        data: LogData | None = None,
    ) -> None:
        self._emit("info", event, message, phase, data)

    def warn(
        self,
        event: str,
        message: str,
        *,
        phase: str | None = None,
        data: LogData | None = None,
    ) -> None:
        self._emit("warn", event, message, phase, data)

    def error(
        self,
        event: str,
        message: str,
        *,
        phase: str | None = None,
        data: LogData | None = None,
    ) -> None:
        self._emit("error", event, message, phase, data)


class NullLogger(Logger):
    """Logger that discards everything; the default for library calls."""

    def __init__(self) -> None:
        super().__init__(run_id="null", min_level="error")

    def _emit(
        self,
        level: LogLevel,
        event: str,
        message: str,
        phase: str | None = None,
        data: LogData | None = None,
    ) -> None:
        return None


class Events:
    """Standard event names for logging."""

    # Lifecycle events
    RUN_STARTED = "run_started"
    RUN_COMPLETED = "run_completed"
    RUN_FAILED = "run_failed"

    # Data events
    DATA_LOADED = "data_loaded"
    DATA_WRITTEN = "data_written"
    VALIDATION_FAILED = "validation_failed"

    # Classifier events
    DUPLICATE_INPUT = "duplicate_input"

    # Database events
    DB_CONNECTED = "db_connected"
    DB_QUERY_FAILED = "db_query_failed"
    DB_CLOSED = "db_closed"
