"""Unit tests for logging module."""

from __future__ import annotations

import io
import json

import pytest

from fizzbuzz_kit.logging import Events, Logger, NullLogger


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


def _lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestLogger:
    """Tests for the JSONL Logger."""

    def test_emits_one_json_object_per_line(self, stream: io.StringIO) -> None:
        """Each call should write a single JSON line."""
        logger = Logger(run_id="abc123", stream=stream)
        logger.info(Events.RUN_STARTED, "Starting", phase="sweep", data={"n": 3})
        logger.error(Events.RUN_FAILED, "Failed")

        lines = _lines(stream)
        assert len(lines) == 2
        assert lines[0]["event"] == "run_started"
        assert lines[0]["run_id"] == "abc123"
        assert lines[0]["phase"] == "sweep"
        assert lines[0]["data"] == {"n": 3}
        assert lines[1]["level"] == "error"

    def test_filters_below_min_level(self, stream: io.StringIO) -> None:
        """Messages below min_level should be dropped."""
        logger = Logger(run_id="abc123", stream=stream, min_level="warn")
        logger.debug("a", "debug")
        logger.info("b", "info")
        logger.warn("c", "warn")

        assert [line["event"] for line in _lines(stream)] == ["c"]

    def test_unknown_level_rejected(self) -> None:
        """An unknown min_level should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown log level"):
            Logger(run_id="x", min_level="verbose")  # type: ignore[arg-type]

    def test_for_new_run_generates_run_id(self, stream: io.StringIO) -> None:
        """for_new_run should assign a fresh run id."""
        first = Logger.for_new_run(stream=stream)
        second = Logger.for_new_run(stream=stream)
        assert first.run_id != second.run_id
        assert len(first.run_id) == 12


class TestNullLogger:
    """Tests for NullLogger."""

    def test_writes_nothing(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """NullLogger should never write to stderr."""
        logger = NullLogger()
        logger.error(Events.RUN_FAILED, "ignored")
        assert capsys.readouterr().err == ""
