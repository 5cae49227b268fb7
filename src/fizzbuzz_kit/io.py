from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .responses import ErrorCodes

if TYPE_CHECKING:
    from pathlib import Path

    from .models import SweepReport


class InputError(ValueError):
    def __init__(self, message: str, code: str = ErrorCodes.VAL_001) -> None:
        super().__init__(message)
        self.code = code


def parse_number(raw: str) -> int:
    value = raw.strip()
    try:
        return int(value, 10)
    except ValueError as exc:
        raise InputError(f"Invalid number: {value}") from exc


def parse_numbers_arg(value: str) -> list[int]:
    numbers = [parse_number(raw) for raw in value.split(",") if raw.strip()]
    if not numbers:
        raise InputError("Numbers list cannot be empty")
    return numbers


def parse_range_arg(value: str) -> tuple[int, int]:
    """Parse ``"START..STOP"`` into an inclusive ``(start, stop)`` pair."""
    left, sep, right = value.partition("..")
    if not sep or not left.strip() or not right.strip():
        raise InputError(f"Range must look like START..STOP: {value}")
    return parse_number(left), parse_number(right)


def load_numbers_json(path: Path) -> list[int]:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError as exc:
        raise InputError(f"Numbers file not found: {path}", ErrorCodes.IO_001) from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"Numbers JSON is invalid: {path}", ErrorCodes.IO_002) from exc
    # bool is an int subclass; true/false are not numbers here.
    if not isinstance(data, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) for item in data
    ):
        raise InputError("Numbers JSON must be a list of integers")
    if not data:
        raise InputError("Numbers list cannot be empty")
    return data


def write_report_json(path: Path, report: SweepReport) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report.model_dump_json(indent=2) + "\n")


def write_summary(path: Path, report: SweepReport) -> None:
    counts = report.counts
    lines = [
        f"Range: {report.start}..{report.stop} ({counts.total} numbers)",
        f"Fizz Buzz!!: {counts.both}",
        f"Fizz!: {counts.three}",
        f"Buzz!: {counts.five}",
        f"Not FizzBuzz.: {counts.neither}",
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n")
