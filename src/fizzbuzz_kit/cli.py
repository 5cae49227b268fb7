from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer

from .classifier import ClassifierInputError
from .core import ValidationError, run_classify, run_sweep
from .io import (
    InputError,
    load_numbers_json,
    parse_numbers_arg,
    parse_range_arg,
    write_report_json,
    write_summary,
)
from .logging import LEVEL_ORDER, Events, Logger
from .responses import APIResponse, ErrorCodes
from .todos import DEFAULT_DATABASE, SqliteTodoClient, get_todos

app = typer.Typer(add_completion=False)

DEFAULT_START = 1
DEFAULT_STOP = 100
DEFAULT_LOG_LEVEL = "warn"


class State:
    def __init__(self) -> None:
        self.logger = Logger.for_new_run(min_level=DEFAULT_LOG_LEVEL)


state = State()


@app.callback()
def root(
    log_level: Annotated[
        str,
        typer.Option(help="Minimum JSONL log level on stderr (debug|info|warn|error)"),
    ] = DEFAULT_LOG_LEVEL,
) -> None:
    """FizzBuzz classifier CLI."""
    level = log_level.strip().lower()
    if level not in LEVEL_ORDER:
        raise typer.BadParameter(
            f"Unknown log level: {log_level}", param_hint="--log-level"
        )
    state.logger = Logger.for_new_run(min_level=level)  # type: ignore[arg-type]


def emit_failure(code: str, message: str, **details: Any) -> NoReturn:
    response: APIResponse[None] = APIResponse.failure(code, message, **details)
    typer.echo(response.model_dump_json(indent=2))
    raise typer.Exit(code=1)


def load_numbers(numbers: str | None, numbers_file: Path | None) -> list[int]:
    if numbers is not None and numbers_file is not None:
        raise InputError("Provide either NUMBERS or --numbers-file, not both")
    if numbers is None and numbers_file is None:
        raise InputError("Provide either NUMBERS or --numbers-file")
    if numbers_file is not None:
        return load_numbers_json(numbers_file)
    return parse_numbers_arg(numbers or "")


@app.command()
def classify(
    numbers: Annotated[
        str | None,
        typer.Argument(help="Comma-separated integers (e.g. 3,5,15)"),
    ] = None,
    numbers_file: Annotated[
        Path | None,
        typer.Option(help="JSON file containing a list of integers"),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print a JSON response envelope")
    ] = False,
) -> None:
    try:
        values = load_numbers(numbers, numbers_file)
        result = run_classify(values, state.logger)
    except (InputError, ClassifierInputError) as exc:
        state.logger.error(Events.RUN_FAILED, str(exc), phase="classify")
        if json_output:
            code = getattr(exc, "code", ErrorCodes.VAL_001)
            emit_failure(code, str(exc), field="numbers", provided=numbers)
        raise typer.BadParameter(str(exc)) from exc

    if json_output:
        typer.echo(APIResponse.success(result).model_dump_json(indent=2))
        return

    for message in result.warnings:
        typer.echo(f"Warning: {message.message}", err=True)
    for item in result.items:
        typer.echo(f"{item.num}: {item.text}")


@app.command()
def sweep(
    start: Annotated[
        int, typer.Option(help="First number (inclusive)")
    ] = DEFAULT_START,
    stop: Annotated[int, typer.Option(help="Last number (inclusive)")] = DEFAULT_STOP,
    range_: Annotated[
        str | None,
        typer.Option("--range", help="START..STOP, overrides --start and --stop"),
    ] = None,
    out: Annotated[
        Path | None, typer.Option(help="Write the full report as JSON")
    ] = None,
    summary: Annotated[
        Path | None, typer.Option(help="Write per-label totals as text")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print a JSON response envelope")
    ] = False,
) -> None:
    try:
        if range_ is not None:
            start, stop = parse_range_arg(range_)
        result = run_sweep(start, stop, state.logger)
    except (InputError, ValidationError) as exc:
        if json_output:
            emit_failure(
                ErrorCodes.VAL_001,
                str(exc),
                field="range",
                provided=range_ or f"{start}..{stop}",
            )
        raise typer.BadParameter(str(exc)) from exc

    report = result.report
    if out is not None:
        write_report_json(out, report)
        state.logger.info(Events.DATA_WRITTEN, f"Wrote report to {out}")
    if summary is not None:
        write_summary(summary, report)
        state.logger.info(Events.DATA_WRITTEN, f"Wrote summary to {summary}")

    if json_output:
        typer.echo(APIResponse.success(report).model_dump_json(indent=2))
        return

    for item in report.items:
        typer.echo(f"{item.num}: {item.text}")
    if out is not None:
        typer.echo(f"Wrote report to {out}")
    if summary is not None:
        typer.echo(f"Wrote summary to {summary}")


@app.command()
def todos(
    database: Annotated[
        Path, typer.Option(help="SQLite database holding the todos table")
    ] = DEFAULT_DATABASE,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print a JSON response envelope")
    ] = False,
) -> None:
    if not database.exists():
        if json_output:
            emit_failure(
                ErrorCodes.IO_001,
                f"Database not found: {database}",
                field="database",
                provided=str(database),
            )
        raise typer.BadParameter(f"Database not found: {database}")

    response = get_todos(SqliteTodoClient(database), state.logger)

    if json_output:
        typer.echo(response.model_dump_json(indent=2))
        if not response.ok:
            raise typer.Exit(code=1)
        return

    if response.error is not None:
        typer.echo(f"Error: {response.error.message}", err=True)
        raise typer.Exit(code=1)

    assert response.data is not None
    typer.echo(response.data.message)
    for item in response.data.data:
        mark = "x" if item.done else " "
        typer.echo(f"[{mark}] {item.id}. {item.title}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
