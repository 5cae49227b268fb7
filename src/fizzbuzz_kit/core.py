"""Core workflows for fizzbuzz-kit.

Surface layers (the CLI, tests, notebooks) should call the functions here
instead of looping over ``classify`` themselves, so counting, validation and
logging behave the same everywhere.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from .classifier import Label, classify, ensure_integer
from .logging import Events, NullLogger
from .models import (
    Classification,
    ClassifyRunResult,
    LabelCounts,
    SweepReport,
    SweepRunResult,
    UserMessage,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .logging import Logger

MAX_SWEEP_SIZE = 100_000


class ValidationError(ValueError):
    """Error raised when input validation fails."""


def classify_many(numbers: Iterable[int]) -> list[Classification]:
    return [Classification(num=num, label=classify(num)) for num in numbers]


def count_labels(items: Iterable[Classification]) -> LabelCounts:
    tally = Counter(item.label for item in items)
    return LabelCounts(
        both=tally[Label.BOTH],
        three=tally[Label.THREE],
        five=tally[Label.FIVE],
        neither=tally[Label.NEITHER],
    )


def run_classify(
    numbers: Iterable[int], logger: Logger | None = None
) -> ClassifyRunResult:
    """Classify each number in order.

    Duplicates are classified again (the result is identical) and reported
    as a single warning.

    Raises:
        ClassifierInputError: If any value is not an integer.
    """
    log = logger or NullLogger()
    values = [ensure_integer(num) for num in numbers]
    log.info(
        Events.RUN_STARTED,
        f"Classifying {len(values)} numbers",
        phase="classify",
        data={"count": len(values)},
    )

    warnings: list[UserMessage] = []
    duplicates = sorted(num for num, seen in Counter(values).items() if seen > 1)
    if duplicates:
        formatted = ", ".join(str(num) for num in duplicates)
        warnings.append(
            UserMessage(severity="warning", message=f"duplicate numbers: {formatted}")
        )
        log.warn(
            Events.DUPLICATE_INPUT,
            "Input contains duplicate numbers",
            phase="classify",
            data={"duplicates": len(duplicates)},
        )

    items = classify_many(values)
    counts = count_labels(items)
    log.info(
        Events.RUN_COMPLETED,
        "Classification complete",
        phase="classify",
        data=counts.model_dump(),
    )
    return ClassifyRunResult(items=items, counts=counts, warnings=warnings)


def run_sweep(start: int, stop: int, logger: Logger | None = None) -> SweepRunResult:
    """Classify every integer in ``[start, stop]``.

    Raises:
        ClassifierInputError: If a bound is not an integer.
        ValidationError: If the range is empty or larger than MAX_SWEEP_SIZE.
    """
    log = logger or NullLogger()
    start = ensure_integer(start, "start")
    stop = ensure_integer(stop, "stop")

    if stop < start:
        log.error(
            Events.VALIDATION_FAILED,
            "Sweep range is reversed",
            phase="sweep",
            data={"start": start, "stop": stop},
        )
        raise ValidationError(f"stop ({stop}) must not be less than start ({start})")
    size = stop - start + 1
    if size > MAX_SWEEP_SIZE:
        log.error(
            Events.VALIDATION_FAILED,
            "Sweep range is too large",
            phase="sweep",
            data={"size": size, "max": MAX_SWEEP_SIZE},
        )
        raise ValidationError(
            f"Range of {size} numbers exceeds the maximum of {MAX_SWEEP_SIZE}"
        )

    log.info(
        Events.RUN_STARTED,
        f"Sweeping {start}..{stop}",
        phase="sweep",
        data={"start": start, "stop": stop},
    )
    items = classify_many(range(start, stop + 1))
    report = SweepReport(start=start, stop=stop, counts=count_labels(items), items=items)
    log.info(
        Events.RUN_COMPLETED,
        "Sweep complete",
        phase="sweep",
        data=report.counts.model_dump(),
    )
    return SweepRunResult(report=report)
