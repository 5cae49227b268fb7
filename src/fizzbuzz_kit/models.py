from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from .classifier import Label, ensure_integer


def _strict_integer(value: object, field_name: str) -> int:
    try:
        return ensure_integer(value, field_name)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


class Classification(BaseModel):
    """A single classified number."""

    num: int = Field(..., description="Number that was classified")
    label: Label = Field(..., description="Classifier result")

    @field_validator("num", mode="before")
    @classmethod
    def reject_non_integer(cls, value: object) -> int:
        return _strict_integer(value, "num")

    @property
    def text(self) -> str:
        return self.label.text


class LabelCounts(BaseModel):
    """Number of classifications per label."""

    both: int = Field(0, ge=0, description="Multiples of 15")
    three: int = Field(0, ge=0, description="Multiples of 3 but not 5")
    five: int = Field(0, ge=0, description="Multiples of 5 but not 3")
    neither: int = Field(0, ge=0, description="Multiples of neither")

    @property
    def total(self) -> int:
        return self.both + self.three + self.five + self.neither

    def for_label(self, label: Label) -> int:
        return getattr(self, label.name.lower())


class SweepReport(BaseModel):
    """Classification of every integer in an inclusive range."""

    start: int = Field(..., description="First number in the range")
    stop: int = Field(..., description="Last number in the range (inclusive)")
    counts: LabelCounts = Field(..., description="Per-label totals")
    items: list[Classification] = Field(
        default_factory=list, description="Classification of each number"
    )

    @model_validator(mode="after")
    def validate_bounds(self) -> "SweepReport":
        if self.stop < self.start:
            raise ValueError("stop must be greater than or equal to start")
        if self.counts.total != len(self.items):
            raise ValueError("counts do not match number of items")
        return self


class UserMessage(BaseModel):
    """Message surfaced to the CLI user."""

    severity: Literal["info", "warning"] = Field(..., description="Message level")
    message: str = Field(..., description="Human-readable message")


class ClassifyRunResult(BaseModel):
    """Result of classifying an explicit list of numbers."""

    items: list[Classification] = Field(default_factory=list)
    counts: LabelCounts = Field(default_factory=LabelCounts)
    warnings: list[UserMessage] = Field(default_factory=list)


class SweepRunResult(BaseModel):
    """Result of classifying a range of numbers."""

    report: SweepReport
    warnings: list[UserMessage] = Field(default_factory=list)


class TodoItem(BaseModel):
    """A row of the todos table."""

    id: int = Field(..., description="Primary key")
    title: str = Field(..., min_length=1, description="What needs doing")
    done: bool = Field(False, description="Whether the item is complete")

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value: str) -> str:
        return str(value).strip()


class QueryResult(BaseModel):
    """Rows returned by a todo client query."""

    rows: list[TodoItem] = Field(default_factory=list)
    row_count: int = Field(0, ge=0)


class TodoPayload(BaseModel):
    """Payload handed to the success handler."""

    message: str = Field(..., description="Summary of the query result")
    data: list[TodoItem] = Field(default_factory=list)
    status: bool = Field(..., description="True when the query succeeded")
