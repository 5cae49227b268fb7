"""Divisibility classifier.

Maps an integer onto one of four fixed labels depending on whether it is
divisible by 3, by 5, by both, or by neither. The function is pure: no I/O,
no shared state, identical input always yields the identical label.
"""

from __future__ import annotations

import operator
from enum import Enum


class ClassifierInputError(TypeError):
    """Raised when a value is not an integer."""


class Label(Enum):
    """Classifier result. The value is the display text."""

    BOTH = "Fizz Buzz!!"
    THREE = "Fizz!"
    FIVE = "Buzz!"
    NEITHER = "Not FizzBuzz."

    @property
    def text(self) -> str:
        return self.value


def ensure_integer(value: object, name: str = "num") -> int:
    """Return ``value`` as an ``int`` or raise ClassifierInputError.

    Anything implementing ``__index__`` is accepted. ``bool`` is rejected even
    though it subclasses ``int``; floats, strings and decimals are never coerced.
    """
    if isinstance(value, bool):
        raise ClassifierInputError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise ClassifierInputError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from exc


def classify(num: int) -> Label:
    value = ensure_integer(num)
    # Multiples of 15 satisfy both single-divisor checks; test the conjunction first.
    if value % 3 == 0 and value % 5 == 0:
        return Label.BOTH
    if value % 3 == 0:
        return Label.THREE
    if value % 5 == 0:
        return Label.FIVE
    return Label.NEITHER

