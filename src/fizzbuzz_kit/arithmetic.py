from __future__ import annotations

from .classifier import ensure_integer


def add(a: int, b: int) -> int:
    return ensure_integer(a, "a") + ensure_integer(b, "b")
