"""Selecting suites and tests to run.

Because tests in this module carry ``@pytest.mark.only``, the unmarked
ones are deselected for every run (see ``fizzbuzz_kit.testing``).
"""

from __future__ import annotations

import math

import pytest

from fizzbuzz_kit.classifier import Label, classify


@pytest.mark.only
class TestOnlySuite:
    """Only this suite (and other marked tests) run."""

    def test_square_root(self) -> None:
        assert math.sqrt(4) == 2

    def test_fifteen(self) -> None:
        assert classify(15) is Label.BOTH


class TestAnotherSuite:
    """Unmarked suite: only its marked test runs."""

    def test_deselected(self) -> None:
        # Deselected because the module runs in only mode.
        assert math.sqrt(4) == 3

    @pytest.mark.only
    def test_marked(self) -> None:
        assert math.sqrt(4) == 2
