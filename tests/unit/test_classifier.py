"""Unit tests for classifier module."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fizzbuzz_kit.classifier import (
    ClassifierInputError,
    Label,
    classify,
    ensure_integer,
)

WIDE_INTEGERS = st.integers(min_value=-(10**18), max_value=10**18)


class IndexOnly:
    """Integer-like object that only implements __index__."""

    def __init__(self, value: int) -> None:
        self.value = value

    def __index__(self) -> int:
        return self.value


class TestClassify:
    """Tests for classify function."""

    def test_multiple_of_three(self) -> None:
        """classify should return THREE for 3."""
        assert classify(3) is Label.THREE

    def test_multiple_of_five(self) -> None:
        """classify should return FIVE for 5."""
        assert classify(5) is Label.FIVE

    def test_multiple_of_fifteen(self) -> None:
        """classify should return BOTH for 15."""
        assert classify(15) is Label.BOTH

    def test_neither(self) -> None:
        """classify should return NEITHER for 2."""
        assert classify(2) is Label.NEITHER

    def test_zero_is_both(self) -> None:
        """Zero is divisible by every divisor."""
        assert classify(0) is Label.BOTH

    def test_negative_fifteen_is_both(self) -> None:
        """Negative multiples follow the same rules."""
        assert classify(-15) is Label.BOTH

    @pytest.mark.parametrize(
        ("num", "expected"),
        [
            (-9, Label.THREE),
            (-10, Label.FIVE),
            (-7, Label.NEITHER),
            (45, Label.BOTH),
            (99, Label.THREE),
            (100, Label.FIVE),
            (101, Label.NEITHER),
            (10**30 * 15, Label.BOTH),
        ],
    )
    def test_table(self, num: int, expected: Label) -> None:
        """classify should handle negatives and arbitrarily large integers."""
        assert classify(num) is expected

    def test_accepts_index_objects(self) -> None:
        """Objects implementing __index__ are treated as integers."""
        assert classify(IndexOnly(30)) is Label.BOTH  # type: ignore[arg-type]


class TestLabelText:
    """Tests for Label display texts."""

    def test_texts(self) -> None:
        """Each label should carry its display text."""
        assert Label.BOTH.text == "Fizz Buzz!!"
        assert Label.THREE.text == "Fizz!"
        assert Label.FIVE.text == "Buzz!"
        assert Label.NEITHER.text == "Not FizzBuzz."

    def test_exactly_four_labels(self) -> None:
        """The label set is closed."""
        assert [label.name for label in Label] == ["BOTH", "THREE", "FIVE", "NEITHER"]


class TestInputRejection:
    """Non-integer input must fail fast instead of being coerced."""

    @pytest.mark.parametrize(
        "value",
        [3.0, 15.5, float("nan"), float("inf"), "15", None, Decimal(15), Fraction(15)],
        ids=["float", "fraction-float", "nan", "inf", "str", "none", "decimal", "frac"],
    )
    def test_rejects_non_integers(self, value: object) -> None:
        """classify should raise ClassifierInputError for non-integers."""
        with pytest.raises(ClassifierInputError, match="must be an integer"):
            classify(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [True, False])
    def test_rejects_bool(self, value: bool) -> None:
        """bool is an int subclass but is not a number here."""
        with pytest.raises(ClassifierInputError, match="got bool"):
            classify(value)

    def test_error_is_type_error(self) -> None:
        """ClassifierInputError should be catchable as TypeError."""
        with pytest.raises(TypeError):
            classify("3")  # type: ignore[arg-type]

    def test_ensure_integer_names_argument(self) -> None:
        """ensure_integer should mention the argument name."""
        with pytest.raises(ClassifierInputError, match="^start must be an integer"):
            ensure_integer(1.5, "start")


@pytest.mark.property
@pytest.mark.timeout(10)
class TestClassifyProperties:
    """Hypothesis properties of classify."""

    @settings(max_examples=300)
    @given(WIDE_INTEGERS)
    def test_always_returns_a_label(self, num: int) -> None:
        """The four branches cover every integer."""
        assert isinstance(classify(num), Label)

    @given(WIDE_INTEGERS)
    def test_idempotent(self, num: int) -> None:
        """Repeated calls return the same label."""
        assert classify(num) is classify(num)

    @given(WIDE_INTEGERS)
    def test_matches_divisibility(self, num: int) -> None:
        """Label agrees with the divisibility of num."""
        by_three = num % 3 == 0
        by_five = num % 5 == 0
        expected = {
            (True, True): Label.BOTH,
            (True, False): Label.THREE,
            (False, True): Label.FIVE,
            (False, False): Label.NEITHER,
        }[(by_three, by_five)]
        assert classify(num) is expected

    @given(WIDE_INTEGERS)
    def test_multiples_of_fifteen_are_both(self, num: int) -> None:
        """Any multiple of 15 is BOTH, never THREE or FIVE."""
        assert classify(num * 15) is Label.BOTH

    @given(WIDE_INTEGERS)
    def test_sign_does_not_matter(self, num: int) -> None:
        """classify(-n) equals classify(n)."""
        assert classify(-num) is classify(num)
