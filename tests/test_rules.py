"""Tests for wren.validation.rules — rule variants, constructors, dispatch."""

import re

import pytest

from wren.errors import UnknownRuleError
from wren.validation.result import Status
from wren.validation.rules import (
    HasFormat,
    HasLength,
    HasMinMax,
    IsRequired,
    evaluate_rule,
    has_format,
    has_length,
    has_min_max,
    is_required,
)

# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


class TestConstructors:
    def test_has_length(self) -> None:
        rule = has_length(min=2, max=4)
        assert rule == HasLength(min=2, max=4)
        assert rule.type == "length"
        assert rule.options == {"min": 2, "max": 4}

    def test_is_required(self) -> None:
        rule = is_required()
        assert rule == IsRequired()
        assert rule.type == "is-required"
        assert rule.options == {}

    def test_has_min_max(self) -> None:
        rule = has_min_max(min=0, max=10)
        assert rule == HasMinMax(min=0, max=10)
        assert rule.type == "has-min-max"
        assert rule.options == {"min": 0, "max": 10}

    def test_has_format(self) -> None:
        rule = has_format(r"^\d+$", message="Digits only")
        assert rule == HasFormat(pattern=r"^\d+$", message="Digits only")
        assert rule.type == "has-format"

    def test_has_format_rejects_bad_pattern(self) -> None:
        with pytest.raises(re.error):
            has_format("(")

    def test_min_greater_than_max_accepted(self) -> None:
        rule = has_length(min=5, max=2)
        assert rule.options == {"min": 5, "max": 2}

    def test_rules_are_frozen(self) -> None:
        rule = has_length(min=0, max=4)
        with pytest.raises(AttributeError):
            rule.max = 10  # type: ignore[misc]

    def test_rules_are_hashable(self) -> None:
        assert len({is_required(), is_required(), has_length(min=0, max=1)}) == 2


# ---------------------------------------------------------------------------
# Individual rule behavior
# ---------------------------------------------------------------------------


class TestHasLength:
    def test_too_long(self) -> None:
        assert has_length(min=0, max=4).evaluate("aaaaa") == Status(
            valid=False, message="Value is too long"
        )

    def test_too_short(self) -> None:
        assert has_length(min=2, max=4).evaluate("a") == Status(
            valid=False, message="Value is too short"
        )

    def test_at_bounds(self) -> None:
        rule = has_length(min=2, max=4)
        assert rule.evaluate("ab").valid
        assert rule.evaluate("abcd").valid

    def test_too_long_wins_when_bounds_inverted(self) -> None:
        # min > max: every length fails, "too long" is checked first
        rule = has_length(min=5, max=2)
        assert rule.evaluate("abc").message == "Value is too long"
        assert rule.evaluate("a").message == "Value is too short"

    def test_negative_max(self) -> None:
        assert has_length(min=0, max=-1).evaluate("").message == "Value is too long"


class TestIsRequired:
    def test_empty_string(self) -> None:
        assert is_required().evaluate("") == Status(valid=False, message="Required")

    def test_non_empty(self) -> None:
        assert is_required().evaluate("x") == Status(valid=True)

    def test_whitespace_only_passes(self) -> None:
        assert is_required().evaluate("   ").valid


class TestHasMinMax:
    def test_exceeds_max(self) -> None:
        assert has_min_max(min=0, max=5).evaluate("asasdfasdf") == Status(
            valid=False, message="Max length is 5"
        )

    def test_at_max(self) -> None:
        assert has_min_max(min=0, max=5).evaluate("12345").valid

    def test_min_not_checked(self) -> None:
        assert has_min_max(min=3, max=5).evaluate("") == Status(valid=True)

    def test_message_interpolates_max(self) -> None:
        assert has_min_max(min=0, max=0).evaluate("a").message == "Max length is 0"


class TestHasFormat:
    def test_match(self) -> None:
        assert has_format(r"\d{3}").evaluate("123").valid

    def test_anchored_at_start(self) -> None:
        assert not has_format(r"\d{3}").evaluate("x123").valid

    def test_default_message(self) -> None:
        assert has_format(r"\d+").evaluate("abc").message == "Invalid format"

    def test_custom_message(self) -> None:
        assert has_format(r"\d+", message="Numbers only").evaluate("abc").message == (
            "Numbers only"
        )


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestEvaluateRule:
    def test_matches_method(self) -> None:
        rule = has_length(min=1, max=3)
        assert evaluate_rule(rule, "abcd") == rule.evaluate("abcd")

    def test_unknown_rule(self) -> None:
        with pytest.raises(UnknownRuleError, match="Not a validation rule: str"):
            evaluate_rule("required", "x")  # type: ignore[arg-type]

    def test_unknown_rule_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            evaluate_rule(object(), "x")  # type: ignore[arg-type]

    def test_fresh_status_per_call(self) -> None:
        rule = is_required()
        first = rule.evaluate("")
        second = rule.evaluate("")
        assert first == second
