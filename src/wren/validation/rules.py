"""Built-in validation rules for wren forms.

Rules are plain, frozen data. Each variant carries a ``type`` tag and
its configuration; the check itself lives in one place,
``evaluate_rule()``, which dispatches on the variant::

    rule = has_length(min=2, max=4)
    rule.type       # "length"
    rule.options    # {"min": 2, "max": 4}
    rule.evaluate("a")
    # Status(valid=False, message="Value is too short")

Constructors never check their constraints. ``min > max`` or negative
bounds are accepted as given and evaluated literally.
"""

import re
from dataclasses import asdict, dataclass
from typing import Any, ClassVar

from wren.errors import UnknownRuleError
from wren.validation.result import Status

# ---------------------------------------------------------------------------
# Rule variants
# ---------------------------------------------------------------------------


class _RuleBase:
    """Shared surface of every rule variant."""

    __slots__ = ()

    type: ClassVar[str]

    @property
    def options(self) -> dict[str, Any]:
        """The rule's configuration as a plain dict."""
        return asdict(self)  # type: ignore[call-overload]

    def evaluate(self, value: str) -> Status:
        """Check *value* against this rule."""
        return evaluate_rule(self, value)


@dataclass(frozen=True, slots=True)
class HasLength(_RuleBase):
    """Length must fall within ``[min, max]``."""

    type: ClassVar[str] = "length"

    min: int
    max: int


@dataclass(frozen=True, slots=True)
class IsRequired(_RuleBase):
    """Value must be non-empty."""

    type: ClassVar[str] = "is-required"


@dataclass(frozen=True, slots=True)
class HasMinMax(_RuleBase):
    """Length must not exceed ``max``.

    ``min`` is stored with the rule but is not checked.
    """

    type: ClassVar[str] = "has-min-max"

    min: int
    max: int


@dataclass(frozen=True, slots=True)
class HasFormat(_RuleBase):
    """Value must match a regular expression from its first character."""

    type: ClassVar[str] = "has-format"

    pattern: str
    message: str | None = None


type Rule = HasLength | IsRequired | HasMinMax | HasFormat


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def has_length(min: int, max: int) -> HasLength:  # noqa: A002
    """String length must be at least *min* and at most *max*."""
    return HasLength(min=min, max=max)


def is_required() -> IsRequired:
    """Field must be non-empty. Whitespace-only values pass."""
    return IsRequired()


def has_min_max(min: int, max: int) -> HasMinMax:  # noqa: A002
    """String must be at most *max* characters. *min* is not enforced."""
    return HasMinMax(min=min, max=max)


def has_format(pattern: str, message: str | None = None) -> HasFormat:
    """Value must match *pattern* (``re.match`` semantics)."""
    re.compile(pattern)  # malformed patterns fail here, not on first use
    return HasFormat(pattern=pattern, message=message)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def evaluate_rule(rule: Rule, value: str) -> Status:
    """Evaluate a single rule against *value*.

    Raises:
        UnknownRuleError: *rule* is not one of the rule variants.
    """
    match rule:
        case HasLength(min=lo, max=hi):
            # "too long" is checked first; keep the order for message parity
            if len(value) > hi:
                return Status.fail("Value is too long")
            if len(value) < lo:
                return Status.fail("Value is too short")
            return Status.ok()

        case IsRequired():
            if not value:
                return Status.fail("Required")
            return Status.ok()

        case HasMinMax(max=hi):
            if len(value) > hi:
                return Status.fail(f"Max length is {hi}")
            return Status.ok()

        case HasFormat(pattern=pattern, message=message):
            if re.match(pattern, value) is None:
                return Status.fail(message or "Invalid format")
            return Status.ok()

        case _:
            raise UnknownRuleError(rule)
