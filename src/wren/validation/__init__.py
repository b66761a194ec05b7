"""Value validation — ordered rules, first failure wins.

Usage::

    from wren.validation import validate, is_required, has_length

    status = validate(value, [is_required(), has_length(min=2, max=40)])
    if not status:
        print(status.message)
"""

import logging
from collections.abc import Iterable

from wren.validation.result import Status
from wren.validation.rules import (
    HasFormat,
    HasLength,
    HasMinMax,
    IsRequired,
    Rule,
    evaluate_rule,
    has_format,
    has_length,
    has_min_max,
    is_required,
)

__all__ = [
    "HasFormat",
    "HasLength",
    "HasMinMax",
    "IsRequired",
    "Rule",
    "Status",
    "evaluate_rule",
    "has_format",
    "has_length",
    "has_min_max",
    "is_required",
    "validate",
]

logger = logging.getLogger("wren.validation")


def validate(value: str, rules: Iterable[Rule]) -> Status:
    """Validate *value* against *rules*, in order.

    Args:
        value: The string to check.
        rules: Rules to evaluate. Order matters: evaluation stops at
            the first rule that fails and later rules never run.

    Returns:
        The failing rule's ``Status`` unchanged, or a passing
        ``Status`` when every rule passes (or *rules* is empty).

    Example::

        validate("aaaaa", [has_length(min=0, max=4)])
        # Status(valid=False, message="Value is too long")
    """
    for rule in rules:
        status = evaluate_rule(rule, value)
        if not status.valid:
            logger.debug("Rule %r failed: %s", rule.type, status.message)
            return status

    return Status.ok()
