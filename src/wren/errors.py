"""Wren exception hierarchy.

Validation failures are returned as ``Status`` values, never raised.
These types cover programming errors only: bad form setup, unknown
field names, and objects that are not rules.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a form definition is invalid.

    Typically raised by ``use_form()`` for duplicate field names.
    """


class UnknownFieldError(WrenError, KeyError):
    """A field name was looked up that the form does not define."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown form field: {self.name!r}"


class UnknownRuleError(WrenError, TypeError):
    """An object passed as a rule is not a known rule variant."""

    def __init__(self, rule: object) -> None:
        super().__init__(rule)
        self.rule = rule

    def __str__(self) -> str:
        return f"Not a validation rule: {type(self.rule).__name__}"
