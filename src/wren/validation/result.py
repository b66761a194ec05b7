"""Validation status — immutable outcome of checking one value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Status:
    """The outcome of validating a value against one or more rules.

    ``message`` is ``None`` when ``valid`` is True, and a non-empty
    string when ``valid`` is False. The status is falsy when invalid,
    so you can write::

        status = validate(value, rules)
        if not status:
            show_error(status.message)
    """

    valid: bool
    message: str | None = None

    def __post_init__(self) -> None:
        if self.valid and self.message is not None:
            msg = "A valid Status cannot carry a message"
            raise ValueError(msg)
        if not self.valid and not self.message:
            msg = "An invalid Status requires a non-empty message"
            raise ValueError(msg)

    @classmethod
    def ok(cls) -> Status:
        """A passing status."""
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> Status:
        """A failing status with *message*."""
        return cls(valid=False, message=message)

    def as_dict(self) -> dict[str, Any]:
        """Plain-dict form; the ``message`` key is omitted when absent."""
        if self.message is None:
            return {"valid": self.valid}
        return {"valid": self.valid, "message": self.message}

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not status:`` pattern."""
        return self.valid
