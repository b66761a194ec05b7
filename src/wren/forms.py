"""Form binding — attach rule lists to named fields, track validity.

Each field is re-validated whenever its value is set. The form's
``valid`` flag is the logical AND of every field's status; a field
that has never been validated counts as invalid.

Components:

- ``FormField``: Field definition (name, rules, initial value).
- ``FieldState``: Snapshot of one field's current value and status.
- ``FieldChange``: Delivered to subscribers after each validation.
- ``Form``: The binding itself.
- ``use_form()``: Build a ``Form`` from field definitions.

Example::

    form = use_form([
        FormField("username", rules=(is_required(), has_length(min=3, max=20))),
        FormField("bio", rules=(has_min_max(min=0, max=160),)),
    ])

    unsubscribe = form.subscribe(lambda change: render(change))
    form.set("username", "al")
    form["username"].error   # "Value is too short"
    form.valid               # False
"""

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

from wren.config import FormConfig
from wren.errors import ConfigurationError, UnknownFieldError
from wren.validation import Rule, Status, validate

logger = logging.getLogger("wren.forms")


# ---------------------------------------------------------------------------
# Field types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FormField:
    """Definition of one form field.

    Attributes:
        name: Unique field name within the form.
        rules: Rules evaluated, in order, on every value change.
        value: Initial value.
    """

    name: str
    rules: tuple[Rule, ...] = ()
    value: str = ""


@dataclass(frozen=True, slots=True)
class FieldState:
    """Current state of a field.

    ``status`` is ``None`` until the field has been validated once.
    """

    name: str
    value: str
    status: Status | None = None

    @property
    def touched(self) -> bool:
        """True once the field has been validated."""
        return self.status is not None

    @property
    def valid(self) -> bool:
        return self.status is not None and self.status.valid

    @property
    def error(self) -> str | None:
        """The failing rule's message, or ``None``."""
        if self.status is None:
            return None
        return self.status.message


@dataclass(frozen=True, slots=True)
class FieldChange:
    """Emitted after a field is validated.

    Attributes:
        name: The field that changed.
        value: Its new value.
        status: The outcome of validating ``value``.
        form_valid: The form's ``valid`` flag after this change.
    """

    name: str
    value: str
    status: Status
    form_valid: bool


type Subscriber = Callable[[FieldChange], object]


# ---------------------------------------------------------------------------
# Form
# ---------------------------------------------------------------------------


class Form:
    """A set of fields bound to their rule lists.

    Thread-safe. Field state is swapped under a lock; subscribers are
    called outside it, in registration order, on the thread that made
    the change. Exceptions raised by subscribers propagate to the
    caller of ``set()``.
    """

    __slots__ = ("_config", "_fields", "_lock", "_states", "_subscribers")

    def __init__(
        self,
        fields: Iterable[FormField],
        config: FormConfig | None = None,
    ) -> None:
        self._config = config or FormConfig()
        self._fields: dict[str, FormField] = {}
        for f in fields:
            if f.name in self._fields:
                msg = f"Duplicate form field: {f.name!r}"
                raise ConfigurationError(msg)
            self._fields[f.name] = f
        self._states: dict[str, FieldState] = {}
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()
        self._reset_states()

        if self._config.validate_initial:
            for name, state in list(self._states.items()):
                self._states[name] = replace(state, status=self._check(name, state.value))

    # -- Introspection --------------------------------------------------

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def names(self) -> tuple[str, ...]:
        """Field names in definition order."""
        return tuple(self._fields)

    @property
    def valid(self) -> bool:
        """True when every field has been validated and passes."""
        with self._lock:
            return self._all_valid()

    @property
    def values(self) -> dict[str, str]:
        with self._lock:
            return {name: state.value for name, state in self._states.items()}

    @property
    def errors(self) -> dict[str, str]:
        """Field name to message, for fields currently failing."""
        with self._lock:
            return {
                name: state.error
                for name, state in self._states.items()
                if state.error is not None
            }

    def field(self, name: str) -> FieldState:
        """Return the current state of field *name*.

        Raises:
            UnknownFieldError: The form has no such field.
        """
        with self._lock:
            try:
                return self._states[name]
            except KeyError:
                raise UnknownFieldError(name) from None

    def __getitem__(self, name: str) -> FieldState:
        return self.field(name)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __repr__(self) -> str:
        return f"Form(fields={list(self._fields)!r}, valid={self.valid})"

    # -- Mutation --------------------------------------------------------

    def set(self, name: str, value: str) -> Status:
        """Set field *name* to *value* and validate it.

        Returns the field's new ``Status``. With
        ``FormConfig(notify_unchanged=False)``, setting an already
        validated field to its current value returns the existing
        status without re-validating or notifying.
        """
        with self._lock:
            state = self._states.get(name)
            if state is None:
                raise UnknownFieldError(name)
            if (
                not self._config.notify_unchanged
                and state.status is not None
                and state.value == value
            ):
                return state.status

            was_valid = self._all_valid()
            status = self._check(name, value)
            self._states[name] = FieldState(name=name, value=value, status=status)
            form_valid = self._all_valid()
            subscribers = list(self._subscribers)

        if was_valid != form_valid:
            logger.debug("Form validity changed: %s -> %s", was_valid, form_valid)

        change = FieldChange(name=name, value=value, status=status, form_valid=form_valid)
        for callback in subscribers:
            callback(change)
        return status

    def validate_all(self) -> bool:
        """Validate every field against its current value.

        Subscribers receive one ``FieldChange`` per field. Returns the
        form's ``valid`` flag.
        """
        with self._lock:
            for name, state in list(self._states.items()):
                self._states[name] = replace(state, status=self._check(name, state.value))
            form_valid = self._all_valid()
            changes = [
                FieldChange(
                    name=state.name,
                    value=state.value,
                    status=state.status,  # type: ignore[arg-type]
                    form_valid=form_valid,
                )
                for state in self._states.values()
            ]
            subscribers = list(self._subscribers)

        for change in changes:
            for callback in subscribers:
                callback(change)
        return form_valid

    def reset(self) -> None:
        """Restore initial values and the unvalidated state."""
        with self._lock:
            self._reset_states()

    # -- Subscription ----------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for ``FieldChange`` events.

        Returns a function that removes the subscription. Calling it
        more than once is harmless.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    # -- Internal --------------------------------------------------------

    def _check(self, name: str, value: str) -> Status:
        status = validate(value, self._fields[name].rules)
        logger.debug("Validated field %r: valid=%s", name, status.valid)
        return status

    def _all_valid(self) -> bool:
        return all(state.valid for state in self._states.values())

    def _reset_states(self) -> None:
        self._states = {
            name: FieldState(name=name, value=f.value) for name, f in self._fields.items()
        }


def use_form(
    fields: Iterable[FormField],
    config: FormConfig | None = None,
) -> Form:
    """Build a ``Form`` from field definitions.

    Raises:
        ConfigurationError: Two fields share a name.
    """
    return Form(fields, config=config)
