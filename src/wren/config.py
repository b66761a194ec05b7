"""Form configuration.

FormConfig is a frozen dataclass — immutable after creation, shared
safely between forms.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Form binding configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(validate_initial=True)
        form = use_form(fields, config=config)
    """

    # Validate every field's initial value when the form is built.
    # Otherwise fields start unvalidated and the form starts invalid.
    validate_initial: bool = False

    # When False, setting a field to its current value is a no-op
    # (only real changes trigger validation and notification).
    notify_unchanged: bool = True
