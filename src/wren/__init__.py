"""Wren — ordered, first-failure-wins string validation for form fields.

Basic usage::

    from wren import validate, is_required, has_length

    status = validate("a", [is_required(), has_length(min=2, max=4)])
    status.valid    # False
    status.message  # "Value is too short"

Binding rules to form fields::

    from wren import FormField, use_form

    form = use_form([FormField("name", rules=(is_required(),))])
    form.set("name", "alice")
    form.valid      # True
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FieldChange",
    "FieldState",
    "Form",
    "FormConfig",
    "FormField",
    "HasFormat",
    "HasLength",
    "HasMinMax",
    "IsRequired",
    "Rule",
    "Status",
    "UnknownFieldError",
    "UnknownRuleError",
    "WrenError",
    "has_format",
    "has_length",
    "has_min_max",
    "is_required",
    "use_form",
    "validate",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "wren.errors",
    "UnknownFieldError": "wren.errors",
    "UnknownRuleError": "wren.errors",
    "WrenError": "wren.errors",
    "FormConfig": "wren.config",
    "Status": "wren.validation.result",
    "HasFormat": "wren.validation.rules",
    "HasLength": "wren.validation.rules",
    "HasMinMax": "wren.validation.rules",
    "IsRequired": "wren.validation.rules",
    "Rule": "wren.validation.rules",
    "has_format": "wren.validation.rules",
    "has_length": "wren.validation.rules",
    "has_min_max": "wren.validation.rules",
    "is_required": "wren.validation.rules",
    "validate": "wren.validation",
    "FieldChange": "wren.forms",
    "FieldState": "wren.forms",
    "Form": "wren.forms",
    "FormField": "wren.forms",
    "use_form": "wren.forms",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
