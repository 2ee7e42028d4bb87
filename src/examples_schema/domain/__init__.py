# domain/__init__.py

from .examples import (
    Diagnostic,
    RuleSettings,
    check_examples,
    default_settings,
    run_examples_schema,
)

__all__ = [
    "Diagnostic",
    "RuleSettings",
    "check_examples",
    "default_settings",
    "run_examples_schema",
]
