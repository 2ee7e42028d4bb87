# examples/models.py

from collections.abc import Mapping
from dataclasses import dataclass

from .paths import PathSegment

RULE_ID = "examples-schema"


@dataclass(frozen=True)
class RuleSettings:
    """
    Configuration values controlling example validation.
    """

    # Enforce format grammars (date-time, uuid, ...) on string examples
    check_formats: bool = False


def default_settings() -> RuleSettings:
    """
    Return default rule settings.

    Returns:
        RuleSettings: Default configuration values.
    """
    return RuleSettings()


@dataclass(frozen=True)
class MismatchReason:
    """
    One explanation of why a value failed to conform to a schema.
    """

    message: str


@dataclass(frozen=True)
class Diagnostic:
    """
    A located conformance violation.
    """

    message: str
    path: str


@dataclass(frozen=True)
class SingleExample:
    """
    A singular ``example`` value.
    """

    value: object


@dataclass(frozen=True)
class ExampleList:
    """
    A schema-level ordered ``examples`` sequence.
    """

    values: tuple[object, ...]


@dataclass(frozen=True)
class NamedExamples:
    """
    Named example objects; each entry's payload sits under ``value``.
    """

    entries: Mapping[str, Mapping[str, object]]


ExamplePayload = SingleExample | ExampleList | NamedExamples


@dataclass(frozen=True)
class ExampleSite:
    """
    A document location where example data is declared alongside a schema.

    ``path`` points at the node owning the example keyword, not at the
    example itself.
    """

    schema: object
    path: tuple[PathSegment, ...]
    payload: ExamplePayload
