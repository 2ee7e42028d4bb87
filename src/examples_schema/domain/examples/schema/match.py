# schema/match.py

from collections.abc import Mapping, Sequence

from ..models import MismatchReason, RuleSettings
from .descriptors import (
    AdditionalPolicy,
    ConcreteSchema,
    NeverSchema,
    SchemaDescriptor,
    UnionMode,
    UnionSchema,
)
from .formats import conforms_to_format
from .values import NUMERIC_KINDS, ValueKind, display, kind_of, values_equal

_KNOWN_TYPES = frozenset(kind.value for kind in ValueKind)


def match_value(
    value: object,
    schema: SchemaDescriptor,
    settings: RuleSettings,
) -> tuple[MismatchReason, ...]:
    """
    Decide whether a value conforms to a normalised schema.

    Args:
        value: Example payload value.
        schema: Descriptor produced by the normaliser.
        settings: Rule settings (format enforcement).

    Returns:
        tuple[MismatchReason, ...]: Reasons the value does not conform, in
            evaluation order. Empty when the value conforms.
    """
    if isinstance(schema, NeverSchema):
        return (MismatchReason("value not allowed"),)

    if isinstance(schema, UnionSchema):
        return _match_union(value, schema, settings)

    return _match_concrete(value, schema, settings)


def _match_union(
    value: object,
    schema: UnionSchema,
    settings: RuleSettings,
) -> tuple[MismatchReason, ...]:
    """
    Evaluate every alternative of a union in declaration order.

    For oneOf/anyOf, a single conforming alternative suffices; otherwise
    each failing alternative contributes its first reason. For allOf, every
    alternative's reasons are reported.

    Returns:
        tuple[MismatchReason, ...]: Union-level mismatch reasons.
    """
    if value is None and schema.nullable:
        return ()

    outcomes = [
        match_value(value, alternative, settings)
        for alternative in schema.alternatives
    ]

    if schema.mode is UnionMode.ALL_OF:
        return tuple(reason for outcome in outcomes for reason in outcome)

    if any(not outcome for outcome in outcomes):
        return ()

    return tuple(outcome[0] for outcome in outcomes)


def _match_concrete(
    value: object,
    schema: ConcreteSchema,
    settings: RuleSettings,
) -> tuple[MismatchReason, ...]:
    """
    Check a value against type, constant and structural constraints.

    A kind mismatch stops evaluation for this schema; the remaining checks
    only run against a value of an accepted kind.

    Returns:
        tuple[MismatchReason, ...]: Mismatch reasons for this schema.
    """
    kind = kind_of(value)

    if kind is ValueKind.NULL and schema.nullable:
        return ()

    if schema.null_only or (
        schema.types and not _kind_accepted(kind, schema.types)
    ):
        return (MismatchReason(_describe_type_mismatch(kind, schema)),)

    reasons: list[MismatchReason] = []

    if schema.has_const and not values_equal(value, schema.const):
        reasons.append(MismatchReason(f"value must be {display(schema.const)}"))

    if schema.enum is not None and not any(
        values_equal(value, allowed) for allowed in schema.enum
    ):
        options = ", ".join(display(allowed) for allowed in schema.enum)
        reasons.append(MismatchReason(f"value must be one of {options}"))

    if (
        settings.check_formats
        and kind is ValueKind.STRING
        and schema.format is not None
        and not conforms_to_format(value, schema.format)
    ):
        reasons.append(
            MismatchReason(f"{display(value)} is not valid '{schema.format}'"),
        )

    if kind is ValueKind.OBJECT:
        reasons.extend(_match_object(value, schema, settings))
    elif kind is ValueKind.ARRAY and schema.items is not None:
        reasons.extend(_match_array(value, schema.items, settings))

    return tuple(reasons)


def _match_object(
    value: Mapping[object, object],
    schema: ConcreteSchema,
    settings: RuleSettings,
) -> list[MismatchReason]:
    """
    Match an object's required, declared and additional properties.

    Returns:
        list[MismatchReason]: Reasons collected across all properties.
    """
    names = {str(name) for name in value}
    reasons = [
        MismatchReason(f"missing required property '{name}'")
        for name in schema.required
        if name not in names
    ]

    for raw_name, child in value.items():
        name = str(raw_name)
        if name in schema.properties:
            reasons.extend(match_value(child, schema.properties[name], settings))
        elif schema.additional is AdditionalPolicy.DISALLOWED:
            reasons.append(
                MismatchReason(f"additional properties '{name}' not allowed"),
            )
        elif schema.additional_schema is not None:
            reasons.extend(match_value(child, schema.additional_schema, settings))

    return reasons


def _match_array(
    value: Sequence[object],
    items: SchemaDescriptor,
    settings: RuleSettings,
) -> list[MismatchReason]:
    """
    Match every element against the item schema, without short-circuiting.

    Returns:
        list[MismatchReason]: Reasons from all elements, in index order.
    """
    return [
        reason for element in value for reason in match_value(element, items, settings)
    ]


def _kind_accepted(kind: ValueKind, types: tuple[str, ...]) -> bool:
    """
    Check a value kind against declared type tokens.

    Whole numbers satisfy both ``integer`` and ``number``. Unknown type
    tokens accept any value.

    Returns:
        bool: True if the kind satisfies at least one declared type.
    """
    for declared in types:
        if declared not in _KNOWN_TYPES:
            return True
        if declared == kind.value:
            return True
        if declared == ValueKind.NUMBER.value and kind in NUMERIC_KINDS:
            return True

    return False


def _describe_type_mismatch(kind: ValueKind, schema: ConcreteSchema) -> str:
    """
    Build the ``got <kind>, want <types>`` message.

    Returns:
        str: The type mismatch message.
    """
    wanted = schema.types + (("null",) if schema.nullable else ())
    return f"got {kind.value}, want {' or '.join(wanted)}"
