# schema/normalise.py

import logging
from collections.abc import Mapping
from types import MappingProxyType

from examples_schema.document import ApiDocument, SpecVersion

from .descriptors import (
    ANY_SCHEMA,
    AdditionalPolicy,
    ConcreteSchema,
    NeverSchema,
    SchemaDescriptor,
    UnionMode,
    UnionSchema,
)

logger = logging.getLogger(__name__)

# Checked in this order; the first keyword present wins
_UNION_KEYWORDS = (
    ("oneOf", UnionMode.ONE_OF),
    ("anyOf", UnionMode.ANY_OF),
    ("allOf", UnionMode.ALL_OF),
)

_NULL_TYPE = "null"


def normalise_schema(node: object, document: ApiDocument) -> SchemaDescriptor:
    """
    Convert a raw schema node into a validation-ready descriptor.

    Both nullable encodings (``nullable: true`` and a ``"null"`` member of a
    type array) collapse into the descriptor's ``nullable`` flag. Malformed
    nodes degrade to a descriptor that accepts any value, as does a node met
    again while it is still being normalised (a recursive ``$ref`` or a cyclic
    mapping built from YAML anchors).

    Args:
        node: Raw schema node from the document model.
        document: Owning document, supplying version and reference lookup.

    Returns:
        SchemaDescriptor: The normalised schema.
    """
    return _normalise(node, document, frozenset())


def _normalise(
    node: object,
    document: ApiDocument,
    ancestors: frozenset[int],
) -> SchemaDescriptor:
    """
    Normalise a node, tracking the identities of the mappings above it.

    Returns:
        SchemaDescriptor: The normalised schema.
    """
    if isinstance(node, bool):
        return _boolean_schema(node, document.version)

    if not isinstance(node, Mapping):
        logger.debug("Schema node of type %s treated as any", type(node).__name__)
        return ANY_SCHEMA

    if id(node) in ancestors:
        logger.debug("Recursive schema node treated as any")
        return ANY_SCHEMA

    ancestors = ancestors | {id(node)}

    if "$ref" in node:
        return _normalise_ref(node, document, ancestors)

    for keyword, mode in _UNION_KEYWORDS:
        members = node.get(keyword)
        if isinstance(members, list) and members:
            return UnionSchema(
                mode=mode,
                alternatives=tuple(
                    _normalise(member, document, ancestors) for member in members
                ),
                nullable=node.get("nullable") is True,
            )

    return _normalise_concrete(node, document, ancestors)


def _boolean_schema(node: bool, version: SpecVersion) -> SchemaDescriptor:
    """
    Interpret a boolean schema, which only 3.1 documents may use.

    Returns:
        SchemaDescriptor: NeverSchema for ``false`` in 3.1, otherwise any.
    """
    if version is SpecVersion.V3_1 and node is False:
        return NeverSchema()

    return ANY_SCHEMA


def _normalise_ref(
    node: Mapping[str, object],
    document: ApiDocument,
    ancestors: frozenset[int],
) -> SchemaDescriptor:
    """
    Expand a local reference; a dangling target degrades to any.

    A reference back to a schema already being normalised is caught by the
    ancestor check once its target is reached.

    Returns:
        SchemaDescriptor: The referenced schema, or any.
    """
    target = document.resolve(node)
    if target is None:
        return ANY_SCHEMA

    return _normalise(target, document, ancestors)


def _normalise_concrete(
    node: Mapping[str, object],
    document: ApiDocument,
    ancestors: frozenset[int],
) -> ConcreteSchema:
    """
    Build a concrete descriptor from a non-union schema mapping.

    Returns:
        ConcreteSchema: The structural view of the node.
    """
    types, null_in_types = _resolve_types(node.get("type"))
    additional, additional_schema = _resolve_additional(
        node.get("additionalProperties"),
        document,
        ancestors,
    )
    items = node.get("items")

    return ConcreteSchema(
        types=types,
        nullable=null_in_types or node.get("nullable") is True,
        null_only=null_in_types and not types,
        has_const="const" in node,
        const=node.get("const"),
        enum=_resolve_enum(node.get("enum")),
        format=node.get("format") if isinstance(node.get("format"), str) else None,
        required=_resolve_required(node.get("required")),
        properties=_resolve_properties(node.get("properties"), document, ancestors),
        additional=additional,
        additional_schema=additional_schema,
        items=_normalise(items, document, ancestors) if items is not None else None,
    )


def _resolve_types(raw: object) -> tuple[tuple[str, ...], bool]:
    """
    Split a ``type`` keyword into concrete tokens and a null marker.

    Returns:
        tuple[tuple[str, ...], bool]: Ordered, de-duplicated non-null type
            tokens, and whether ``"null"`` was among them.
    """
    if isinstance(raw, str):
        tokens = [raw]
    elif isinstance(raw, list):
        tokens = [token for token in raw if isinstance(token, str)]
    else:
        if raw is not None:
            logger.debug("Ignoring malformed type keyword %r", raw)
        return (), False

    ordered = tuple(dict.fromkeys(token for token in tokens if token != _NULL_TYPE))
    return ordered, _NULL_TYPE in tokens


def _resolve_enum(raw: object) -> tuple[object, ...] | None:
    """
    Capture an ``enum`` keyword if it is a list.

    Returns:
        tuple[object, ...] | None: Allowed values, or None when absent.
    """
    return tuple(raw) if isinstance(raw, list) else None


def _resolve_required(raw: object) -> tuple[str, ...]:
    """
    Capture required property names, ignoring non-string entries.

    Returns:
        tuple[str, ...]: Required names in declaration order, de-duplicated.
    """
    if not isinstance(raw, list):
        return ()

    return tuple(dict.fromkeys(name for name in raw if isinstance(name, str)))


def _resolve_properties(
    raw: object,
    document: ApiDocument,
    ancestors: frozenset[int],
) -> Mapping[str, SchemaDescriptor]:
    """
    Normalise each declared property schema.

    Returns:
        Mapping[str, SchemaDescriptor]: Read-only name to descriptor map.
    """
    if not isinstance(raw, Mapping):
        return MappingProxyType({})

    return MappingProxyType(
        {
            str(name): _normalise(child, document, ancestors)
            for name, child in raw.items()
        },
    )


def _resolve_additional(
    raw: object,
    document: ApiDocument,
    ancestors: frozenset[int],
) -> tuple[AdditionalPolicy, SchemaDescriptor | None]:
    """
    Interpret ``additionalProperties`` as a policy plus optional schema.

    Returns:
        tuple[AdditionalPolicy, SchemaDescriptor | None]: The policy, and the
            constraining schema when the policy is CONSTRAINED.
    """
    if raw is False:
        return AdditionalPolicy.DISALLOWED, None

    if isinstance(raw, Mapping) and raw:
        return AdditionalPolicy.CONSTRAINED, _normalise(raw, document, ancestors)

    return AdditionalPolicy.ALLOWED, None
