# schema/test_normalise.py

import pytest

from examples_schema.document import ApiDocument, SpecVersion
from examples_schema.domain.examples.schema.descriptors import (
    ANY_SCHEMA,
    AdditionalPolicy,
    ConcreteSchema,
    NeverSchema,
    UnionMode,
    UnionSchema,
)
from examples_schema.domain.examples.schema.normalise import normalise_schema

pytestmark = pytest.mark.unit


def _document(
    version: SpecVersion = SpecVersion.V3_1,
    schemas: dict | None = None,
) -> ApiDocument:
    return ApiDocument(root={"components": {"schemas": schemas or {}}}, version=version)


def test_normalise_single_type_token() -> None:
    """
    ARRANGE: schema with type string
    ACT:     normalise_schema
    ASSERT:  types is ('string',) and not nullable
    """
    actual = normalise_schema({"type": "string"}, _document())

    assert (actual.types, actual.nullable) == (("string",), False)


def test_normalise_type_array_folds_null() -> None:
    """
    ARRANGE: schema with type ["string", "null"]
    ACT:     normalise_schema
    ASSERT:  null removed from types and nullable set
    """
    actual = normalise_schema({"type": ["string", "null"]}, _document())

    assert (actual.types, actual.nullable) == (("string",), True)


def test_normalise_legacy_nullable_flag() -> None:
    """
    ARRANGE: 3.0 schema with type string and nullable: true
    ACT:     normalise_schema
    ASSERT:  nullable set
    """
    actual = normalise_schema(
        {"type": "string", "nullable": True},
        _document(SpecVersion.V3_0),
    )

    assert actual.nullable is True


def test_normalise_both_nullable_encodings_are_equivalent() -> None:
    """
    ARRANGE: the legacy flag form and the type-array form of the same intent
    ACT:     normalise_schema on each
    ASSERT:  identical descriptors
    """
    legacy = normalise_schema({"type": "string", "nullable": True}, _document())
    union_type = normalise_schema({"type": ["string", "null"]}, _document())

    assert legacy == union_type


def test_normalise_type_array_deduplicates_in_order() -> None:
    """
    ARRANGE: type array with repeated tokens
    ACT:     normalise_schema
    ASSERT:  first-seen order kept without repeats
    """
    actual = normalise_schema({"type": ["integer", "string", "integer"]}, _document())

    assert actual.types == ("integer", "string")


def test_normalise_one_of_becomes_union() -> None:
    """
    ARRANGE: schema with oneOf of two sub-schemas
    ACT:     normalise_schema
    ASSERT:  UnionSchema with ONE_OF mode and two alternatives in order
    """
    node = {"oneOf": [{"type": "string"}, {"type": "integer"}]}

    actual = normalise_schema(node, _document())

    assert actual == UnionSchema(
        mode=UnionMode.ONE_OF,
        alternatives=(
            ConcreteSchema(types=("string",)),
            ConcreteSchema(types=("integer",)),
        ),
    )


def test_normalise_any_of_mode() -> None:
    """
    ARRANGE: schema with anyOf
    ACT:     normalise_schema
    ASSERT:  ANY_OF mode
    """
    actual = normalise_schema({"anyOf": [{"type": "string"}]}, _document())

    assert actual.mode is UnionMode.ANY_OF


def test_normalise_all_of_mode() -> None:
    """
    ARRANGE: schema with allOf
    ACT:     normalise_schema
    ASSERT:  ALL_OF mode
    """
    actual = normalise_schema({"allOf": [{"type": "object"}]}, _document())

    assert actual.mode is UnionMode.ALL_OF


def test_normalise_union_keeps_sibling_nullable() -> None:
    """
    ARRANGE: oneOf with a sibling nullable: true
    ACT:     normalise_schema
    ASSERT:  union is nullable
    """
    node = {"oneOf": [{"type": "string"}], "nullable": True}

    actual = normalise_schema(node, _document())

    assert actual.nullable is True


def test_normalise_captures_const_even_when_null() -> None:
    """
    ARRANGE: schema with const: null
    ACT:     normalise_schema
    ASSERT:  has_const set with a None constant
    """
    actual = normalise_schema({"const": None}, _document())

    assert (actual.has_const, actual.const) == (True, None)


def test_normalise_structural_fields() -> None:
    """
    ARRANGE: object schema with properties, required and closed extras
    ACT:     normalise_schema
    ASSERT:  children normalised and policy DISALLOWED
    """
    node = {
        "type": "object",
        "required": ["id", "id", 3],
        "properties": {"id": {"type": "string"}},
        "additionalProperties": False,
    }

    actual = normalise_schema(node, _document())

    assert (
        actual.required,
        actual.properties["id"],
        actual.additional,
    ) == (("id",), ConcreteSchema(types=("string",)), AdditionalPolicy.DISALLOWED)


def test_normalise_additional_properties_schema() -> None:
    """
    ARRANGE: additionalProperties given as a schema
    ACT:     normalise_schema
    ASSERT:  CONSTRAINED policy with the normalised child
    """
    node = {"type": "object", "additionalProperties": {"type": "integer"}}

    actual = normalise_schema(node, _document())

    assert (actual.additional, actual.additional_schema) == (
        AdditionalPolicy.CONSTRAINED,
        ConcreteSchema(types=("integer",)),
    )


def test_normalise_items() -> None:
    """
    ARRANGE: array schema with items
    ACT:     normalise_schema
    ASSERT:  items normalised
    """
    actual = normalise_schema({"type": "array", "items": {"type": "number"}}, _document())

    assert actual.items == ConcreteSchema(types=("number",))


def test_normalise_malformed_node_is_any() -> None:
    """
    ARRANGE: schema node that is a string
    ACT:     normalise_schema
    ASSERT:  ANY_SCHEMA
    """
    actual = normalise_schema("not a schema", _document())

    assert actual == ANY_SCHEMA


def test_normalise_malformed_type_is_ignored() -> None:
    """
    ARRANGE: schema whose type is a number
    ACT:     normalise_schema
    ASSERT:  no declared types
    """
    actual = normalise_schema({"type": 42}, _document())

    assert actual.types == ()


def test_normalise_false_schema_in_3_1() -> None:
    """
    ARRANGE: boolean false schema in a 3.1 document
    ACT:     normalise_schema
    ASSERT:  NeverSchema
    """
    actual = normalise_schema(False, _document(SpecVersion.V3_1))

    assert isinstance(actual, NeverSchema)


def test_normalise_false_schema_in_3_0_is_any() -> None:
    """
    ARRANGE: boolean false schema in a 3.0 document
    ACT:     normalise_schema
    ASSERT:  ANY_SCHEMA
    """
    actual = normalise_schema(False, _document(SpecVersion.V3_0))

    assert actual == ANY_SCHEMA


def test_normalise_resolves_local_reference() -> None:
    """
    ARRANGE: reference to a component schema
    ACT:     normalise_schema
    ASSERT:  descriptor of the target
    """
    document = _document(schemas={"Name": {"type": "string"}})

    actual = normalise_schema({"$ref": "#/components/schemas/Name"}, document)

    assert actual == ConcreteSchema(types=("string",))


def test_normalise_dangling_reference_is_any() -> None:
    """
    ARRANGE: reference to a missing component
    ACT:     normalise_schema
    ASSERT:  ANY_SCHEMA
    """
    actual = normalise_schema({"$ref": "#/components/schemas/Missing"}, _document())

    assert actual == ANY_SCHEMA


def test_normalise_recursive_reference_terminates() -> None:
    """
    ARRANGE: schema whose property references itself
    ACT:     normalise_schema
    ASSERT:  inner recurrence degrades to ANY_SCHEMA
    """
    document = _document(
        schemas={
            "Node": {
                "type": "object",
                "properties": {"next": {"$ref": "#/components/schemas/Node"}},
            },
        },
    )

    actual = normalise_schema({"$ref": "#/components/schemas/Node"}, document)

    assert actual.properties["next"] == ANY_SCHEMA


@pytest.mark.parametrize("declared", ["null", ["null"]])
def test_normalise_null_only_type(declared: object) -> None:
    """
    ARRANGE: schema declaring only the null type
    ACT:     normalise_schema
    ASSERT:  nullable and null-only with no other types
    """
    actual = normalise_schema({"type": declared}, _document())

    assert (actual.types, actual.nullable, actual.null_only) == ((), True, True)


def test_normalise_type_array_with_null_is_not_null_only() -> None:
    """
    ARRANGE: schema with type ["string", "null"]
    ACT:     normalise_schema
    ASSERT:  null-only flag stays unset
    """
    actual = normalise_schema({"type": ["string", "null"]}, _document())

    assert actual.null_only is False


def test_normalise_legacy_nullable_is_not_null_only() -> None:
    """
    ARRANGE: untyped schema with nullable true
    ACT:     normalise_schema
    ASSERT:  null-only flag stays unset
    """
    actual = normalise_schema({"nullable": True}, _document())

    assert actual.null_only is False


def test_normalise_cyclic_mapping_terminates() -> None:
    """
    ARRANGE: schema mapping whose child property is the mapping itself
    ACT:     normalise_schema
    ASSERT:  the recurrence degrades to ANY_SCHEMA
    """
    node = {"type": "object", "properties": {}}
    node["properties"]["child"] = node

    actual = normalise_schema(node, _document())

    assert actual.properties["child"] == ANY_SCHEMA


def test_normalise_shared_sibling_mapping_is_not_a_cycle() -> None:
    """
    ARRANGE: one mapping reused under two sibling properties
    ACT:     normalise_schema
    ASSERT:  both properties normalise to the full schema
    """
    shared = {"type": "string"}
    node = {"type": "object", "properties": {"first": shared, "second": shared}}

    actual = normalise_schema(node, _document())

    assert actual.properties["second"] == ConcreteSchema(types=("string",))
