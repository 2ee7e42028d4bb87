# schema/__init__.py

from .descriptors import (
    ANY_SCHEMA,
    AdditionalPolicy,
    ConcreteSchema,
    NeverSchema,
    SchemaDescriptor,
    UnionMode,
    UnionSchema,
)
from .match import match_value
from .normalise import normalise_schema
from .values import ValueKind, display, kind_of, values_equal

__all__ = [
    "ANY_SCHEMA",
    "AdditionalPolicy",
    "ConcreteSchema",
    "NeverSchema",
    "SchemaDescriptor",
    "UnionMode",
    "UnionSchema",
    "ValueKind",
    "display",
    "kind_of",
    "match_value",
    "normalise_schema",
    "values_equal",
]
