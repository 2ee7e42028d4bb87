# schema/descriptors.py

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType


class UnionMode(Enum):
    """
    How a union schema combines its alternatives.

    Attributes:
        ONE_OF: Value must conform to one of the alternatives.
        ANY_OF: Value must conform to at least one alternative.
        ALL_OF: Value must conform to every alternative.
    """

    ONE_OF = auto()
    ANY_OF = auto()
    ALL_OF = auto()


class AdditionalPolicy(Enum):
    """
    Treatment of object keys not declared under ``properties``.
    """

    ALLOWED = auto()
    DISALLOWED = auto()
    CONSTRAINED = auto()


@dataclass(frozen=True)
class ConcreteSchema:
    """
    A schema with structural constraints and no alternatives.

    An instance with every field at its default accepts any value.
    """

    # Declared type tokens in declaration order, "null" already folded out
    types: tuple[str, ...] = ()
    nullable: bool = False
    # Set when the type keyword named "null" and nothing else
    null_only: bool = False
    has_const: bool = False
    const: object = None
    enum: tuple[object, ...] | None = None
    format: str | None = None
    required: tuple[str, ...] = ()
    properties: Mapping[str, "SchemaDescriptor"] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    additional: AdditionalPolicy = AdditionalPolicy.ALLOWED
    additional_schema: "SchemaDescriptor | None" = None
    items: "SchemaDescriptor | None" = None


@dataclass(frozen=True)
class UnionSchema:
    """
    A schema satisfied through its ordered alternatives.
    """

    mode: UnionMode
    alternatives: tuple["SchemaDescriptor", ...]
    nullable: bool = False


@dataclass(frozen=True)
class NeverSchema:
    """
    The ``false`` schema: no value conforms.
    """


SchemaDescriptor = ConcreteSchema | UnionSchema | NeverSchema

ANY_SCHEMA = ConcreteSchema()
