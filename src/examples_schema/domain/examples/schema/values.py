# schema/values.py

import json
from collections.abc import Mapping, Sequence
from datetime import date, time
from decimal import Decimal
from enum import Enum


class ValueKind(Enum):
    """
    Closed set of kinds an example payload value can take.
    """

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


NUMERIC_KINDS = frozenset({ValueKind.INTEGER, ValueKind.NUMBER})


def kind_of(value: object) -> ValueKind:
    """
    Classify a loosely typed payload value.

    Booleans are checked before integers since ``bool`` subclasses ``int``.
    Whole-valued floats count as integers. YAML timestamps arrive as
    ``date``/``datetime`` objects and are treated as the strings they were
    written as.

    Args:
        value: A value decoded from YAML or JSON.

    Returns:
        ValueKind: The value's kind.
    """
    if value is None:
        return ValueKind.NULL

    if isinstance(value, bool):
        return ValueKind.BOOLEAN

    if isinstance(value, int):
        return ValueKind.INTEGER

    if isinstance(value, float | Decimal):
        return ValueKind.INTEGER if _is_whole(value) else ValueKind.NUMBER

    if isinstance(value, Mapping):
        return ValueKind.OBJECT

    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return ValueKind.ARRAY

    return ValueKind.STRING


def values_equal(left: object, right: object) -> bool:
    """
    Compare two payload values without cross-kind coercion.

    ``"1"`` never equals ``1`` and ``True`` never equals ``1``, while
    ``1`` equals ``1.0``.

    Returns:
        bool: True if both values are of compatible kinds and equal.
    """
    left_kind, right_kind = kind_of(left), kind_of(right)

    if left_kind in NUMERIC_KINDS and right_kind in NUMERIC_KINDS:
        return left == right

    if left_kind is not right_kind:
        return False

    if left_kind is ValueKind.ARRAY:
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right, strict=True)
        )

    if left_kind is ValueKind.OBJECT:
        return left.keys() == right.keys() and all(
            values_equal(left[name], right[name]) for name in left
        )

    if left_kind is ValueKind.STRING:
        if isinstance(left, date | time) or isinstance(right, date | time):
            return _temporal_equal(left, right)
        return _as_text(left) == _as_text(right)

    return left == right


def display(value: object) -> str:
    """
    Render a value for use in a mismatch message.

    Returns:
        str: Strings wrapped in single quotes, anything else as JSON.
    """
    if kind_of(value) is ValueKind.STRING:
        return f"'{_as_text(value)}'"

    return json.dumps(value, default=str, sort_keys=True)


def _as_text(value: object) -> str:
    """
    Recover the written form of a string-kind value.

    Returns:
        str: The text, with YAML timestamps rendered in ISO-8601.
    """
    if isinstance(value, date | time):
        return value.isoformat()

    return str(value)


def _is_whole(value: float | Decimal) -> bool:
    """
    Check whether a finite numeric value has no fractional part.

    Returns:
        bool: True for finite values equal to their integer part.
    """
    try:
        return value == int(value)
    except (OverflowError, ValueError):
        return False


def _temporal_equal(left: object, right: object) -> bool:
    """
    Compare a date or time object with another string-kind value.

    Text on the other side is parsed into the same temporal type, so the
    written ``2022-08-07T12:12:00Z`` equals the datetime it denotes.

    Returns:
        bool: True if both denote the same instant, date or time.
    """
    if isinstance(left, str):
        left, right = right, left

    if not isinstance(right, str):
        return left == right

    try:
        return left == type(left).fromisoformat(right)
    except ValueError:
        return False
