# schema/formats.py

from jsonschema import Draft202012Validator

_FORMAT_CHECKER = Draft202012Validator.FORMAT_CHECKER


def conforms_to_format(value: object, format_name: str) -> bool:
    """
    Check a string-kind value against a named format grammar.

    Grammars come from the JSON Schema 2020-12 format checker, so
    ``date-time``, ``date``, ``time``, ``uuid``, ``email``, ``ipv4`` and the
    other formats it knows are enforced. Unknown formats always pass, as do
    values that are not strings.

    Args:
        value: The example value, already known to be string-kind.
        format_name: The schema's ``format`` keyword.

    Returns:
        bool: False only when a known grammar rejects the value.
    """
    return _FORMAT_CHECKER.conforms(value, format_name)
