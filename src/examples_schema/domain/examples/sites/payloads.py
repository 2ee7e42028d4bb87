# sites/payloads.py

import logging
from collections.abc import Iterator, Mapping

from examples_schema.document import ApiDocument

from ..models import ExampleList, ExamplePayload, NamedExamples, SingleExample
from ..paths import PathSegment, field, index, key

logger = logging.getLogger(__name__)


def expand_payload(
    payload: ExamplePayload,
    document: ApiDocument,
) -> Iterator[tuple[tuple[PathSegment, ...], object]]:
    """
    Flatten a site's payload into individual example values.

    Named examples are unwrapped to the payload under their ``value`` field,
    following a ``$ref`` to a shared Example Object first. The path suffix
    stays at the entry's own key. Entries without an inline value (such as
    ``externalValue`` only, or a dangling reference) are skipped.

    Args:
        payload: The example payload declared at a site.
        document: Owning document, used to resolve referenced examples.

    Yields:
        tuple[tuple[PathSegment, ...], object]: The path suffix locating the
            example relative to its site, and the example value.
    """
    if isinstance(payload, SingleExample):
        yield (field("example"),), payload.value

    elif isinstance(payload, ExampleList):
        for position, value in enumerate(payload.values):
            yield (field("examples"), index(position)), value

    elif isinstance(payload, NamedExamples):
        for name, raw_entry in payload.entries.items():
            entry = _resolve_entry(raw_entry, document)
            if isinstance(entry, Mapping) and "value" in entry:
                yield (field("examples"), key(name)), entry["value"]
            else:
                logger.debug("Named example %r has no inline value", name)


def _resolve_entry(entry: object, document: ApiDocument) -> object:
    """
    Follow ``$ref`` links from a named example entry to its Example Object.

    Returns:
        object: The referenced entry, the entry itself when it is inline, or
            None for a dangling or circular reference chain.
    """
    visited: set[int] = set()

    while isinstance(entry, Mapping) and "$ref" in entry:
        if id(entry) in visited:
            return None
        visited.add(id(entry))
        entry = document.resolve(entry)

    return entry
