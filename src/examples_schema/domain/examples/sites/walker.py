# sites/walker.py

import logging
from collections.abc import Iterator, Mapping

from examples_schema.document import ApiDocument

from ..models import ExampleList, ExampleSite, NamedExamples, SingleExample
from ..paths import PathSegment, build_path, field, index, key

logger = logging.getLogger(__name__)

Path = tuple[PathSegment, ...]

OPERATION_METHODS = frozenset(
    {"get", "put", "post", "delete", "options", "head", "patch", "trace"},
)

# Schema keywords whose values are lists of sub-schemas
_SCHEMA_LIST_KEYWORDS = ("oneOf", "anyOf", "allOf")


def collect_example_sites(document: ApiDocument) -> tuple[ExampleSite, ...]:
    """
    Enumerate every example site reachable from the document root.

    Top-level sections are visited in document order. Nodes that are
    themselves references are not entered; their targets are visited at
    their home location under ``components``.

    Args:
        document: The parsed document to traverse. It is never mutated.

    Returns:
        tuple[ExampleSite, ...]: Sites in discovery order.
    """
    return tuple(_walk_root(document.root))


def _walk_root(root: Mapping[str, object]) -> Iterator[ExampleSite]:
    for name, node in root.items():
        path = (field(str(name)),)
        if name in ("paths", "webhooks"):
            yield from _walk_path_items(node, path)
        elif name == "components":
            yield from _walk_components(node, path)


def _walk_components(node: object, path: Path) -> Iterator[ExampleSite]:
    """
    Visit the reusable component maps in document order.
    """
    walkers = {
        "schemas": _walk_schema,
        "parameters": _walk_binding,
        "headers": _walk_binding,
        "requestBodies": _walk_request_body,
        "responses": _walk_response,
        "pathItems": _walk_path_item,
        "callbacks": _walk_path_items,
    }

    for section, members in _items(node):
        walker = walkers.get(section)
        if walker is None:
            continue
        for name, member in _items(members):
            yield from walker(member, path + (field(section), key(name)))


def _walk_path_items(node: object, path: Path) -> Iterator[ExampleSite]:
    for name, item in _items(node):
        yield from _walk_path_item(item, path + (key(name),))


def _walk_path_item(node: object, path: Path) -> Iterator[ExampleSite]:
    if _is_reference(node):
        return

    for name, child in _items(node):
        if name == "parameters":
            yield from _walk_parameter_list(child, path + (field(name),))
        elif name in OPERATION_METHODS:
            yield from _walk_operation(child, path + (field(name),))


def _walk_operation(node: object, path: Path) -> Iterator[ExampleSite]:
    for name, child in _items(node):
        child_path = path + (field(name),)
        if name == "parameters":
            yield from _walk_parameter_list(child, child_path)
        elif name == "requestBody":
            yield from _walk_request_body(child, child_path)
        elif name == "responses":
            for code, response in _items(child):
                yield from _walk_response(response, child_path + (key(code),))
        elif name == "callbacks":
            for callback_name, callback in _items(child):
                if not _is_reference(callback):
                    yield from _walk_path_items(
                        callback,
                        child_path + (key(callback_name),),
                    )


def _walk_parameter_list(node: object, path: Path) -> Iterator[ExampleSite]:
    if not isinstance(node, list):
        return

    for position, parameter in enumerate(node):
        yield from _walk_binding(parameter, path + (index(position),))


def _walk_request_body(node: object, path: Path) -> Iterator[ExampleSite]:
    if _is_reference(node) or not isinstance(node, Mapping):
        return

    yield from _walk_content(node.get("content"), path + (field("content"),))


def _walk_response(node: object, path: Path) -> Iterator[ExampleSite]:
    if _is_reference(node) or not isinstance(node, Mapping):
        return

    for name, child in node.items():
        if name == "headers":
            yield from _walk_headers(child, path + (field(name),))
        elif name == "content":
            yield from _walk_content(child, path + (field(name),))


def _walk_headers(node: object, path: Path) -> Iterator[ExampleSite]:
    for name, header in _items(node):
        yield from _walk_binding(header, path + (key(name),))


def _walk_content(node: object, path: Path) -> Iterator[ExampleSite]:
    for media_type, binding in _items(node):
        yield from _walk_media_type(binding, path + (key(media_type),))


def _walk_binding(node: object, path: Path) -> Iterator[ExampleSite]:
    """
    Visit a parameter or header declaration.

    The binding's schema subtree is visited first, then the examples
    declared on the binding itself. Bindings described through ``content``
    are visited as media types.
    """
    if _is_reference(node) or not isinstance(node, Mapping):
        return

    schema = node.get("schema")
    if schema is not None:
        yield from _walk_schema(schema, path + (field("schema"),))
        yield from _binding_sites(node, schema, path)

    yield from _walk_content(node.get("content"), path + (field("content"),))


def _walk_media_type(node: object, path: Path) -> Iterator[ExampleSite]:
    """
    Visit a media-type binding, including headers declared in its encodings.
    """
    if not isinstance(node, Mapping):
        return

    schema = node.get("schema")
    if schema is not None:
        yield from _walk_schema(schema, path + (field("schema"),))
        yield from _binding_sites(node, schema, path)

    for name, encoding in _items(node.get("encoding")):
        if isinstance(encoding, Mapping):
            yield from _walk_headers(
                encoding.get("headers"),
                path + (field("encoding"), key(name), field("headers")),
            )


def _binding_sites(
    node: Mapping[str, object],
    schema: object,
    path: Path,
) -> Iterator[ExampleSite]:
    """
    Yield the example sites a binding declares against its schema.
    """
    if "example" in node:
        yield ExampleSite(schema, path, SingleExample(node["example"]))

    if "examples" in node:
        examples = node["examples"]
        if isinstance(examples, Mapping):
            yield ExampleSite(schema, path, NamedExamples(examples))
        else:
            logger.debug("Skipping non-mapping named examples at %s", build_path(path))


def _walk_schema(
    node: object,
    path: Path,
    ancestors: frozenset[int] = frozenset(),
) -> Iterator[ExampleSite]:
    """
    Visit a schema and every sub-schema nested beneath it.

    Examples declared on a nested schema are validated against that nested
    schema, not against the root. A schema mapping that contains itself
    (through YAML anchors) is visited once on each path down.
    """
    if _is_reference(node) or not isinstance(node, Mapping):
        return

    if id(node) in ancestors:
        logger.debug("Stopping at recursive schema node at %s", build_path(path))
        return

    ancestors = ancestors | {id(node)}

    if "example" in node:
        yield ExampleSite(node, path, SingleExample(node["example"]))

    if "examples" in node:
        examples = node["examples"]
        if isinstance(examples, list):
            yield ExampleSite(node, path, ExampleList(tuple(examples)))
        else:
            logger.debug("Skipping non-list schema examples at %s", build_path(path))

    for name, child in _items(node.get("properties")):
        yield from _walk_schema(
            child,
            path + (field("properties"), key(name)),
            ancestors,
        )

    if "items" in node:
        yield from _walk_schema(node["items"], path + (field("items"),), ancestors)

    if "additionalProperties" in node:
        yield from _walk_schema(
            node["additionalProperties"],
            path + (field("additionalProperties"),),
            ancestors,
        )

    for keyword in _SCHEMA_LIST_KEYWORDS:
        members = node.get(keyword)
        if isinstance(members, list):
            for position, member in enumerate(members):
                yield from _walk_schema(
                    member,
                    path + (field(keyword), index(position)),
                    ancestors,
                )


def _items(node: object) -> tuple[tuple[object, object], ...]:
    """
    Return a node's entries if it is a mapping.

    Returns:
        tuple[tuple[object, object], ...]: Key/value pairs in document order,
            or an empty tuple for anything else.
    """
    return tuple(node.items()) if isinstance(node, Mapping) else ()


def _is_reference(node: object) -> bool:
    return isinstance(node, Mapping) and "$ref" in node
