# document/model.py

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class SpecVersion(Enum):
    """
    Major/minor OpenAPI versions with distinct schema semantics.

    Attributes:
        V3_0: OpenAPI 3.0.x, single type plus the legacy ``nullable`` flag.
        V3_1: OpenAPI 3.1.x, JSON Schema 2020-12 aligned (type arrays,
            boolean schemas).
    """

    V3_0 = "3.0"
    V3_1 = "3.1"


def parse_spec_version(raw: object) -> SpecVersion:
    """
    Derive the specification version from the top-level ``openapi`` field.

    YAML turns an unquoted ``3.1`` into a float, so numeric scalars are
    accepted alongside the usual strings.

    Args:
        raw: The value of the document's ``openapi`` field, if any.

    Returns:
        SpecVersion: The matching version, or V3_1 when unrecognised.
    """
    text = str(raw).strip() if raw is not None else ""

    for version in SpecVersion:
        if text == version.value or text.startswith(f"{version.value}."):
            return version

    logger.warning("Unrecognised OpenAPI version %r, assuming 3.1", raw)
    return SpecVersion.V3_1


@dataclass(frozen=True)
class ApiDocument:
    """
    Read-only view over a parsed API description document.

    The root mapping is owned by the caller and is never mutated; all
    traversal queries it by reference.
    """

    root: Mapping[str, object]
    version: SpecVersion

    @classmethod
    def from_mapping(cls, root: Mapping[str, object]) -> "ApiDocument":
        """
        Wrap an already-parsed document mapping.

        Args:
            root: Parsed document root.

        Returns:
            ApiDocument: Document with its version derived from ``openapi``.
        """
        return cls(root=root, version=parse_spec_version(root.get("openapi")))

    def resolve(self, node: Mapping[str, object]) -> object | None:
        """
        Follow a local ``$ref`` held by ``node``.

        Only same-document JSON pointers (``#/...``) are supported.

        Args:
            node: A mapping carrying a ``$ref`` field.

        Returns:
            object | None: The referenced node, or None if the reference is
                remote, malformed or dangling.
        """
        ref = node.get("$ref")
        if not isinstance(ref, str) or not ref.startswith("#"):
            return None

        current: object = self.root
        for token in _pointer_tokens(ref[1:]):
            current = _step(current, token)
            if current is None:
                logger.debug("Dangling reference %s", ref)
                return None

        return current


def _pointer_tokens(pointer: str) -> list[str]:
    """
    Split a JSON pointer into unescaped reference tokens.

    Returns:
        list[str]: Tokens in traversal order (empty for the root pointer).
    """
    if not pointer:
        return []

    return [
        token.replace("~1", "/").replace("~0", "~")
        for token in pointer.lstrip("/").split("/")
    ]


def _step(current: object, token: str) -> object | None:
    """
    Descend one pointer token into a mapping or sequence.

    Returns:
        object | None: The child node, or None if it does not exist.
    """
    if isinstance(current, Mapping):
        return current.get(token)

    if isinstance(current, list) and token.isdigit():
        position = int(token)
        return current[position] if position < len(current) else None

    return None
