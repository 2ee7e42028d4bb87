# document/load.py

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from .model import ApiDocument

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _DocumentLoader(yaml.SafeLoader):
    """
    Safe YAML loader that keeps unquoted timestamps as their written text.
    """


_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, pattern) for tag, pattern in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_document(text: str) -> ApiDocument:
    """
    Parse YAML or JSON document text into an ApiDocument.

    Args:
        text: Raw document text.

    Returns:
        ApiDocument: The parsed, read-only document model.

    Raises:
        ValueError: If the text cannot be parsed or its root is not a mapping.
    """
    try:
        root = yaml.load(text, Loader=_DocumentLoader)
    except yaml.YAMLError as error:
        raise ValueError("Failed to parse API document.") from error

    if not isinstance(root, Mapping):
        raise ValueError("API document root must be a mapping.")

    document = ApiDocument.from_mapping(root)
    logger.debug("Loaded OpenAPI %s document", document.version.value)
    return document


def load_document_file(path: Path | str) -> ApiDocument:
    """
    Read and parse an API document from disk.

    Args:
        path: Location of a YAML or JSON document.

    Returns:
        ApiDocument: The parsed, read-only document model.
    """
    return load_document(Path(path).read_text(encoding="utf-8"))
