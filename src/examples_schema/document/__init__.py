# document/__init__.py

from .load import load_document, load_document_file
from .model import ApiDocument, SpecVersion, parse_spec_version

__all__ = [
    "ApiDocument",
    "SpecVersion",
    "load_document",
    "load_document_file",
    "parse_spec_version",
]
