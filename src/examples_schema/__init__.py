# examples_schema/__init__.py

from .document import ApiDocument, load_document, load_document_file
from .domain import Diagnostic, RuleSettings, check_examples, run_examples_schema
from .schemas import DiagnosticOutput, ExamplesSchemaReport

__all__ = [
    "check_examples",
    "run_examples_schema",
    "load_document",
    "load_document_file",
    "ApiDocument",
    "Diagnostic",
    "RuleSettings",
    "DiagnosticOutput",
    "ExamplesSchemaReport",
]
