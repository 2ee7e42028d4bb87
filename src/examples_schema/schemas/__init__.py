# schemas/__init__.py

from .report import DiagnosticOutput, ExamplesSchemaReport

__all__ = [
    "DiagnosticOutput",
    "ExamplesSchemaReport",
]
