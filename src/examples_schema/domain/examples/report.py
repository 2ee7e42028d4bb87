# examples/report.py

from collections.abc import Sequence
from datetime import UTC, datetime

from examples_schema.schemas.report import DiagnosticOutput, ExamplesSchemaReport

from .models import RULE_ID, Diagnostic


def build_examples_report(
    diagnostics: Sequence[Diagnostic],
    spec_version: str,
    sites_checked: int,
    examples_checked: int,
) -> ExamplesSchemaReport:
    """
    Convert internal diagnostics into a Pydantic ExamplesSchemaReport.

    Args:
        diagnostics: Diagnostics in discovery order.
        spec_version: The document's OpenAPI version (e.g. "3.1").
        sites_checked: Number of example sites visited.
        examples_checked: Number of individual example values matched.

    Returns:
        ExamplesSchemaReport: Machine-readable report envelope.
    """
    outputs = tuple(
        DiagnosticOutput(message=diagnostic.message, path=diagnostic.path)
        for diagnostic in diagnostics
    )

    return ExamplesSchemaReport(
        rule=RULE_ID,
        generated_at=datetime.now(UTC).isoformat(),
        spec_version=spec_version,
        sites_checked=sites_checked,
        examples_checked=examples_checked,
        total_diagnostics=len(outputs),
        diagnostics=outputs,
    )
