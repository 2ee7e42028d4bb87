# schemas/report.py

from pydantic import BaseModel, ConfigDict


class DiagnosticOutput(BaseModel):
    """
    A single example that does not conform to its schema.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    message: str
    path: str


class ExamplesSchemaReport(BaseModel):
    """
    Machine-readable envelope for one run of the examples-schema rule.

    Carries run metadata alongside the ordered diagnostics, serialisable as
    JSON for whichever host aggregates rule results.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    rule: str
    generated_at: str
    spec_version: str
    sites_checked: int
    examples_checked: int
    total_diagnostics: int
    diagnostics: tuple[DiagnosticOutput, ...]
