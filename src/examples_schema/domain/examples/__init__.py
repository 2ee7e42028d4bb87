# examples/__init__.py

from .analyse import check_examples, run_examples_schema
from .models import (
    RULE_ID,
    Diagnostic,
    ExampleList,
    ExampleSite,
    MismatchReason,
    NamedExamples,
    RuleSettings,
    SingleExample,
    default_settings,
)
from .paths import PathSegment, SegmentKind, build_path
from .report import build_examples_report

__all__ = [
    "RULE_ID",
    "Diagnostic",
    "ExampleList",
    "ExampleSite",
    "MismatchReason",
    "NamedExamples",
    "PathSegment",
    "RuleSettings",
    "SegmentKind",
    "SingleExample",
    "build_examples_report",
    "build_path",
    "check_examples",
    "default_settings",
    "run_examples_schema",
]
