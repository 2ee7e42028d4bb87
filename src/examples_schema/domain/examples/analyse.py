# examples/analyse.py

import logging
from collections.abc import Iterator, Sequence

from examples_schema.document import ApiDocument
from examples_schema.schemas.report import ExamplesSchemaReport

from .models import Diagnostic, ExampleSite, RuleSettings, default_settings
from .paths import build_path
from .report import build_examples_report
from .schema import match_value, normalise_schema
from .sites import collect_example_sites, expand_payload

logger = logging.getLogger(__name__)


def check_examples(
    document: ApiDocument,
    settings: RuleSettings | None = None,
) -> tuple[Diagnostic, ...]:
    """
    Validate every example in the document against its schema.

    Args:
        document: Parsed, read-only API document.
        settings: Optional rule settings (defaults to standard settings).

    Returns:
        tuple[Diagnostic, ...]: Diagnostics in discovery order; empty when
            every example conforms.
    """
    sites = collect_example_sites(document)
    return _check_sites(sites, document, settings or default_settings())


def run_examples_schema(
    document: ApiDocument,
    settings: RuleSettings | None = None,
) -> ExamplesSchemaReport:
    """
    Run the examples-schema rule and wrap its results in a report.

    Args:
        document: Parsed, read-only API document.
        settings: Optional rule settings (defaults to standard settings).

    Returns:
        ExamplesSchemaReport: Diagnostics plus run metadata.
    """
    sites = collect_example_sites(document)
    diagnostics = _check_sites(sites, document, settings or default_settings())

    report = build_examples_report(
        diagnostics,
        spec_version=document.version.value,
        sites_checked=len(sites),
        examples_checked=sum(
            1 for site in sites for _ in expand_payload(site.payload, document)
        ),
    )

    logger.info(
        "Examples schema check complete: %d diagnostics across %d example sites",
        report.total_diagnostics,
        report.sites_checked,
    )

    return report


def _check_sites(
    sites: Sequence[ExampleSite],
    document: ApiDocument,
    settings: RuleSettings,
) -> tuple[Diagnostic, ...]:
    """
    Match the examples of each site, preserving discovery order.

    Returns:
        tuple[Diagnostic, ...]: Diagnostics across all sites.
    """
    return tuple(
        diagnostic
        for site in sites
        for diagnostic in _check_site(site, document, settings)
    )


def _check_site(
    site: ExampleSite,
    document: ApiDocument,
    settings: RuleSettings,
) -> Iterator[Diagnostic]:
    """
    Match each example declared at a site against the site's schema.

    Every mismatch reason becomes a diagnostic located at the example
    itself, whatever depth inside the value it was found at.

    Yields:
        Diagnostic: One per mismatch reason.
    """
    schema = normalise_schema(site.schema, document)

    for suffix, value in expand_payload(site.payload, document):
        location = build_path(site.path + suffix)
        for reason in match_value(value, schema, settings):
            yield Diagnostic(reason.message, location)
