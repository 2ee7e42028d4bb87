#!/usr/bin/env python3
"""
Examples Schema Demo for the examples-schema package.

This script runs the examples-schema rule over a small inline OpenAPI
document, or over a document path given on the command line, and prints the
resulting diagnostics grouped by location.
"""

import sys
from collections import defaultdict

from examples_schema import (
    ApiDocument,
    load_document,
    load_document_file,
    run_examples_schema,
)

SAMPLE_DOCUMENT = """
openapi: 3.1.0
paths:
  /herbs:
    get:
      responses:
        "200":
          content:
            application/json:
              schema:
                $ref: "#/components/schemas/Herb"
              examples:
                basil:
                  value:
                    name: basil
                    kind: culinary
                mint:
                  value:
                    name: mint
                    kind: medicinal
                    colour: green
components:
  schemas:
    Herb:
      type: object
      required: [name]
      properties:
        name:
          type: string
        kind:
          oneOf:
            - type: string
              const: culinary
            - type: integer
              const: 1
        rating:
          type: ["integer", "null"]
      additionalProperties: false
      examples:
        - name: thyme
          rating: null
"""


def print_separator(title: str) -> None:
    """Print a formatted section separator."""
    print(f"\n{'=' * 60}")
    print(f" {title}")
    print(f"{'=' * 60}")


def load_demo_document() -> ApiDocument:
    """Load the document named on the command line, or the inline sample."""
    if len(sys.argv) > 1:
        print(f"Loading {sys.argv[1]}...")
        return load_document_file(sys.argv[1])

    print("Loading inline sample document...")
    return load_document(SAMPLE_DOCUMENT)


def main() -> None:
    """Main demonstration function."""
    print_separator("📋 EXAMPLES SCHEMA RULE")

    try:
        document = load_demo_document()
    except (OSError, ValueError) as e:
        print(f"❌ Could not load document: {e}")
        sys.exit(1)

    report = run_examples_schema(document)

    print(f"OpenAPI version: {report.spec_version}")
    print(f"Example sites checked: {report.sites_checked}")
    print(f"Examples checked: {report.examples_checked}")

    if not report.diagnostics:
        print_separator("✅ ALL EXAMPLES CONFORM")
        return

    grouped: dict[str, list[str]] = defaultdict(list)
    for diagnostic in report.diagnostics:
        grouped[diagnostic.path].append(diagnostic.message)

    print_separator(f"⚠️  {report.total_diagnostics} DIAGNOSTICS")
    for path, messages in grouped.items():
        print(f"\n{path}")
        for message in messages:
            print(f"  • {message}")

    sys.exit(1)


if __name__ == "__main__":
    main()
