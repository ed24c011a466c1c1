"""Hypothesis strategies for templateerrors property-based testing.

Strategies are organized by domain:

- diagnostics: ErrorRecord, categories, collaborator exceptions, formatters

Usage:
    from tests.strategies import error_records, line_aware_errors
    from tests.strategies.diagnostics import error_categories
"""

from .diagnostics import (
    category_details,
    error_categories,
    error_items,
    error_reasons,
    error_record_formatters,
    error_records,
    error_severities,
    line_aware_errors,
    line_numbers,
    plain_errors,
)

__all__ = [
    "category_details",
    "error_categories",
    "error_items",
    "error_reasons",
    "error_record_formatters",
    "error_records",
    "error_severities",
    "line_aware_errors",
    "line_numbers",
    "plain_errors",
]
