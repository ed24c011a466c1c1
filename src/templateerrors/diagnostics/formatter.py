"""Error record formatting service.

Centralizes record output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from templateerrors.constants import SANITIZE_MAX_CONTENT_LENGTH, UNKNOWN_LINE
from templateerrors.enums import ErrorSeverity

from .categories import BasicErrorCategory, category_name
from .record import ErrorRecord

__all__ = [
    "ErrorRecordFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for record formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class ErrorRecordFormatter:
    """Record formatting service.

    Centralizes formatting of ErrorRecord objects into human-readable
    or machine-readable output. The cause is never part of the output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate message text to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> formatter = ErrorRecordFormatter()
        >>> record = ErrorRecord.from_unresolved_property(None, "name", 3)
        >>> print(formatter.format(record))
        warning[UNKNOWN/PROPERTY]: Cannot resolve property 'name' in 'null'
          --> line 3
          = field: name

        >>> formatter = ErrorRecordFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(record))
        WARNING UNKNOWN line 3: Cannot resolve property 'name' in 'null'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = SANITIZE_MAX_CONTENT_LENGTH

    def format(self, record: ErrorRecord) -> str:
        """Format a single record.

        Args:
            record: Record to format

        Returns:
            Formatted record string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(record)
            case OutputFormat.SIMPLE:
                return self._format_simple(record)
            case OutputFormat.JSON:
                return self._format_json(record)

    def format_all(self, records: Iterable[ErrorRecord]) -> str:
        """Format multiple records.

        Args:
            records: Iterable of records to format

        Returns:
            Formatted string with all records separated by blank lines
            (newlines for JSON, one object per line)
        """
        separator = "\n" if self.output_format == OutputFormat.JSON else "\n\n"
        return separator.join(self.format(r) for r in records)

    def _format_rust(self, record: ErrorRecord) -> str:
        """Format record in Rust compiler style.

        Example output:
            error[EXCEPTION/OTHER]: ValueError: bad input
              --> line 12
              = category: unknown
              = detail: key=value
        """
        severity = "error" if record.severity is ErrorSeverity.FATAL else "warning"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(record.message)
        parts = [f"{severity_str}[{record.reason.name}/{record.item.name}]: {message}"]

        if record.line_number != UNKNOWN_LINE:
            parts.append(f"  --> line {record.line_number}")

        if record.field_name:
            parts.append(f"  = field: {record.field_name}")

        if record.category is not BasicErrorCategory.UNKNOWN:
            parts.append(f"  = category: {category_name(record.category)}")

        if record.category_details:
            for key in sorted(record.category_details):
                value = self._maybe_sanitize(record.category_details[key])
                parts.append(f"  = detail: {key}={value}")

        return "\n".join(parts)

    def _format_simple(self, record: ErrorRecord) -> str:
        """Format record in single-line format.

        Example output:
            FATAL SYNTAX_ERROR line 4: TemplateSyntaxError: unexpected '}'
        """
        message = self._maybe_sanitize(record.message)
        if record.line_number == UNKNOWN_LINE:
            return f"{record.severity.name} {record.reason.name}: {message}"
        return f"{record.severity.name} {record.reason.name} line {record.line_number}: {message}"

    def _format_json(self, record: ErrorRecord) -> str:
        """Format record as JSON.

        Example output:
            {"severity": "fatal", "reason": "exception", "item": "other", ...}
        """
        data = record.to_dict()
        data["message"] = self._maybe_sanitize(record.message)
        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
