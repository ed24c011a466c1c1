"""Shared constants for templateerrors.

This module provides centralized configuration constants used across the
record, collection, and formatter modules. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Line numbers: Sentinel for problems without a known source line
- Message text: Fixed wording for generated record messages
- Output limits: Truncation bounds for logs and sanitized output

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Line numbers
    "UNKNOWN_LINE",
    # Message text
    "NULL_OBJECT_TEXT",
    "UNKNOWN_PROPERTY_MESSAGE",
    # Output limits
    "LOG_TRUNCATE_WARNING",
    "LOG_TRUNCATE_DEBUG",
    "SANITIZE_MAX_CONTENT_LENGTH",
]

# ============================================================================
# LINE NUMBERS
# ============================================================================

# Sentinel line number for records whose source line is not known.
# Any other negative value passed to ErrorRecord is normalized to this one,
# so consumers only ever have to test a single value.
UNKNOWN_LINE: int = -1

# ============================================================================
# MESSAGE TEXT
# ============================================================================

# Rendering of an absent base object in unresolved-property messages.
NULL_OBJECT_TEXT: str = "null"

# Format string for unresolved-property warnings.
# Use .format(name=..., base=...).
UNKNOWN_PROPERTY_MESSAGE: str = "Cannot resolve property '{name}' in '{base}'"

# Stand-in for the text of an exception whose str() fails.
UNPRINTABLE_TEXT: str = "<unprintable>"

# ============================================================================
# OUTPUT LIMITS
# ============================================================================

# Logging truncation limits for record messages.
# Warnings show more context (100 chars) as they're surfaced to operators.
# Debug messages are high-volume, shorter (50 chars) keeps logs manageable.
LOG_TRUNCATE_WARNING: int = 100
LOG_TRUNCATE_DEBUG: int = 50

# Maximum content length before truncation when sanitizing formatter output.
SANITIZE_MAX_CONTENT_LENGTH: int = 100
