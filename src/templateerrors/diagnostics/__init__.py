"""Diagnostic records for template parsing and rendering problems.

Provides the immutable ErrorRecord, its category taxonomy, the exception
types collaborators raise, a per-pass collection, and output formatting.

Python 3.13+. Zero external dependencies.
"""

from .categories import (
    BasicErrorCategory,
    CustomErrorCategory,
    ErrorCategory,
    category_name,
    parse_category,
)
from .collection import ErrorCollection
from .errors import (
    FatalTemplateErrorsError,
    InterpretError,
    LineAware,
    TemplateSyntaxError,
)
from .formatter import ErrorRecordFormatter, OutputFormat
from .record import ErrorRecord, friendly_object_str

__all__ = [
    "BasicErrorCategory",
    "CustomErrorCategory",
    "ErrorCategory",
    "ErrorCollection",
    "ErrorRecord",
    "ErrorRecordFormatter",
    "FatalTemplateErrorsError",
    "InterpretError",
    "LineAware",
    "OutputFormat",
    "TemplateSyntaxError",
    "category_name",
    "friendly_object_str",
    "parse_category",
]
