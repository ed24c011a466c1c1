"""templateerrors - Error records for template parsing and rendering.

Turns syntax failures, evaluation exceptions, and unresolved properties
into uniform, immutable, transportable records so a rendering pass can
collect every problem it finds instead of stopping at the first one.

Public API:
    ErrorRecord - Classified record of one template problem
    ErrorCollection - Ordered records for one rendering pass
    ErrorRecordFormatter - Rust-style, single-line, or JSON output
    ErrorSeverity, ErrorReason, ErrorItem - Classification axes
    BasicErrorCategory, CustomErrorCategory - Secondary category tags

Exceptions:
    InterpretError - Line-aware interpretation failure
    TemplateSyntaxError - Template source could not be parsed
    FatalTemplateErrorsError - Caller stopped a pass on FATAL records

Submodules:
    templateerrors.diagnostics - Records, categories, collection, formatting
    templateerrors.constants - Sentinels and message text
"""

from .constants import UNKNOWN_LINE
from .diagnostics import (
    BasicErrorCategory,
    CustomErrorCategory,
    ErrorCollection,
    ErrorRecord,
    ErrorRecordFormatter,
    FatalTemplateErrorsError,
    InterpretError,
    OutputFormat,
    TemplateSyntaxError,
)
from .enums import ErrorItem, ErrorReason, ErrorSeverity

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("templateerrors")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "UNKNOWN_LINE",
    "BasicErrorCategory",
    "CustomErrorCategory",
    "ErrorCollection",
    "ErrorItem",
    "ErrorReason",
    "ErrorRecord",
    "ErrorRecordFormatter",
    "ErrorSeverity",
    "FatalTemplateErrorsError",
    "InterpretError",
    "OutputFormat",
    "TemplateSyntaxError",
    "__version__",
]
