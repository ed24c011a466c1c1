"""Enumerations for the three classification axes of an ErrorRecord.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so transport encodings receive
plain values ("fatal", "syntax_error") without boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ErrorSeverity(StrEnum):
    """How badly a problem affects rendered output.

    StrEnum provides automatic string conversion: str(ErrorSeverity.FATAL) == "fatal"
    """

    FATAL = "fatal"
    """Output for the affected region cannot be trusted."""

    WARNING = "warning"
    """Non-disruptive; output is still usable."""


class ErrorReason(StrEnum):
    """Coarse classification of what caused a problem.

    StrEnum provides automatic string conversion: str(ErrorReason.MISSING) == "missing"
    """

    SYNTAX_ERROR = "syntax_error"
    """Template source could not be parsed."""

    UNKNOWN = "unknown"
    """Reference could not be resolved: {{ user.nmae }}"""

    BAD_URL = "bad_url"
    """A referenced URL or resource location is malformed."""

    EXCEPTION = "exception"
    """Evaluation raised an exception."""

    MISSING = "missing"
    """Required input (template, argument, include) is absent."""

    OTHER = "other"
    """Anything the other reasons do not describe."""


class ErrorItem(StrEnum):
    """Kind of template construct a problem is attributed to.

    StrEnum provides automatic string conversion: str(ErrorItem.TAG) == "tag"
    """

    TEMPLATE = "template"
    """The template as a whole."""

    TOKEN = "token"
    """A lexical token: {{ ... }} or {% ... %}"""

    TAG = "tag"
    """A block or statement tag: {% for %}"""

    FUNCTION = "function"
    """A function or filter call: {{ x|upper }}"""

    PROPERTY = "property"
    """A variable or attribute lookup: {{ user.name }}"""

    OTHER = "other"
    """Not attributable to a specific construct."""


__all__ = [
    "ErrorItem",
    "ErrorReason",
    "ErrorSeverity",
]
