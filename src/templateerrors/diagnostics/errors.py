"""Exception types raised by template collaborators.

The parser and interpreter raise these; the point of detection converts
them into ErrorRecord values instead of letting them propagate.
FatalTemplateErrorsError is the one exception raised on purpose after
collection, when a caller decides fatal records must stop processing.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from templateerrors.constants import UNKNOWN_LINE
from templateerrors.enums import ErrorSeverity

if TYPE_CHECKING:
    from .record import ErrorRecord

__all__ = [
    "FatalTemplateErrorsError",
    "InterpretError",
    "LineAware",
    "TemplateSyntaxError",
]


@runtime_checkable
class LineAware(Protocol):
    """Protocol for failures that know the template line they occurred on.

    Any object with an integer ``line_number`` attribute satisfies it,
    including exceptions from third-party parsers.
    """

    line_number: int


class InterpretError(Exception):
    """Failure while interpreting a template.

    Attributes:
        line_number: 1-based template line, or UNKNOWN_LINE
    """

    def __init__(self, message: str, line_number: int = UNKNOWN_LINE) -> None:
        """Initialize InterpretError.

        Args:
            message: Human-readable error message
            line_number: Template line where the failure occurred
        """
        super().__init__(message)
        self.line_number = line_number


class TemplateSyntaxError(InterpretError):
    """Template source could not be parsed.

    Parser continues after syntax errors; each one becomes a FATAL record
    for the region it affects.

    Attributes:
        code: The offending template text (empty if not captured)
    """

    def __init__(
        self, message: str, line_number: int = UNKNOWN_LINE, *, code: str = ""
    ) -> None:
        """Initialize TemplateSyntaxError.

        Args:
            message: Human-readable error message
            line_number: Template line where the text starts
            code: The template text that failed to parse
        """
        super().__init__(message, line_number)
        self.code = code


class FatalTemplateErrorsError(Exception):
    """Rendering produced FATAL records and the caller chose to stop.

    Example:
        >>> errors = ErrorCollection()
        >>> errors.add(ErrorRecord.from_syntax_failure(exc))
        >>> errors.raise_if_fatal(template="{{ broken")
        Traceback (most recent call last):
        FatalTemplateErrorsError: TemplateSyntaxError: unexpected end of template

    Attributes:
        template: Template source that was being rendered (may be None)
        errors: All records collected for the pass, in detection order
    """

    def __init__(self, template: str | None, errors: Iterable[ErrorRecord] = ()) -> None:
        """Initialize FatalTemplateErrorsError.

        Args:
            template: Template source being rendered
            errors: Records collected for the pass
        """
        self.template = template
        self.errors: tuple[ErrorRecord, ...] = tuple(errors)
        super().__init__(self._first_fatal_message())

    def _first_fatal_message(self) -> str:
        for error in self.errors:
            if error.severity is ErrorSeverity.FATAL:
                return error.message
        return "Template rendering failed"
