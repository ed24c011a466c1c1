"""Immutable record describing one problem found in a template.

ErrorRecord turns heterogeneous failure sources (parser errors, evaluation
exceptions, missing-data lookups) into a single classifiable value. A
rendering pass collects many records instead of aborting on the first
problem; consumers filter them by severity, reason, and item without
inspecting raw exception types.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from templateerrors.constants import (
    NULL_OBJECT_TEXT,
    UNKNOWN_LINE,
    UNKNOWN_PROPERTY_MESSAGE,
    UNPRINTABLE_TEXT,
)
from templateerrors.enums import ErrorItem, ErrorReason, ErrorSeverity

from .categories import (
    BasicErrorCategory,
    CustomErrorCategory,
    ErrorCategory,
    category_name,
    parse_category,
)
from .errors import LineAware

__all__ = [
    "ErrorRecord",
    "friendly_object_str",
]

# Default str() of an object that never overrode it, JVM style:
# "com.example.Foo@1a2b3c4".
_IDENTITY_HASH_SUFFIX = re.compile(r"@[0-9a-f]{4,}$")

# Default str() of a Python object without __str__/__repr__:
# "<app.models.Foo object at 0x7f3a2c1b0d90>".
_DEFAULT_OBJECT_REPR = re.compile(r"^<.+ object at 0x[0-9a-fA-F]+>$")

# Keys of the transport encoding produced by to_dict()
_TRANSPORT_KEYS = frozenset(
    (
        "severity",
        "reason",
        "item",
        "message",
        "field_name",
        "line_number",
        "category",
        "category_details",
    )
)


def friendly_object_str(obj: object) -> str:
    """Render an object for user-facing diagnostics.

    Meaningful custom string forms are kept. Identity-hash noise produced
    by a default, un-overridden string conversion is replaced by the
    object's simple type name.

    Args:
        obj: Object to render (None allowed)

    Returns:
        ``"null"`` for None, the type name for default string forms or
        when ``str(obj)`` fails, otherwise ``str(obj)``

    Example:
        >>> friendly_object_str(None)
        'null'
        >>> friendly_object_str(object())
        'object'
        >>> friendly_object_str("custom-value")
        'custom-value'
    """
    if obj is None:
        return NULL_OBJECT_TEXT

    try:
        text = str(obj)
    except Exception:  # pylint: disable=broad-exception-caught
        return type(obj).__name__
    if _IDENTITY_HASH_SUFFIX.search(text) or _DEFAULT_OBJECT_REPR.match(text):
        return type(obj).__name__
    return text


def _rendered_message(error: BaseException) -> str:
    """Short class name and text of an exception: ``"ValueError: bad"``."""
    try:
        text = str(error)
    except Exception:  # pylint: disable=broad-exception-caught
        text = UNPRINTABLE_TEXT
    return f"{type(error).__name__}: {text}"


def _check_transport_types(data: Mapping[str, Any]) -> None:
    """Reject transport values whose JSON type does not match the record."""
    for key in ("severity", "reason", "item", "category", "message"):
        if not isinstance(data[key], str):
            msg = (
                f"Invalid ErrorRecord transport dict: {key} must be str, "
                f"got {type(data[key]).__name__}"
            )
            raise ValueError(msg)
    if data["field_name"] is not None and not isinstance(data["field_name"], str):
        msg = (
            "Invalid ErrorRecord transport dict: field_name must be str or None, "
            f"got {type(data['field_name']).__name__}"
        )
        raise ValueError(msg)
    # bool is an int subclass but never a line number
    line_number = data["line_number"]
    if not isinstance(line_number, int) or isinstance(line_number, bool):
        msg = (
            "Invalid ErrorRecord transport dict: line_number must be int, "
            f"got {type(line_number).__name__}"
        )
        raise ValueError(msg)
    details = data["category_details"]
    if details is None:
        return
    if not isinstance(details, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in details.items()
    ):
        msg = "Invalid ErrorRecord transport dict: category_details must map str to str"
        raise ValueError(msg)


def _line_of(error: BaseException) -> int:
    # Only the immediate error is inspected; __cause__ chains are not walked.
    if isinstance(error, LineAware) and isinstance(error.line_number, int):
        return error.line_number
    return UNKNOWN_LINE


@dataclass(frozen=True, slots=True, repr=False)
class ErrorRecord:
    """One classified, immutable description of a detected template problem.

    Records are built by whichever collaborator detects a problem (parser,
    interpreter, property resolver), usually through one of the ``from_*``
    class methods, and accumulated in detection order for the pass.

    Attributes:
        severity: FATAL (region output unusable) or WARNING
        reason: Coarse classification of the cause
        item: Kind of template construct implicated
        message: Human-readable description, already rendered to text
        field_name: Name of the variable or field implicated (optional)
        line_number: 1-based template line, or UNKNOWN_LINE
        category: Secondary classification, UNKNOWN when not supplied
        category_details: Read-only key/value diagnostics for the category
        cause: Originating failure; dropped by sanitized_copy()

    Example:
        >>> record = ErrorRecord.from_unresolved_property(None, "name", 3)
        >>> record.message
        "Cannot resolve property 'name' in 'null'"
        >>> record.severity
        <ErrorSeverity.WARNING: 'warning'>
    """

    severity: ErrorSeverity
    reason: ErrorReason
    item: ErrorItem = ErrorItem.OTHER
    message: str = ""
    field_name: str | None = None
    line_number: int = UNKNOWN_LINE
    category: ErrorCategory = BasicErrorCategory.UNKNOWN
    category_details: Mapping[str, str] | None = field(default=None, hash=False)
    cause: BaseException | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        """Normalize line number and freeze category details.

        Never raises: a negative line number other than the sentinel
        becomes UNKNOWN_LINE, and category details are copied into a
        read-only mapping so later changes to the caller's dict are not
        observed.
        """
        if self.line_number < 0 and self.line_number != UNKNOWN_LINE:
            object.__setattr__(self, "line_number", UNKNOWN_LINE)
        if self.category_details is not None:
            object.__setattr__(
                self, "category_details", MappingProxyType(dict(self.category_details))
            )

    # ------------------------------------------------------------------
    # Named constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_syntax_failure(cls, error: BaseException) -> ErrorRecord:
        """Record for a parse-time or interpretation-time syntax failure.

        TemplateSyntaxError and InterpretError classify identically; only
        the originating type differs.

        Args:
            error: Line-aware syntax failure

        Returns:
            FATAL / SYNTAX_ERROR record carrying the failure as cause
        """
        return cls(
            severity=ErrorSeverity.FATAL,
            reason=ErrorReason.SYNTAX_ERROR,
            item=ErrorItem.OTHER,
            message=_rendered_message(error),
            field_name=None,
            line_number=_line_of(error),
            cause=error,
        )

    @classmethod
    def from_generic_failure(
        cls, error: BaseException, line_number: int | None = None
    ) -> ErrorRecord:
        """Record for an exception raised while evaluating a template.

        Args:
            error: Any exception
            line_number: Line known to the caller. When omitted, the
                error's own line is used if it is line-aware, otherwise
                UNKNOWN_LINE.

        Returns:
            FATAL / EXCEPTION record carrying the error as cause
        """
        if line_number is not None:
            return cls(
                severity=ErrorSeverity.FATAL,
                reason=ErrorReason.EXCEPTION,
                item=ErrorItem.OTHER,
                message=_rendered_message(error),
                line_number=line_number,
                cause=error,
            )
        return cls(
            severity=ErrorSeverity.FATAL,
            reason=ErrorReason.EXCEPTION,
            item=ErrorItem.OTHER,
            message=_rendered_message(error),
            line_number=_line_of(error),
            category=BasicErrorCategory.UNKNOWN,
            category_details={},
            cause=error,
        )

    @classmethod
    def from_unresolved_property(
        cls, base: object, property_name: str, line_number: int
    ) -> ErrorRecord:
        """Record for a property lookup that could not be satisfied.

        Unresolved properties are common and non-disruptive, so the record
        is a WARNING and carries no cause.

        Args:
            base: Object the lookup was attempted on (None allowed)
            property_name: Name of the missing property
            line_number: Template line of the lookup

        Returns:
            WARNING / UNKNOWN / PROPERTY record
        """
        message = UNKNOWN_PROPERTY_MESSAGE.format(
            name=property_name, base=friendly_object_str(base)
        )
        return cls(
            severity=ErrorSeverity.WARNING,
            reason=ErrorReason.UNKNOWN,
            item=ErrorItem.PROPERTY,
            message=message,
            field_name=property_name,
            line_number=line_number,
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def sanitized_copy(self) -> ErrorRecord:
        """Return a copy without the live cause, safe to serialize.

        Every other attribute is preserved exactly. Idempotent.
        """
        return replace(self, cause=None)

    def to_dict(self) -> dict[str, Any]:
        """Encode the record as a JSON-compatible dict.

        The cause is never included.

        Returns:
            Dict with plain string/int/None values
        """
        details = None if self.category_details is None else dict(self.category_details)
        return {
            "severity": self.severity.value,
            "reason": self.reason.value,
            "item": self.item.value,
            "message": self.message,
            "field_name": self.field_name,
            "line_number": self.line_number,
            "category": category_name(self.category),
            "category_details": details,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ErrorRecord:
        """Decode a dict produced by to_dict().

        Args:
            data: Transport encoding of a record

        Returns:
            Record equal to the sanitized copy of the encoded one

        Raises:
            ValueError: If a key is missing, a value has the wrong type,
                or an enum value is unknown
        """
        missing = _TRANSPORT_KEYS.difference(data)
        if missing:
            msg = f"ErrorRecord transport dict is missing keys: {sorted(missing)}"
            raise ValueError(msg)
        _check_transport_types(data)
        try:
            return cls(
                severity=ErrorSeverity(data["severity"]),
                reason=ErrorReason(data["reason"]),
                item=ErrorItem(data["item"]),
                message=data["message"],
                field_name=data["field_name"],
                line_number=data["line_number"],
                category=parse_category(data["category"]),
                category_details=data["category_details"],
            )
        except ValueError as e:
            msg = f"Invalid ErrorRecord transport dict: {e}"
            raise ValueError(msg) from e

    def __reduce__(self) -> tuple[Any, ...]:
        # MappingProxyType does not pickle; rebuild through __init__.
        details = None if self.category_details is None else dict(self.category_details)
        return (
            type(self),
            (
                self.severity,
                self.reason,
                self.item,
                self.message,
                self.field_name,
                self.line_number,
                self.category,
                details,
                self.cause,
            ),
        )

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message

    def __repr__(self) -> str:
        """Return deterministic debug text for logs.

        Enumerates every attribute except the cause, whose own text may be
        unbounded or vary between runs. Category details are listed in key
        order.
        """
        if isinstance(self.category, CustomErrorCategory):
            category = repr(self.category)
        else:
            category = self.category.name
        details = (
            None
            if self.category_details is None
            else dict(sorted(self.category_details.items()))
        )
        return (
            f"ErrorRecord(severity={self.severity.name}, reason={self.reason.name}, "
            f"message={self.message!r}, field_name={self.field_name!r}, "
            f"line_number={self.line_number}, item={self.item.name}, "
            f"category={category}, category_details={details!r})"
        )
