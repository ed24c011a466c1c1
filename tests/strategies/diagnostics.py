"""Hypothesis strategies for diagnostics domain testing.

Provides reusable, event-emitting strategies for generating diagnostic
data structures: classification enums, categories, category details,
collaborator exceptions, ErrorRecord, and ErrorRecordFormatter.

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - diag_line_kind: Line number classification (unknown|first|body)
    - diag_category_kind: Category variant (basic|custom)
    - diag_details_kind: Category details presence (absent|empty|populated)
    - diag_line_aware_variant: Line-aware exception type (interpret|syntax)
    - diag_record_origin: Constructor used (direct|syntax|generic|generic_line|property)
    - diag_fmt_format: ErrorRecordFormatter output format (rust|simple|json)
    - diag_fmt_sanitize: ErrorRecordFormatter sanitize mode (off|truncate)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from templateerrors.constants import UNKNOWN_LINE
from templateerrors.diagnostics.categories import (
    BasicErrorCategory,
    CustomErrorCategory,
    ErrorCategory,
)
from templateerrors.diagnostics.errors import InterpretError, TemplateSyntaxError
from templateerrors.diagnostics.formatter import ErrorRecordFormatter, OutputFormat
from templateerrors.diagnostics.record import ErrorRecord
from templateerrors.enums import ErrorItem, ErrorReason, ErrorSeverity

_identifiers = st.from_regex(r"[a-z][a-z0-9_]{0,19}", fullmatch=True)
_messages = st.text(max_size=200)

error_severities = st.sampled_from(list(ErrorSeverity))
error_reasons = st.sampled_from(list(ErrorReason))
error_items = st.sampled_from(list(ErrorItem))


@st.composite
def line_numbers(draw: st.DrawFn) -> int:
    """Generate valid line numbers: the sentinel or a non-negative line.

    Events emitted:
    - diag_line_kind={unknown|first|body}: Line number classification
    """
    label = draw(st.sampled_from(["unknown", "first", "body"]))
    event(f"diag_line_kind={label}")
    match label:
        case "unknown":
            return UNKNOWN_LINE
        case "first":
            return 1
        case _:  # body
            return draw(st.integers(min_value=0, max_value=100000))


@st.composite
def error_categories(draw: st.DrawFn) -> ErrorCategory:
    """Generate built-in or custom categories.

    Events emitted:
    - diag_category_kind={basic|custom}: Category variant
    """
    if draw(st.booleans()):
        event("diag_category_kind=basic")
        return draw(st.sampled_from(list(BasicErrorCategory)))
    event("diag_category_kind=custom")
    return CustomErrorCategory(draw(_identifiers))


@st.composite
def category_details(draw: st.DrawFn) -> dict[str, str] | None:
    """Generate absent, empty, or populated category detail mappings.

    Events emitted:
    - diag_details_kind={absent|empty|populated}: Details presence
    """
    label = draw(st.sampled_from(["absent", "empty", "populated"]))
    event(f"diag_details_kind={label}")
    match label:
        case "absent":
            return None
        case "empty":
            return {}
        case _:  # populated
            return draw(
                st.dictionaries(_identifiers, st.text(max_size=50), min_size=1, max_size=5)
            )


@st.composite
def line_aware_errors(draw: st.DrawFn) -> InterpretError:
    """Generate both flavours of line-aware syntax failure.

    Events emitted:
    - diag_line_aware_variant={interpret|syntax}: Exception type
    """
    message = draw(_messages)
    line = draw(line_numbers())
    if draw(st.booleans()):
        event("diag_line_aware_variant=interpret")
        return InterpretError(message, line)
    event("diag_line_aware_variant=syntax")
    return TemplateSyntaxError(message, line, code=draw(st.text(max_size=30)))


plain_errors = st.builds(
    lambda cls, msg: cls(msg),
    st.sampled_from([ValueError, TypeError, KeyError, RuntimeError, ZeroDivisionError]),
    _messages,
)


class _Opaque:
    """Object without a custom string form."""


_base_objects = st.one_of(
    st.none(),
    st.builds(_Opaque),
    st.text(max_size=30),
    st.integers(),
    st.dictionaries(_identifiers, st.integers(), max_size=3),
)


@st.composite
def error_records(draw: st.DrawFn) -> ErrorRecord:
    """Generate ErrorRecord instances through every construction path.

    Bucket-first: draws the constructor first so each path gets an even
    share of examples.

    Events emitted:
    - diag_record_origin={direct|syntax|generic|generic_line|property}
    """
    origin = draw(
        st.sampled_from(["direct", "syntax", "generic", "generic_line", "property"])
    )
    event(f"diag_record_origin={origin}")
    match origin:
        case "direct":
            return ErrorRecord(
                severity=draw(error_severities),
                reason=draw(error_reasons),
                item=draw(error_items),
                message=draw(_messages),
                field_name=draw(st.none() | _identifiers),
                line_number=draw(line_numbers()),
                category=draw(error_categories()),
                category_details=draw(category_details()),
                cause=draw(st.none() | plain_errors),
            )
        case "syntax":
            return ErrorRecord.from_syntax_failure(draw(line_aware_errors()))
        case "generic":
            return ErrorRecord.from_generic_failure(
                draw(st.one_of(plain_errors, line_aware_errors()))
            )
        case "generic_line":
            return ErrorRecord.from_generic_failure(
                draw(st.one_of(plain_errors, line_aware_errors())),
                draw(line_numbers()),
            )
        case _:  # property
            return ErrorRecord.from_unresolved_property(
                draw(_base_objects), draw(_identifiers), draw(line_numbers())
            )


@st.composite
def error_record_formatters(draw: st.DrawFn) -> ErrorRecordFormatter:
    """Generate ErrorRecordFormatter instances with varied configurations.

    Events emitted:
    - diag_fmt_format={rust|simple|json}: Output format
    - diag_fmt_sanitize={off|truncate}: Sanitize mode
    """
    fmt = draw(st.sampled_from(list(OutputFormat)))
    event(f"diag_fmt_format={fmt.value}")

    sanitize = draw(st.booleans())
    event(f"diag_fmt_sanitize={'truncate' if sanitize else 'off'}")

    return ErrorRecordFormatter(
        output_format=fmt,
        sanitize=sanitize,
        color=draw(st.booleans()),
        max_content_length=draw(st.integers(min_value=10, max_value=500)),
    )
