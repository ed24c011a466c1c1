"""Open-ended category taxonomy for error records.

Categories are a secondary classification independent of the fixed
reason/item axes. The built-in set is closed; callers with their own
taxonomy wrap identifiers in CustomErrorCategory.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

__all__ = [
    "BasicErrorCategory",
    "CustomErrorCategory",
    "ErrorCategory",
    "category_name",
    "parse_category",
]

# Prefix marking a custom category in its transport identifier.
_CUSTOM_PREFIX = "custom:"


class BasicErrorCategory(StrEnum):
    """Built-in error categories.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        UNKNOWN: No more specific category is known (the default)
        CYCLE_DETECTED: Generic recursion cycle during rendering
        FROM_CYCLE_DETECTED: ``{% from %}`` imports form a cycle
        IMPORT_CYCLE_DETECTED: ``{% import %}`` statements form a cycle
        INCLUDE_CYCLE_DETECTED: ``{% include %}`` statements form a cycle
        UNKNOWN_DATE: Date value or pattern could not be interpreted
        UNKNOWN_LOCALE: Locale identifier could not be interpreted
        UNKNOWN_PROPERTY: Property lookup failed on a resolved object
    """

    UNKNOWN = "unknown"
    CYCLE_DETECTED = "cycle_detected"
    FROM_CYCLE_DETECTED = "from_cycle_detected"
    IMPORT_CYCLE_DETECTED = "import_cycle_detected"
    INCLUDE_CYCLE_DETECTED = "include_cycle_detected"
    UNKNOWN_DATE = "unknown_date"
    UNKNOWN_LOCALE = "unknown_locale"
    UNKNOWN_PROPERTY = "unknown_property"


@dataclass(frozen=True, slots=True)
class CustomErrorCategory:
    """Externally supplied category carrying its own identifier.

    Attributes:
        name: Identifier chosen by the supplying collaborator
    """

    name: str

    def __post_init__(self) -> None:
        """Validate the identifier.

        Raises:
            ValueError: If name is empty
        """
        if not self.name:
            msg = "CustomErrorCategory.name must be a non-empty string"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.name


ErrorCategory: TypeAlias = BasicErrorCategory | CustomErrorCategory


def category_name(category: ErrorCategory) -> str:
    """Return the transport identifier of a category.

    Built-in categories use their value; custom categories are prefixed
    with ``custom:`` so they never collide with a built-in name.

    Args:
        category: Category to encode

    Returns:
        Identifier suitable for JSON or log output
    """
    if isinstance(category, CustomErrorCategory):
        return f"{_CUSTOM_PREFIX}{category.name}"
    return category.value


def parse_category(text: str) -> ErrorCategory:
    """Decode a transport identifier produced by category_name().

    Text that is neither a built-in value nor ``custom:``-prefixed is
    treated as a custom category name, so identifiers from newer peers
    survive a round trip.

    Args:
        text: Category identifier

    Returns:
        Matching built-in category, or a CustomErrorCategory

    Raises:
        ValueError: If text is empty or is a bare ``custom:`` prefix
    """
    if text.startswith(_CUSTOM_PREFIX):
        return CustomErrorCategory(text.removeprefix(_CUSTOM_PREFIX))
    try:
        return BasicErrorCategory(text)
    except ValueError:
        return CustomErrorCategory(text)
