"""Ordered accumulator for the records of one rendering pass.

Collaborators append records as they detect problems; the caller reads
them back in detection order and decides what FATAL records mean for
the pass. No sorting, de-duplication, or retry policy lives here.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from templateerrors.constants import LOG_TRUNCATE_DEBUG, LOG_TRUNCATE_WARNING
from templateerrors.enums import ErrorItem, ErrorReason, ErrorSeverity

from .errors import FatalTemplateErrorsError
from .record import ErrorRecord

__all__ = ["ErrorCollection"]

logger = logging.getLogger(__name__)


class ErrorCollection:
    """Records collected during a single parse/render pass.

    Thread Safety:
        Appends and snapshots are guarded by a lock, so evaluators running
        in parallel may share one collection. Order is the order in which
        add() calls acquired the lock.

    Example:
        >>> errors = ErrorCollection()
        >>> errors.add(ErrorRecord.from_unresolved_property(None, "name", 3))
        >>> len(errors), errors.has_fatal
        (1, False)
    """

    __slots__ = ("_lock", "_records")

    def __init__(self, records: Iterable[ErrorRecord] = ()) -> None:
        """Initialize ErrorCollection.

        Args:
            records: Records to start with, in detection order. Each is
                logged as if passed to add().
        """
        self._lock = threading.Lock()
        self._records: list[ErrorRecord] = []
        self.extend(records)

    def add(self, record: ErrorRecord) -> None:
        """Append a record and log it.

        FATAL records are logged at WARNING level, everything else at DEBUG.

        Args:
            record: Record to append
        """
        with self._lock:
            self._records.append(record)

        if record.severity is ErrorSeverity.FATAL:
            logger.warning(
                "Fatal template error at line %d (%s): %s",
                record.line_number,
                record.reason,
                record.message[:LOG_TRUNCATE_WARNING],
            )
        else:
            logger.debug(
                "Template warning at line %d (%s/%s): %s",
                record.line_number,
                record.reason,
                record.item,
                record.message[:LOG_TRUNCATE_DEBUG],
            )

    def extend(self, records: Iterable[ErrorRecord]) -> None:
        """Append several records in order.

        Args:
            records: Records to append
        """
        for record in records:
            self.add(record)

    @property
    def records(self) -> tuple[ErrorRecord, ...]:
        """Snapshot of all records in detection order."""
        with self._lock:
            return tuple(self._records)

    @property
    def fatal(self) -> tuple[ErrorRecord, ...]:
        """Records with FATAL severity."""
        return self.filter(severity=ErrorSeverity.FATAL)

    @property
    def warnings(self) -> tuple[ErrorRecord, ...]:
        """Records with WARNING severity."""
        return self.filter(severity=ErrorSeverity.WARNING)

    @property
    def has_fatal(self) -> bool:
        """True if any FATAL record was collected."""
        return any(r.severity is ErrorSeverity.FATAL for r in self.records)

    def filter(
        self,
        *,
        severity: ErrorSeverity | None = None,
        reason: ErrorReason | None = None,
        item: ErrorItem | None = None,
    ) -> tuple[ErrorRecord, ...]:
        """Select records matching every given classification.

        Args:
            severity: Required severity (None matches any)
            reason: Required reason (None matches any)
            item: Required item (None matches any)

        Returns:
            Matching records in detection order
        """
        return tuple(
            r
            for r in self.records
            if (severity is None or r.severity == severity)
            and (reason is None or r.reason == reason)
            and (item is None or r.item == item)
        )

    def sanitized(self) -> tuple[ErrorRecord, ...]:
        """Transport-safe copies of all records, causes removed."""
        return tuple(r.sanitized_copy() for r in self.records)

    def raise_if_fatal(self, template: str | None = None) -> None:
        """Stop the pass if any FATAL record was collected.

        Args:
            template: Template source to attach to the exception

        Raises:
            FatalTemplateErrorsError: If a FATAL record is present
        """
        records = self.records
        if any(r.severity is ErrorSeverity.FATAL for r in records):
            raise FatalTemplateErrorsError(template, records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[ErrorRecord]:
        return iter(self.records)

    def __bool__(self) -> bool:
        return len(self) > 0
