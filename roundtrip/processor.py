"""
Row processing orchestrator
"""

import logging
from typing import Callable, Optional

from .models import ProcessedRow, RunResult
from .resolver import RoundTripResolver, classify


logger = logging.getLogger(__name__)

# Called with (row index, total rows, identifier) before each row is resolved
ProgressCallback = Callable[[int, int, str], None]


class Processor:
    """
    Resolves the input column of every row in order.

    Rows whose value is neither an IP address nor a hostname are
    set aside as discards. Everything else yields exactly one output
    row, whatever the lookups return.
    """

    def __init__(self, resolver: RoundTripResolver, column: int):
        self.resolver = resolver
        self.column = column

    def run(
        self,
        header: list[str],
        rows: list[list[str]],
        on_row: Optional[ProgressCallback] = None
    ) -> RunResult:
        """
        Process data rows.

        Args:
            header: Header row of the input
            rows: Data rows, all as wide as header
            on_row: Optional callback for progress updates

        Returns:
            RunResult with processed rows in input order
        """
        result = RunResult(header=header, column=self.column)
        result.summary.total = len(rows)

        for index, record in enumerate(rows):
            value = record[self.column].strip()
            if on_row:
                on_row(index, len(rows), value)

            identifier = classify(value)
            if not identifier.is_valid:
                logger.debug("discarding line %d: %r", index + 2, value)
                result.discarded.append(record)
                continue

            resolution = self.resolver.resolve(identifier)
            result.processed.append(ProcessedRow(
                line=index + 2,
                record=record,
                identifier=identifier.value,
                result=resolution
            ))
            result.summary.record(resolution)

        result.summary.discarded = len(result.discarded)
        return result
