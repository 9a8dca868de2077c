"""
Core business logic for finding the most common break time.

Pure domain logic without I/O: callers hand in text lines, the engine keeps
the markers ordered and sweeps over them.
"""

import logging
from typing import Iterable, List

from ..config import TimelineConfig
from .exceptions import BulkLoadError, IntervalParseError
from .interval_parser import IntervalParser
from .models import LineError, Marker, MarkerKind, OverlapResult, TimeRange
from .ordered_markers import OrderedMarkers

logger = logging.getLogger(__name__)


class OverlapEngine:
    """
    Holds break markers and calculates the range most breaks overlap.

    Algorithm (sweep over markers ordered by value, start before end):
    1. A start marker opens a range: remember its value, increment the count
    2. An end marker closes the range [last start, end] at the current count
    3. A higher count than the best so far replaces the best range
    4. An equal count replaces it only when the range is strictly longer
    5. Decrement the count after evaluating the end marker

    Not thread-safe; serialise access when sharing an instance.
    """

    def __init__(self, config: TimelineConfig):
        self.config = config
        self.parser = IntervalParser(config)
        self._markers = OrderedMarkers()

    @property
    def markers(self) -> tuple[Marker, ...]:
        """Copy of the current markers in sweep order."""
        return self._markers.snapshot()

    @property
    def interval_count(self) -> int:
        return len(self._markers) // 2

    def clear(self) -> None:
        self._markers.clear()

    def load_all(self, lines: Iterable[str]) -> List[LineError]:
        """
        Parse many break time strings and add them in one pass.

        Args:
            lines: Break time strings, one per line

        Returns:
            Lines that were skipped (only when all-or-nothing loading is off)

        Raises:
            BulkLoadError: If all-or-nothing loading is on and a line fails.
                No markers from this call are kept.
        """
        collected: List[Marker] = []
        line_errors: List[LineError] = []

        for line_number, line in enumerate(lines, 1):
            try:
                collected.extend(self.parser.parse(line))
            except IntervalParseError as exc:
                if self.config.all_or_nothing_file_load:
                    raise BulkLoadError(line_number, exc) from exc
                logger.warning("Skipping line %d: %s", line_number, exc)
                line_errors.append(LineError(line_number=line_number, text=line, error=exc))

        self._markers.bulk_insert(collected)
        logger.debug(
            "Loaded %d break times, skipped %d lines",
            len(collected) // 2,
            len(line_errors),
        )
        return line_errors

    def add_interval(self, text: str) -> None:
        """
        Parse one break time string and insert its markers in order.

        Raises:
            IntervalParseError: If the string is invalid; markers are unchanged
        """
        start, end = self.parser.parse(text)
        self._markers.insert_sorted(start)
        self._markers.insert_sorted(end)
        logger.debug("Added break %s", text)

    def most_overlapped(self) -> OverlapResult:
        """
        Find the range during which the most breaks overlap.

        Returns:
            OverlapResult with the range and the number of overlapping breaks.
            Without any breaks the range is 00:00 - 00:00 with count 0.
        """
        open_count = 0
        best_count = 0
        best_range = TimeRange.default()
        pending_start = best_range.start

        for marker in self._markers:
            if marker.kind is MarkerKind.START:
                pending_start = marker.value
                open_count += 1
                continue

            candidate = TimeRange(start=pending_start, end=marker.value)
            if open_count > best_count:
                best_range = candidate
                best_count = open_count
            elif open_count == best_count and candidate.duration() > best_range.duration():
                best_range = candidate

            open_count -= 1

        return OverlapResult(time_range=best_range, overlap_count=best_count)
