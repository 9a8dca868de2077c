"""
Domain models for break markers, time ranges and overlap results.
"""

from dataclasses import dataclass
from enum import IntEnum

import pendulum
from pendulum import Duration, Time

from .exceptions import IntervalParseError


class MarkerKind(IntEnum):
    """
    Kind of boundary a marker denotes.

    The numeric values matter: start markers must order before end markers
    that share the same time value.
    """
    START = 1
    END = 2


@dataclass(frozen=True)
class Marker:
    """A single boundary (start or end) of one break."""
    kind: MarkerKind
    value: Time

    def format(self, time_format: str = "HH:mm") -> str:
        return f"{self.value.format(time_format)} - {self.kind.name.title()}"

    def __str__(self) -> str:
        return self.format()


def marker_sort_key(marker: Marker) -> tuple[Time, MarkerKind]:
    """Order markers by time value, then start before end."""
    return marker.value, marker.kind


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable time-of-day range.

    Ordering of start and end is enforced by the parser, not here, so that
    the zero-length default range can exist.
    """
    start: Time
    end: Time

    @classmethod
    def default(cls) -> "TimeRange":
        """Zero-length range at midnight."""
        midnight = pendulum.time(0, 0)
        return cls(start=midnight, end=midnight)

    def duration(self) -> Duration:
        """Return the span between start and end."""
        return self.start.diff(self.end, abs=False)

    def duration_minutes(self) -> float:
        """Return the duration in minutes."""
        return self.duration().total_seconds() / 60

    def format(self, time_format: str = "HH:mm") -> str:
        return f"{self.start.format(time_format)} - {self.end.format(time_format)}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class OverlapResult:
    """The most overlapped range and how many breaks share it."""
    time_range: TimeRange
    overlap_count: int

    def format_message(self, time_format: str = "HH:mm") -> str:
        """
        Format the result for display.
        Format: Most common break time is HH:mm - HH:mm with N people on break.
        """
        return (
            f"Most common break time is {self.time_range.format(time_format)} "
            f"with {self.overlap_count} people on break."
        )


@dataclass(frozen=True)
class LineError:
    """A file line that was skipped during a partial load."""
    line_number: int  # 1-based
    text: str
    error: IntervalParseError
