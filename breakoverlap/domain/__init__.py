"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import (
    BreakFileNotFoundError,
    BreakFileReadError,
    BreakOverlapError,
    BulkLoadError,
    IntervalParseError,
    InvalidFormatError,
    InvalidOrderingError,
)
from .interval_parser import IntervalParser, parse_interval
from .models import LineError, Marker, MarkerKind, OverlapResult, TimeRange, marker_sort_key
from .ordered_markers import OrderedMarkers
from .overlap_engine import OverlapEngine

__all__ = [
    "BreakFileNotFoundError",
    "BreakFileReadError",
    "BreakOverlapError",
    "BulkLoadError",
    "IntervalParseError",
    "InvalidFormatError",
    "InvalidOrderingError",
    "IntervalParser",
    "parse_interval",
    "LineError",
    "Marker",
    "MarkerKind",
    "OverlapResult",
    "TimeRange",
    "marker_sort_key",
    "OrderedMarkers",
    "OverlapEngine",
]
