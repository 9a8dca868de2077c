"""
Sorted container for break markers.

Two insertion paths keep the ordering invariant (time value ascending, start
before end at equal values):

- ``bulk_insert`` appends everything and sorts once, O(n log n)
- ``insert_sorted`` places one marker by binary search, O(n) for the shift

Both use ``marker_sort_key`` so the ordering is defined in one place.
"""

from bisect import bisect_left, bisect_right
from typing import Iterable, Iterator, List

from .models import Marker, MarkerKind, marker_sort_key


class OrderedMarkers:
    """Dynamic array of markers kept in sweep order."""

    def __init__(self) -> None:
        self._markers: List[Marker] = []

    def bulk_insert(self, items: Iterable[Marker]) -> None:
        """Add many markers and restore ordering with a single sort."""
        self._markers.extend(items)
        self._markers.sort(key=marker_sort_key)

    def insert_sorted(self, marker: Marker) -> int:
        """
        Insert one marker at its ordered position and return the index.

        A start marker goes before the first marker whose value is >= its
        value; an end marker goes before the first marker whose value is
        strictly greater. Without such a marker it is appended.
        """
        key = marker_sort_key(marker)
        if marker.kind is MarkerKind.START:
            index = bisect_left(self._markers, key, key=marker_sort_key)
        else:
            index = bisect_right(self._markers, key, key=marker_sort_key)
        self._markers.insert(index, marker)
        return index

    def clear(self) -> None:
        self._markers.clear()

    def snapshot(self) -> tuple[Marker, ...]:
        return tuple(self._markers)

    def is_ordered(self) -> bool:
        """Check the ordering invariant pairwise."""
        return all(
            marker_sort_key(previous) <= marker_sort_key(current)
            for previous, current in zip(self._markers, self._markers[1:])
        )

    def __iter__(self) -> Iterator[Marker]:
        return iter(self._markers)

    def __len__(self) -> int:
        return len(self._markers)
