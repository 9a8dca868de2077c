"""
Application service that connects break time sources to the overlap engine.

The engine never touches the filesystem; this service reads files, hands the
lines over and formats results. It keeps the CLI thin and lets tests use the
engine directly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..domain.exceptions import BreakFileNotFoundError, BreakFileReadError
from ..domain.models import LineError, OverlapResult
from ..domain.overlap_engine import OverlapEngine

logger = logging.getLogger(__name__)


def read_break_lines(path: Path) -> List[str]:
    """
    Read break time strings from a text file, one per line.

    Raises:
        BreakFileNotFoundError: If the file does not exist
        BreakFileReadError: If the file cannot be read or is not valid UTF-8
    """
    if not path.is_file():
        raise BreakFileNotFoundError(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as exc:
        raise BreakFileReadError(path, exc) from exc


class BreakService:
    """Orchestrates loading break times and querying the engine."""

    def __init__(self, engine: OverlapEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> OverlapEngine:
        return self._engine

    def load_file(self, path: Path) -> List[LineError]:
        """
        Load break times from a file into the engine.

        Returns:
            Skipped lines (partial loading only)

        Raises:
            BreakFileNotFoundError: Before any parsing, if the file is missing
            BreakFileReadError: If the file cannot be read or decoded
            BulkLoadError: If all-or-nothing loading is on and a line fails
        """
        lines = read_break_lines(path)
        logger.info("Read %d lines from %s", len(lines), path)
        return self.load_lines(lines)

    def load_lines(self, lines: Iterable[str]) -> List[LineError]:
        return self._engine.load_all(lines)

    def add_break(self, text: str) -> OverlapResult:
        """Add one break and return the updated most common break time."""
        self._engine.add_interval(text)
        return self._engine.most_overlapped()

    def current_result(self) -> OverlapResult:
        return self._engine.most_overlapped()

    def format_result(self, result: OverlapResult) -> str:
        return result.format_message(self._engine.config.time_format)
