"""
Tests for the BreakService orchestration layer.
"""

from pathlib import Path

import pytest

from breakoverlap.config import TimelineConfig
from breakoverlap.domain.exceptions import (
    BreakFileNotFoundError,
    BreakFileReadError,
    BulkLoadError,
    InvalidFormatError,
)
from breakoverlap.domain.overlap_engine import OverlapEngine
from breakoverlap.services.break_service import BreakService, read_break_lines


def _build_service(**config_values) -> BreakService:
    return BreakService(OverlapEngine(TimelineConfig(**config_values)))


def _write_breaks(tmp_path: Path, lines) -> Path:
    path = tmp_path / "breaks.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_read_break_lines_strips_line_endings(tmp_path):
    """Only the line terminator is removed from each line."""
    path = tmp_path / "breaks.txt"
    path.write_bytes(b"10:0011:00\r\n10:3012:00\n 10:4511:15")

    assert read_break_lines(path) == ["10:0011:00", "10:3012:00", " 10:4511:15"]


def test_missing_file_fails_before_parsing(tmp_path):
    """A missing file is reported as its own error."""
    service = _build_service()
    missing = tmp_path / "missing.txt"

    with pytest.raises(BreakFileNotFoundError) as exc_info:
        service.load_file(missing)

    assert exc_info.value.path == missing
    assert isinstance(exc_info.value, FileNotFoundError)
    assert service.engine.markers == ()


def test_undecodable_file_is_a_read_error(tmp_path):
    """A file that is not valid UTF-8 is reported as unreadable."""
    path = tmp_path / "breaks.txt"
    path.write_bytes(b"\xff\xfe10:0011:00\n")
    service = _build_service()

    with pytest.raises(BreakFileReadError) as exc_info:
        service.load_file(path)

    assert exc_info.value.path == path
    assert isinstance(exc_info.value.cause, UnicodeDecodeError)
    assert service.engine.markers == ()


def test_load_file_computes_most_common_break(tmp_path):
    """End-to-end load should yield the shared range."""
    path = _write_breaks(tmp_path, ["10:0011:00", "10:3012:00", "10:4511:15"])
    service = _build_service()

    errors = service.load_file(path)

    assert errors == []
    assert service.format_result(service.current_result()) == (
        "Most common break time is 10:45 - 11:00 with 3 people on break."
    )


def test_partial_file_load_reports_skipped_lines(tmp_path):
    """One malformed line among N valid ones is skipped and reported."""
    valid = ["10:0011:00", "10:3012:00", "10:4511:15", "13:0014:00"]
    path = _write_breaks(tmp_path, valid[:2] + ["10:00"] + valid[2:])
    service = _build_service()

    errors = service.load_file(path)

    assert [error.line_number for error in errors] == [3]
    assert isinstance(errors[0].error, InvalidFormatError)
    assert len(service.engine.markers) == 2 * len(valid)


def test_all_or_nothing_file_load_adds_nothing(tmp_path):
    """One malformed line discards the whole file."""
    valid = ["10:0011:00", "10:3012:00", "10:4511:15", "13:0014:00"]
    path = _write_breaks(tmp_path, valid[:2] + ["10:00"] + valid[2:])
    service = _build_service(all_or_nothing_file_load=True)

    with pytest.raises(BulkLoadError) as exc_info:
        service.load_file(path)

    assert exc_info.value.line_number == 3
    assert service.engine.markers == ()


def test_add_break_returns_updated_result():
    """Each added break yields the new most common break time."""
    service = _build_service()

    first = service.add_break("10:0011:00")
    second = service.add_break("10:3012:00")

    assert first.overlap_count == 1
    assert second.overlap_count == 2
    assert str(second.time_range) == "10:30 - 11:00"


def test_format_result_uses_configured_pattern():
    """Results render with the configured time pattern."""
    service = _build_service(time_format="HH:mm:ss", time_string_length=16)
    result = service.add_break("10:00:0010:00:30")

    assert service.format_result(result) == (
        "Most common break time is 10:00:00 - 10:00:30 with 1 people on break."
    )
