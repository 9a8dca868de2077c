"""
Parsing of fixed-width break time strings such as ``10:0011:15``.

The string holds two concatenated times of day without a separator. The first
half is the start of the break, the second half its end.
"""

import pendulum
from pendulum import Time

from ..config import TimelineConfig
from .exceptions import InvalidFormatError, InvalidOrderingError
from .models import Marker, MarkerKind


def _parse_time(half: str, text: str, time_format: str) -> Time:
    # pendulum tokens match any Unicode digit
    if not half.isascii():
        raise InvalidFormatError(
            f"Time string is invalid. Provided time string: {text}", text
        )
    try:
        parsed = pendulum.from_format(half, time_format)
    except ValueError as exc:
        raise InvalidFormatError(
            f"Time string is invalid. Provided time string: {text}", text
        ) from exc
    return pendulum.time(parsed.hour, parsed.minute, parsed.second, parsed.microsecond)


def parse_interval(text: str, config: TimelineConfig) -> tuple[Marker, Marker]:
    """
    Convert one break time string into a start and an end marker.

    Validation happens in three steps:
    1. The string must have exactly ``config.time_string_length`` characters
    2. Both halves must match ``config.time_format``
    3. Start must be <= end (< end if equal endpoints are not allowed)

    Args:
        text: Break time string, e.g. "10:0011:15"
        config: Parsing policy

    Returns:
        Tuple of (start marker, end marker)

    Raises:
        InvalidFormatError: If the length or either time is invalid
        InvalidOrderingError: If the break ends before it starts
    """
    if len(text) != config.time_string_length:
        raise InvalidFormatError(
            f"Time string must be {config.time_string_length} characters long. "
            f"Provided time string: {text}",
            text,
        )

    start = _parse_time(text[:config.half_length], text, config.time_format)
    end = _parse_time(text[config.half_length:], text, config.time_format)

    if config.allow_equal_endpoints:
        in_order, relation = start <= end, "must not be after"
    else:
        in_order, relation = start < end, "must be before"
    if not in_order:
        raise InvalidOrderingError(
            f"Start time {start.format(config.time_format)} {relation} "
            f"end time {end.format(config.time_format)}. Provided time string: {text}",
            text,
        )

    return Marker(MarkerKind.START, start), Marker(MarkerKind.END, end)


class IntervalParser:
    """Parser bound to one configuration."""

    def __init__(self, config: TimelineConfig):
        self.config = config

    def parse(self, text: str) -> tuple[Marker, Marker]:
        return parse_interval(text, self.config)
