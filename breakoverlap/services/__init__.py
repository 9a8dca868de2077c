"""
Service layer helpers that orchestrate input sources and domain logic.
"""

from .break_service import BreakService, read_break_lines

__all__ = ["BreakService", "read_break_lines"]
