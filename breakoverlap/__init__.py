"""
breakoverlap - find the time of day most breaks overlap.
"""

__version__ = "1.0.0"
