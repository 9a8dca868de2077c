"""
Convenience entry point for running breakoverlap as a module.

Usage: python -m breakoverlap [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
