"""
Core settings and utilities.
"""

from .config import Settings, OutputFormat, configure_logging

__all__ = [
    "Settings",
    "OutputFormat",
    "configure_logging",
]
