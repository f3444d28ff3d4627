"""
App package - Application configuration and core utilities.
Contains settings, logging setup, and the mapping error taxonomy.
"""

from app.config import settings, configure_logging
from app.exceptions import (
    MappingError,
    FormatError,
    MissingReferenceError,
)

__all__ = [
    "settings",
    "configure_logging",
    "MappingError",
    "FormatError",
    "MissingReferenceError",
]
