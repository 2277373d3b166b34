"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting line formatting
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_TARGET,
    GREETING_PREFIX,
    GREETING_SUFFIX,
    LINE_TERMINATOR,
    format_greeting,
)
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "DEFAULT_TARGET",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "LINE_TERMINATOR",
    "format_greeting",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
