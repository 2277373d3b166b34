"""Public package surface exposing the greeter, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Application exports: ``say_hello`` use case
- Domain exports: greeting formatting
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greeter import say_hello

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    GREETING_PREFIX,
    GREETING_SUFFIX,
    format_greeting,
)

__all__ = [
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "format_greeting",
    "get_config",
    "print_info",
    "say_hello",
]
