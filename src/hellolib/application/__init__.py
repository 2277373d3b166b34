"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.greeter` - The ``say_hello`` use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .greeter import say_hello
from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    SayHello,
    TextSink,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "SayHello",
    "TextSink",
    "say_hello",
]
