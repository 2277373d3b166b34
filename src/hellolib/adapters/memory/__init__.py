"""In-memory adapter implementations for testing.

Lightweight stand-ins for every application port: no filesystem, no
stdout, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.greeter` - In-memory greeting sink (GreetingRecorder)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .greeter import GreetingRecorder
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from hellolib.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        SayHello,
        TextSink,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_say_hello: SayHello = GreetingRecorder().say_hello
    _assert_text_sink: TextSink = GreetingRecorder()

__all__ = [
    "GreetingRecorder",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
