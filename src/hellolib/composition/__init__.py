"""Composition root: decides which adapter backs each port.

``build_production`` greets on the real stdout and reads the layered
configuration; ``build_testing`` keeps everything in memory and collects
greetings in a :class:`~hellolib.adapters.memory.GreetingRecorder`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging
from ..application.greeter import say_hello

if TYPE_CHECKING:
    from ..adapters.memory.greeter import GreetingRecorder
    from ..application.ports import DisplayConfig, GetConfig, GetDefaultConfigPath, InitLogging, SayHello

    # pyright checks the production adapters against their ports here.
    _production_ports: tuple[GetConfig, GetDefaultConfigPath, DisplayConfig, InitLogging, SayHello] = (
        get_config,
        get_default_config_path,
        display_config,
        init_logging,
        say_hello,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, handed to the CLI through ``ctx.obj``."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    say_hello: SayHello


def build_production() -> AppServices:
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        say_hello=say_hello,
    )


def build_testing(*, recorder: GreetingRecorder | None = None) -> AppServices:
    """In-memory services; greetings go to ``recorder`` (a new one if omitted)."""
    from ..adapters import memory

    sink = memory.GreetingRecorder() if recorder is None else recorder
    return AppServices(
        get_config=memory.get_config_in_memory,
        get_default_config_path=memory.get_default_config_path_in_memory,
        display_config=memory.display_config_in_memory,
        init_logging=memory.init_logging_in_memory,
        say_hello=sink.say_hello,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
