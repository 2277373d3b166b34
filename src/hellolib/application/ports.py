"""Ports the greeting use case and the CLI are written against.

Every port except :class:`TextSink` is a callable Protocol, so plain
functions, bound methods and in-memory doubles all fit without subclassing.
``Config`` is only needed for type checking and is not imported at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class TextSink(Protocol):
    """Where a greeting line goes: ``sys.stdout``, ``io.StringIO``, an open text file."""

    def write(self, text: str, /) -> object: ...


class SayHello(Protocol):
    """Write ``Hello <target>!`` plus newline to ``sink`` (stdout when None)."""

    def __call__(self, target: str, *, sink: TextSink | None = ...) -> None: ...


class GetConfig(Protocol):
    """Merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Path of the packaged defaults file, ``defaultconfig.toml``."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Render ``config`` (or one section of it) for the ``config`` command."""

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section; repeat calls are no-ops."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "SayHello",
    "TextSink",
]
