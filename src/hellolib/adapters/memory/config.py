"""Configuration ports backed by plain values instead of the filesystem."""

from __future__ import annotations

from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat

#: Path reported by :func:`get_default_config_path_in_memory`; never read.
IN_MEMORY_DEFAULT_CONFIG_PATH = Path("in-memory") / "hellolib" / "defaultconfig.toml"


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return a configuration without any sections.

    Every greeter setting therefore takes its built-in default.

    Example:
        >>> get_config_in_memory(profile="staging").as_dict()
        {}
    """
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    return IN_MEMORY_DEFAULT_CONFIG_PATH


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept a display request and print nothing."""


__all__ = [
    "IN_MEMORY_DEFAULT_CONFIG_PATH",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
