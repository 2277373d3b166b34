"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Python values an override string can coerce into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue


def coerce_value(raw: str) -> OverrideValue:
    """Decode ``raw`` as JSON, or keep it as a plain string.

    Examples:
        >>> coerce_value("Moon")
        'Moon'
        >>> coerce_value('"true"')
        'true'
        >>> coerce_value("false")
        False
        >>> coerce_value("7")
        7
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The first ``=`` ends the path; everything after it is the value.

    Raises:
        ValueError: On a missing ``=``, a path without a dot, or an empty
            path component.

    Examples:
        >>> parse_override("greeter.default_target=New York")
        ConfigOverride(section='greeter', key_path=('default_target',), value='New York')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=4096").key_path
        ('payload_limits', 'message_max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert ``override`` into the nested ``tree``, creating tables on the way.

    Raises:
        ValueError: If an earlier override already placed a scalar where a
            table is needed.
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Override conflict at {part!r}: expected a table, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged on top.

    Returns the same instance when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"greeter": {"default_target": "World"}}, {})
        >>> apply_overrides(cfg, ("greeter.default_target=Moon",))["greeter"]["default_target"]
        'Moon'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
