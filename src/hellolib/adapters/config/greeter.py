"""Validated access to the ``[greeter]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from hellolib.domain.behaviors import DEFAULT_TARGET
from hellolib.domain.errors import ConfigurationError


class GreeterConfigModel(BaseModel):
    """Pydantic model for the [greeter] config section.

    Example:
        >>> GreeterConfigModel().default_target
        'World'
        >>> GreeterConfigModel(default_target="").default_target
        ''
    """

    default_target: str = DEFAULT_TARGET

    model_config = ConfigDict(extra="ignore", strict=True)


def load_greeter_settings(config: Config) -> GreeterConfigModel:
    """Parse the ``[greeter]`` section of ``config``.

    A missing section yields the defaults.

    Raises:
        ConfigurationError: If the section is not a table or holds values of
            the wrong type.

    Example:
        >>> load_greeter_settings(Config({"greeter": {"default_target": "Moon"}}, {})).default_target
        'Moon'
    """
    raw: object = config.get("greeter", default={})
    if not isinstance(raw, dict):
        raise ConfigurationError(f"[greeter] must be a table, got {type(raw).__name__}")
    try:
        return GreeterConfigModel.model_validate(cast("dict[str, object]", raw))
    except ValidationError as exc:
        details = "; ".join(f"greeter.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [greeter] configuration: {details}") from exc


__all__ = [
    "GreeterConfigModel",
    "load_greeter_settings",
]
