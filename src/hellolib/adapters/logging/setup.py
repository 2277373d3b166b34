"""Start the lib_log_rich runtime from the ``[lib_log_rich]`` configuration section.

Log records go to stderr, so ``hellolib hello`` keeps stdout for the greeting.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hellolib import __init__conf__


class LoggingConfigModel(BaseModel):
    """``[lib_log_rich]`` as written in the config files.

    Keys other than ``service`` and ``environment`` pass straight through to
    ``RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").model_extra
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Turn the section into a ``RuntimeConfig``, naming the service ``hellolib`` by default."""
    section: dict[str, Any] = dict(config.get("lib_log_rich", default={}) or {})
    settings = LoggingConfigModel.model_validate(section)
    passthrough = settings.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Bring up logging for this process unless it is already running.

    ``.env`` files are honoured for ``LOG_*`` variables, and records from the
    stdlib ``logging`` module are routed into the runtime.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
