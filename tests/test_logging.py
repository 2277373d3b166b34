"""Tests for the logging configuration model.

init_logging itself is exercised through the CLI integration tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from hellolib import __init__conf__
from hellolib.adapters.logging.setup import LoggingConfigModel, _build_runtime_config  # pyright: ignore[reportPrivateUsage]


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces sensible defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_service_defaults_to_package_name(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Without [lib_log_rich].service the package name identifies the service."""
    runtime_config = _build_runtime_config(config_factory({}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Configured service and environment are forwarded."""
    runtime_config = _build_runtime_config(config_factory({"lib_log_rich": {"service": "smoke", "environment": "ci"}}))

    assert runtime_config.service == "smoke"
    assert runtime_config.environment == "ci"
