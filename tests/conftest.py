"""Fixtures shared by the greeter, CLI and module-entry tests.

Most CLI tests build services with :func:`services_for`: a plain dict stands in
for the layered configuration and greetings land in :func:`recorder` instead
of on stdout. Tests that must see the real stdout wiring use
:func:`production_factory` or a subprocess.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from hellolib.adapters.memory import GreetingRecorder
    from hellolib.composition import AppServices

    ServicesFor = Callable[..., Callable[[], AppServices]]

_ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def _reset_traceback_flags() -> None:
    from hellolib.adapters.cli import TracebackState

    lib_cli_exit_tools.reset_config()
    TracebackState(enabled=False, force_color=False).apply()


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh CliRunner; ``result.stdout`` excludes log records written to stderr."""
    return CliRunner()


@pytest.fixture
def recorder() -> GreetingRecorder:
    from hellolib.adapters.memory import GreetingRecorder

    return GreetingRecorder()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    from hellolib.composition import build_production

    return build_production


@pytest.fixture
def testing_factory(recorder: GreetingRecorder) -> Callable[[], AppServices]:
    """In-memory config and display, greetings into ``recorder``, real logging.

    Commands bind log context, which needs the lib_log_rich runtime.
    """
    from hellolib.adapters.logging import init_logging
    from hellolib.composition import build_testing

    services = replace(build_testing(recorder=recorder), init_logging=init_logging)
    return lambda: services


@pytest.fixture
def services_for(clear_config_cache: None, recorder: GreetingRecorder) -> ServicesFor:
    """Build a services factory around ``config_data``.

    Passing a ``profiles`` list records the profile of every configuration
    load, so tests can tell a root ``--profile`` from a subcommand reload.

    Example:
        def test_default_target(cli_runner, services_for, recorder) -> None:
            factory = services_for({"greeter": {"default_target": "Moon"}})
            cli_runner.invoke(cli, ["hello"], obj=factory)
            assert recorder.output == "Hello Moon!\\n"
    """
    from hellolib.composition import build_production

    def _build(config_data: dict[str, Any], profiles: list[str | None] | None = None) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            if profiles is not None:
                profiles.append(profile)
            return config

        services = replace(build_production(), get_config=_get_config, say_hello=recorder.say_hello)
        return lambda: services

    return _build


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Wrap a dict in a real Config without touching the filesystem."""
    return lambda data: Config(data, {})


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI_ESCAPE.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start and end the test with tracebacks off and library defaults restored."""
    _reset_traceback_flags()
    try:
        yield
    finally:
        _reset_traceback_flags()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Forget cached layered configuration before the test.

    Nothing is cleared afterwards: a test may have monkeypatched the loader
    away, taking ``cache_clear`` with it.
    """
    from hellolib.adapters.config import loader

    loader.get_config.cache_clear()
    yield
