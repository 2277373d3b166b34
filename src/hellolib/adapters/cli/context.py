"""Per-invocation CLI state and the shared traceback switch.

The root group builds one :class:`CLIContext` per run. Subcommands read the
already-merged configuration from it, ask it for the validated greeter
settings, or reload it under another profile.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from hellolib.adapters.config.greeter import GreeterConfigModel, load_greeter_settings
from hellolib.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from hellolib.composition import AppServices


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools`` flags driven by ``--traceback``."""

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        config = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    def apply(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


@dataclass(slots=True)
class CLIContext:
    """What the root group learned before dispatching to a subcommand.

    Attributes:
        traceback: ``--traceback`` as given on the root group.
        config: Configuration after the root ``--profile`` and ``--set``.
        services: Port implementations for this run.
        profile: Root ``--profile`` value, if any.
        set_overrides: Raw root ``--set`` strings, replayed on reloads.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def greeter_settings(self) -> GreeterConfigModel:
        """Validate the ``[greeter]`` section of :attr:`config`.

        Raises:
            ConfigurationError: If the section does not validate.
        """
        return load_greeter_settings(self.config)

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the config for ``profile`` together with the profile it came from.

        Without a profile the root config is reused. With one, configuration is
        loaded again and the root ``--set`` overrides are replayed on top.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def store_cli_context(ctx: click.Context, cli_ctx: CLIContext) -> CLIContext:
    """Put ``cli_ctx`` in ``ctx.obj``, replacing the services factory."""
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root group.

    Raises:
        RuntimeError: When a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for ``lib_cli_exit_tools``.

    Example:
        >>> previous = TracebackState.capture()
        >>> apply_traceback_preferences(True)
        >>> TracebackState.capture()
        TracebackState(enabled=True, force_color=True)
        >>> previous.apply()
    """
    TracebackState(bool(enabled), bool(enabled)).apply()


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "store_cli_context",
]
