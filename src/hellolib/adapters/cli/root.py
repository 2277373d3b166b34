"""The ``hellolib`` command group.

The group resolves configuration for the whole run (``--profile`` first,
then every ``--set``), starts logging from it and leaves a
:class:`~hellolib.adapters.cli.context.CLIContext` behind for the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hellolib import __init__conf__
from hellolib.adapters.config.overrides import apply_overrides

from .commands import (
    cli_config,
    cli_config_generate_examples,
    cli_fail,
    cli_hello,
    cli_info,
    cli_logdemo,
)
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from hellolib.composition import AppServices

_VERSION_MESSAGE = f"{__init__conf__.shell_command} version {__init__conf__.version}"


def _load_run_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read configuration for ``profile`` and layer the ``--set`` values on top.

    Raises:
        click.UsageError: If an override is malformed or collides with a
            non-table value.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__init__conf__.version, prog_name=__init__conf__.shell_command, message=_VERSION_MESSAGE)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, metavar="NAME", help="Read configuration from the profile/NAME layer directories")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting for this run, e.g. greeter.default_target=Moon (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration and logging once, then hand over to the subcommand.

    Callers pass a zero-argument services factory as ``obj``; afterwards
    ``ctx.obj`` holds the run's :class:`CLIContext`.
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _load_run_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        CLIContext(traceback=traceback, config=config, services=services, profile=profile, set_overrides=set_overrides),
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_info, cli_hello, cli_fail, cli_config, cli_config_generate_examples, cli_logdemo):
    cli.add_command(_command)
del _command


__all__ = ["cli"]
