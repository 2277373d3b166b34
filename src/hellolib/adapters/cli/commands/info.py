"""``hello`` plus the two diagnostics around it, ``info`` and ``fail``."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hellolib import __init__conf__
from hellolib.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _target_or_default(cli_ctx: CLIContext, target: str | None) -> str:
    """Pick the explicit TARGET, else ``greeter.default_target``.

    An invalid ``[greeter]`` section ends the run with ``CONFIG_ERROR`` (78).
    """
    if target is not None:
        return target
    try:
        settings = cli_ctx.greeter_settings()
    except ConfigurationError as exc:
        logger.error("Cannot pick a default target", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return settings.default_target


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("target", required=False)
@click.pass_context
def cli_hello(ctx: click.Context, target: str | None) -> None:
    """Write ``Hello TARGET!`` to stdout.

    TARGET may be empty or contain spaces; it is printed as given. Leave it
    out to greet ``greeter.default_target`` (``World`` unless configured).
    """
    cli_ctx = get_cli_context(ctx)
    greeted = _target_or_default(cli_ctx, target)
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello", "profile": cli_ctx.profile}):
        logger.debug("Greeting", extra={"target": greeted, "from_config": target is None})
        cli_ctx.services.say_hello(greeted)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version and install metadata of hellolib."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise ``RuntimeError`` so the error and ``--traceback`` output can be checked."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Failing on purpose")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_hello", "cli_info"]
