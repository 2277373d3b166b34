"""``config`` and ``config-generate-examples``: look at and scaffold the layered configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import generate_examples

from hellolib import __init__conf__
from hellolib.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = click.Choice([member.value for member in OutputFormat], case_sensitive=False)


def _fail(message: object, code: ExitCode) -> NoReturn:
    click.echo(f"\nError: {message}", err=True)
    raise SystemExit(code)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--format", "output_format", type=_FORMAT_CHOICES, default=OutputFormat.HUMAN.value, help="human or json")
@click.option("--section", default=None, metavar="NAME", help="Only show one section, e.g. greeter")
@click.option("--profile", default=None, metavar="NAME", help="Reload under this profile instead of the root one")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration ``hello`` would run with.

    Layers merge as defaults -> app -> host -> user -> dotenv -> env, then the
    root ``--set`` values. An unknown --section exits with 22.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = cli_ctx.config_for_profile(profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": shown_profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            _fail(exc, ExitCode.INVALID_ARGUMENT)


@click.command("config-generate-examples", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--destination",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory receiving one example file per configuration layer",
)
@click.option("--force", is_flag=True, help="Replace example files that already exist")
def cli_config_generate_examples(destination: Path, force: bool) -> None:
    """Write commented example files (including ``[greeter]``) under DESTINATION."""
    extra = {"command": "config-generate-examples", "destination": str(destination), "force": force}
    with lib_log_rich.runtime.bind(job_id="cli-config-generate-examples", extra=extra):
        try:
            written = generate_examples(
                destination=destination,
                slug=__init__conf__.LAYEREDCONF_SLUG,
                vendor=__init__conf__.LAYEREDCONF_VENDOR,
                app=__init__conf__.LAYEREDCONF_APP,
                force=force,
            )
        except OSError as exc:
            logger.error("Could not write example configuration", extra={"error": str(exc)})
            _fail(exc, ExitCode.GENERAL_ERROR)

        logger.info("Example configuration written", extra={"count": len(written)})
        if not written:
            click.echo("\nNo files generated (all already exist). Use --force to overwrite.")
            return
        click.echo(f"\nGenerated {len(written)} example file(s):")
        for path in written:
            click.echo(f"  {path}")


__all__ = ["cli_config", "cli_config_generate_examples"]
