"""Logging demonstration CLI command."""

from __future__ import annotations

import lib_log_rich
import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS


@click.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--theme", default="classic", help="Logging theme to preview")
def cli_logdemo(theme: str) -> None:
    """Preview lib_log_rich console output with the given theme."""
    # logdemo() needs an uninitialised runtime.
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()

    result = lib_log_rich.logdemo(theme=theme)
    click.echo(f"\nLog demo completed (theme: {result.theme})")


__all__ = ["cli_logdemo"]
