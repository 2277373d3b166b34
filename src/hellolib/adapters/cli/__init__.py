"""Command-line interface for hellolib.

``main`` runs the ``cli`` group and returns an exit code. The group and its
commands are importable from here so callers never reach into submodules.
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_config_generate_examples,
    cli_fail,
    cli_hello,
    cli_info,
    cli_logdemo,
)
from .context import CLIContext, TracebackState, apply_traceback_preferences, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_config_generate_examples",
    "cli_fail",
    "cli_hello",
    "cli_info",
    "cli_logdemo",
    "get_cli_context",
    "main",
]
