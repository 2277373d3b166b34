"""Run the ``hellolib`` group and turn its outcome into a process exit code.

Shared by the console script and ``python -m hellolib``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hellolib import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState, apply_traceback_preferences
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hellolib.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` the way ``--traceback`` asks for and return its exit code."""
    verbose = TracebackState.capture().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        # lib_cli_exit_tools.run_cli has no way to pass ``obj``.
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # click answers EPIPE on stdout with SystemExit(1) raised inside the OSError handler.
        if isinstance(exc.__context__, BrokenPipeError):
            return int(ExitCode.BROKEN_PIPE)
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BrokenPipeError:
        return int(ExitCode.BROKEN_PIPE)
    except BaseException as exc:  # noqa: BLE001 - every failure ends here, KeyboardInterrupt included
        return _report_failure(exc)
    return int(ExitCode.SUCCESS)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI once and return the exit code instead of exiting.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the ``lib_cli_exit_tools`` traceback flags back
            the way they were before the run.
        services_factory: Zero-argument callable producing the
            :class:`~hellolib.composition.AppServices` for this run, normally
            ``build_production``.

    Returns:
        ``0`` on success, ``141`` when stdout was closed under us, otherwise
        the code chosen by the failing command or ``lib_cli_exit_tools``.

    Raises:
        ValueError: If ``services_factory`` is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(sys.argv[1:] if argv is None else argv)
    previous = TracebackState.capture()
    try:
        return _run_cli(args, services_factory)
    finally:
        if restore_traceback:
            previous.apply()
        # Worker threads share the runtime with the main thread.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
