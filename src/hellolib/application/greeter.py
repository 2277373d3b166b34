"""Greeting use case: format a greeting line and hand it to a text sink."""

from __future__ import annotations

import sys

from ..domain.behaviors import format_greeting
from .ports import TextSink


def say_hello(target: str, *, sink: TextSink | None = None) -> None:
    r"""Write ``Hello <target>!`` and a line terminator to ``sink``.

    The line is emitted with a single ``write`` call and is not flushed.
    When ``sink`` is omitted the process standard output stream is looked
    up at call time, so redirections installed after import (pytest's
    ``capsys``, ``contextlib.redirect_stdout``) are honoured.

    Errors raised by the sink (closed stream, broken pipe, full disk)
    propagate to the caller unchanged.

    Args:
        target: Text to greet, embedded verbatim.
        sink: Destination for the greeting line. Defaults to ``sys.stdout``.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> say_hello("World", sink=buffer)
        >>> buffer.getvalue()
        'Hello World!\n'
    """
    destination: TextSink = sys.stdout if sink is None else sink
    destination.write(format_greeting(target))


__all__ = ["say_hello"]
