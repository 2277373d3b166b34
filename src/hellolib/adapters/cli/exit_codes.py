"""Exit codes returned by the ``hellolib`` CLI."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes, following errno and sysexits.h where they apply.

    * ``22``: EINVAL, an unknown ``config --section``
    * ``78``: EX_CONFIG, an invalid ``[greeter]`` section
    * ``141``: 128 + SIGPIPE, stdout closed before the greeting was written

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
        >>> ExitCode(141).name
        'BROKEN_PIPE'
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    BROKEN_PIPE = 141


__all__ = ["ExitCode"]
