"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

GREETING_PREFIX = "Hello "
GREETING_SUFFIX = "!"
LINE_TERMINATOR = "\n"
DEFAULT_TARGET = "World"


def format_greeting(target: str) -> str:
    r"""Return the greeting line for ``target``, line terminator included.

    The target is embedded verbatim: no validation, escaping or trimming.
    Empty strings and embedded whitespace or control characters pass
    through unchanged.

    Args:
        target: Text to greet.

    Returns:
        ``"Hello <target>!\n"``.

    Example:
        >>> format_greeting("World")
        'Hello World!\n'
        >>> format_greeting("")
        'Hello !\n'
        >>> format_greeting("New York")
        'Hello New York!\n'
    """
    return f"{GREETING_PREFIX}{target}{GREETING_SUFFIX}{LINE_TERMINATOR}"


__all__ = [
    "DEFAULT_TARGET",
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "LINE_TERMINATOR",
    "format_greeting",
]
