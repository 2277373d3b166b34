"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section holds values of the wrong type or
    shape. Caught at the CLI boundary and reported with ``EX_CONFIG``.

    Example:
        >>> from hellolib.domain.errors import ConfigurationError
        >>> err = ConfigurationError("greeter.default_target must be a string")
        >>> str(err)
        'greeter.default_target must be a string'
    """


__all__ = ["ConfigurationError"]
