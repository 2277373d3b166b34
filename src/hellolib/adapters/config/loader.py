"""Read hellolib's layered configuration through lib_layered_config.

Layers merge lowest first: bundled ``defaultconfig.toml`` -> app -> host ->
user -> dotenv -> environment. A profile adds ``profile/<name>/`` to every
file-based layer path.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from hellolib import __init__conf__

_BUNDLED_DEFAULTS = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are not safe as a directory name.

    Raises:
        ValidationError: A ``ValueError`` subclass from lib_layered_config,
            raised when the name is not usable as a profile directory.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../escape")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        lib_layered_config.domain.errors.ValidationError: profile contains invalid characters: ../escape
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """Location of the ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _BUNDLED_DEFAULTS


# A CLI run asks for at most a root and a subcommand profile.
@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_BUNDLED_DEFAULTS,
        start_dir=start_dir,
    )


class _ConfigLoader:
    """Callable ``GetConfig`` port that remembers what it has read."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration for ``profile``.

        ``start_dir`` is where ``.env`` discovery begins (the cwd when None).
        Results are cached per ``(profile, start_dir)``.

        Example:
            >>> get_config().get("greeter.default_target", default="World")
            'World'
        """
        if profile is not None:
            validate_profile(profile)
        return _read_layers(profile, start_dir)

    def cache_clear(self) -> None:
        """Drop cached results so the next call reads every layer again."""
        _read_layers.cache_clear()


get_config = _ConfigLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
