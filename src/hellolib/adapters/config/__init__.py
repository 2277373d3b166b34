"""Configuration adapter - loading, display, overrides and greeter settings.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.greeter` - Validated ``[greeter]`` section
"""

from __future__ import annotations

from .display import display_config
from .greeter import GreeterConfigModel, load_greeter_settings
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "GreeterConfigModel",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeter_settings",
]
