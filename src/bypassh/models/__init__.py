"""Model package for bypassh."""

from bypassh.models.bypassh_config import DEFAULT_CONFIG, BypasshConfig
from bypassh.models.launch_config import LaunchConfig

__all__ = [
    "BypasshConfig",
    "DEFAULT_CONFIG",
    "LaunchConfig",
]
