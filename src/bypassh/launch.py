"""Build the wsl.exe command line that runs ssh inside the distro."""

import logging

from bypassh.models import BypasshConfig, LaunchConfig
from bypassh.paths import translate_paths

log = logging.getLogger("bypassh")


def build_launch_config(config: BypasshConfig, args: list[str]) -> LaunchConfig:
    """Return the launch configuration for forwarding ``args`` to ssh."""
    translated = translate_paths(args, config.distro)
    log.debug("translated args %r -> %r", args, translated)
    return LaunchConfig(
        executable=config.wsl_path,
        argv=[config.wsl_path, "-d", config.distro, config.ssh_path, *translated],
    )
