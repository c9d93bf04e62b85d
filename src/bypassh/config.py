"""Configuration loading for bypassh.

The configuration lives in ``bypassh.json`` next to the binary. Loading never
fails hard: any problem yields the default configuration together with the
error, which is only surfaced through ``bypassh -P``.
"""

import logging
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError

from bypassh.constants import CONFIG_FILENAME
from bypassh.models import DEFAULT_CONFIG, BypasshConfig

log = logging.getLogger("bypassh")


class ConfigParseError(Exception):
    """Raised when bypassh.json cannot be read or decoded."""


class _FileConfig(BaseModel):
    """Fields as they appear in bypassh.json; unset or empty means default."""

    distro: str | None = None
    ssh_path: str | None = None
    wsl_path: str | None = None


def binary_dir() -> Path:
    """Return the directory holding the running bypassh binary."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent


def parse_config(path: Path, default: BypasshConfig = DEFAULT_CONFIG) -> BypasshConfig:
    """Parse ``path`` on top of ``default``.

    Raises:
        ConfigParseError: if the file is missing, unreadable, or malformed.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigParseError(f"cannot read {path}: {e.strerror or e}") from e

    try:
        fconf = _FileConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigParseError(f"invalid {path}: {e}") from e

    overrides = {key: value for key, value in fconf.model_dump().items() if value}
    return default.model_copy(update=overrides)


def load_config(config_dir: Path | None = None) -> tuple[BypasshConfig, ConfigParseError | None]:
    """Load the configuration, falling back to defaults on any error."""
    path = (config_dir if config_dir is not None else binary_dir()) / CONFIG_FILENAME
    try:
        config = parse_config(path)
    except ConfigParseError as e:
        log.debug("using default config: %s", e)
        return DEFAULT_CONFIG, e
    log.debug("loaded config from %s", path)
    return config, None
