"""Configuration model for bypassh."""

from pydantic import BaseModel, ConfigDict

from bypassh.constants import DEFAULT_DISTRO, DEFAULT_SSH_PATH, DEFAULT_WSL_PATH


class BypasshConfig(BaseModel):
    """Runtime configuration for bypassh."""

    model_config = ConfigDict(frozen=True)

    distro: str = DEFAULT_DISTRO
    ssh_path: str = DEFAULT_SSH_PATH
    wsl_path: str = DEFAULT_WSL_PATH


DEFAULT_CONFIG = BypasshConfig()
