"""Child process launch model."""

from dataclasses import dataclass


@dataclass
class LaunchConfig:
    """How to launch the ssh client inside the distro."""

    executable: str
    argv: list[str]
