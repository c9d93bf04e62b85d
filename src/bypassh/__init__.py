"""OpenSSH-compatible proxy that runs ssh inside a WSL2 distro."""

__version__ = "1.0.0"
