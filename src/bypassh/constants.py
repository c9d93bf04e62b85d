"""Shared constants for bypassh."""

DEFAULT_DISTRO = "Ubuntu"
DEFAULT_SSH_PATH = "/usr/bin/ssh"
DEFAULT_WSL_PATH = "C:\\Windows\\system32\\wsl.exe"

CONFIG_FILENAME = "bypassh.json"

# UNC hosts under which Windows exposes a distro's root filesystem.
SHARE_HOSTS = ("wsl$", "wsl.localhost")

# Exit code used when the child could not be started or waited on.
FAILURE_EXIT_CODE = 1
