"""Top-level CLI: fast paths for -V/-h/-P, otherwise proxy to ssh in WSL."""

import json
import logging
import os
import sys

from bypassh import __version__
from bypassh.config import load_config
from bypassh.constants import FAILURE_EXIT_CODE
from bypassh.launch import build_launch_config
from bypassh.proxy import ProcessProxy, ProxyError

log = logging.getLogger("bypassh")

VERSION_BANNER = f"bypassh {__version__} WSL2 OpenSSH-compatible proxy binary"

HELP_MESSAGE = """\
Usage: {prog} [-options...] destination [command]
Refer to `man ssh` for more information about the ssh arguments.

For bypassh configuration, create "bypassh.json" file in the same location as
the binary with the following fields and its default value:

{{
  // The target WSL2 distro
  "distro":   "Ubuntu",

  // Path to the SSH binary inside WSL
  "ssh_path": "/usr/bin/ssh",

  // Path to the WSL binary in Windows
  "wsl_path": "C:\\\\Windows\\\\system32\\\\wsl.exe"
}}

For most cases, if you are using the default Ubuntu distro you can leave the
configuration as-is. Use `-P` to print the JSON config and any parse error
message to debug your configuration.
"""


def _configure_logging() -> None:
    # stdout belongs to the ssh session, so logs go to stderr only.
    debug = bool(os.environ.get("BYPASSH_DEBUG"))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    """Run bypassh and return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = prog or os.path.basename(sys.argv[0]) or "bypassh"
    _configure_logging()

    # Fast path for OpenSSH binary detection by editors: running `ssh -V`
    # through WSL is slow enough that they give up and pick another binary.
    if args and args[0] == "-V":
        print(VERSION_BANNER)
        return 0
    if args and args[0] in ("-h", "--help"):
        print(HELP_MESSAGE.format(prog=prog), end="")
        return 0

    config, error = load_config()

    if args and args[0] == "-P":
        print("config: " + json.dumps(config.model_dump(), indent="\t"))
        if error is not None:
            print(f"parse error: {error}")
        return 0

    launch = build_launch_config(config, args)
    proxy = ProcessProxy()
    try:
        return proxy.run(launch.executable, launch.argv)
    except ProxyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return FAILURE_EXIT_CODE


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
