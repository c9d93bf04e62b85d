"""Command-line entry point for bypassh."""

from bypassh.cli.app import entrypoint, main

__all__ = [
    "entrypoint",
    "main",
]
