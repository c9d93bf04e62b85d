"""Child process proxy: spawn, forward interrupts, propagate the exit code."""

from bypassh.proxy.errors import ProxyError, SpawnError, WaitError
from bypassh.proxy.interrupt import InterruptForwarder, deliver_interrupt
from bypassh.proxy.process import ProcessProxy, ProxyState, exit_code_from_returncode

__all__ = [
    "InterruptForwarder",
    "ProcessProxy",
    "ProxyError",
    "ProxyState",
    "SpawnError",
    "WaitError",
    "deliver_interrupt",
    "exit_code_from_returncode",
]
