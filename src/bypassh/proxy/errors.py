"""Errors raised while proxying the ssh child process."""


class ProxyError(Exception):
    """Base class for fatal proxy failures."""


class SpawnError(ProxyError):
    """The child executable could not be launched."""


class WaitError(ProxyError):
    """Waiting on the child failed for a reason other than its exit."""
