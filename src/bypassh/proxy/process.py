"""Run the ssh client as a child process that stands in for bypassh."""

import enum
import logging
import subprocess

from bypassh.proxy.errors import SpawnError, WaitError
from bypassh.proxy.interrupt import InterruptForwarder, spawn_creationflags

log = logging.getLogger("bypassh")

# Exit status for a child that did not exit normally (killed by a signal).
ABNORMAL_EXIT_CODE = 255

# How long a single wait blocks; Windows waits cannot be interrupted, so
# signal handlers only run between these slices.
WAIT_INTERVAL_SECONDS = 0.1


class ProxyState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    EXITED = "exited"
    FAILED_TO_START = "failed_to_start"


def exit_code_from_returncode(returncode: int) -> int:
    """Map a Popen returncode to a process exit status.

    POSIX children killed by signal N report ``-N``; those exit with 255.
    """
    if returncode < 0:
        return ABNORMAL_EXIT_CODE
    return returncode


class ProcessProxy:
    """Own a single child process for the lifetime of one bypassh run.

    The child inherits this process's stdin, stdout and stderr, so the ssh
    session is not buffered or intercepted. Interrupt handlers are installed
    before the child is spawned and removed once it has been waited on.
    """

    def __init__(self) -> None:
        self.state = ProxyState.NOT_STARTED
        self.process: subprocess.Popen | None = None
        self.returncode: int | None = None
        self._forwarder: InterruptForwarder | None = None

    def start(self, executable: str, argv: list[str]) -> None:
        """Spawn ``executable`` with ``argv`` (``argv[0]`` included).

        Raises:
            SpawnError: if the executable cannot be launched.
        """
        if self.state is not ProxyState.NOT_STARTED:
            raise RuntimeError(f"proxy already used (state: {self.state.value})")

        log.debug("starting %s with argv %r", executable, argv)
        forwarder = InterruptForwarder()
        forwarder.start()
        try:
            self.process = subprocess.Popen(
                argv,
                executable=executable,
                creationflags=spawn_creationflags(),
            )
        except OSError as e:
            forwarder.stop()
            self.state = ProxyState.FAILED_TO_START
            raise SpawnError(f"failed to start {executable}: {e}") from e
        forwarder.attach(self.process)
        self._forwarder = forwarder
        self.state = ProxyState.RUNNING

    def wait(self) -> int:
        """Block until the child exits, forwarding interrupts meanwhile.

        Raises:
            WaitError: if the child was never started or the wait itself fails.
        """
        if self.state is not ProxyState.RUNNING or self.process is None:
            raise WaitError(f"no running child to wait on (state: {self.state.value})")

        try:
            returncode = self._wait_in_slices()
        except OSError as e:
            raise WaitError(f"failed to wait on pid {self.process.pid}: {e}") from e
        finally:
            if self._forwarder is not None:
                self._forwarder.stop()
                self._forwarder = None

        self.state = ProxyState.EXITED
        self.returncode = returncode
        log.debug("child %s exited with %d", self.process.pid, returncode)
        return exit_code_from_returncode(returncode)

    def run(self, executable: str, argv: list[str]) -> int:
        """Start the child, wait for it, and return its exit status."""
        self.start(executable, argv)
        return self.wait()

    def _wait_in_slices(self) -> int:
        assert self.process is not None
        while True:
            try:
                return self.process.wait(timeout=WAIT_INTERVAL_SECONDS)
            except subprocess.TimeoutExpired:
                continue
