"""Interrupt delivery to the child process.

Windows has no SIGINT for a specific process; the closest equivalent is a
CTRL_BREAK_EVENT sent to the child's process group, which only works if the
child was spawned with CREATE_NEW_PROCESS_GROUP.
"""

import logging
import os
import queue
import signal
import subprocess
import threading
from collections.abc import Callable
from types import FrameType

log = logging.getLogger("bypassh")

_INTERRUPT = object()
_STOP = object()


def _deliver_posix(process: subprocess.Popen) -> None:
    process.send_signal(signal.SIGINT)


def _deliver_windows(process: subprocess.Popen) -> None:
    process.send_signal(signal.CTRL_BREAK_EVENT)


def _creationflags_windows() -> int:
    return subprocess.CREATE_NEW_PROCESS_GROUP


def _creationflags_posix() -> int:
    return 0


if os.name == "nt":
    deliver_interrupt = _deliver_windows
    spawn_creationflags = _creationflags_windows
    # Console Ctrl-C and Ctrl-Break both count as an interrupt.
    INTERRUPT_SIGNALS: tuple[int, ...] = (signal.SIGINT, signal.SIGBREAK)
else:
    deliver_interrupt = _deliver_posix
    spawn_creationflags = _creationflags_posix
    INTERRUPT_SIGNALS = (signal.SIGINT,)


class InterruptForwarder:
    """Forward every interrupt received by this process to a child process.

    The signal handler only enqueues a notification; a background thread
    drains the queue and delivers one interrupt per notification. Handlers
    can be installed before the child exists: interrupts received until
    :meth:`attach` are queued and delivered once the child is attached.
    """

    def __init__(
        self,
        process: subprocess.Popen | None = None,
        deliver: Callable[[subprocess.Popen], None] | None = None,
        signals: tuple[int, ...] = INTERRUPT_SIGNALS,
    ) -> None:
        self._process = process
        self._deliver = deliver if deliver is not None else deliver_interrupt
        self._signals = signals
        self._queue: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._thread: threading.Thread | None = None
        self._previous_handlers: dict[int, object] = {}
        self.delivered = 0

    def notify(self) -> None:
        """Record one interrupt to forward. Safe to call from a signal handler."""
        self._queue.put(_INTERRUPT)

    def start(self) -> None:
        """Install the signal handlers, and start delivering if a child is attached."""
        for signum in self._signals:
            self._previous_handlers[signum] = signal.signal(signum, self._on_signal)
        if self._process is not None:
            self._start_listener()

    def attach(self, process: subprocess.Popen) -> None:
        """Set the child that receives interrupts and start delivering to it."""
        if self._thread is not None:
            raise RuntimeError("interrupt forwarder already has a child attached")
        self._process = process
        self._start_listener()

    def stop(self) -> None:
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler)
        self._previous_handlers.clear()
        if self._thread is not None:
            self._queue.put(_STOP)
            self._thread.join()

    def __enter__(self) -> "InterruptForwarder":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _start_listener(self) -> None:
        self._thread = threading.Thread(target=self._run, name="bypassh-interrupts", daemon=True)
        self._thread.start()

    def _on_signal(self, signum: int, _frame: FrameType | None) -> None:
        log.debug("received signal %d", signum)
        self.notify()

    def _run(self) -> None:
        assert self._process is not None
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            try:
                self._deliver(self._process)
            except OSError as e:
                log.warning("failed to forward interrupt to pid %s: %s", self._process.pid, e)
                continue
            self.delivered += 1
            log.debug("forwarded interrupt to pid %s", self._process.pid)
