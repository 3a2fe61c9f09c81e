"""Periodic polling of the process table for children of watched shells."""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from kgx.pids import ProcessInfo
from kgx.pids import list_processes as _list_system_processes
from kgx.train import Train

_log = logging.getLogger(__name__)

FOREGROUND_INTERVAL = 0.5
BACKGROUND_INTERVAL = 2.0

ProcessLister = Callable[[], Mapping[int, ProcessInfo]]


@dataclass
class _ChildWatch:
    train: weakref.ref[Train]
    process: ProcessInfo


class Watcher:
    """Tracks the processes running directly under the shells of trains.

    Each :meth:`poll` reads the process table with ``list_processes``,
    pushes every child of a watched shell onto its train and pops the
    children that have gone away. Trains are held weakly: once a train is
    gone its shell is no longer watched.
    """

    def __init__(
        self,
        list_processes: ProcessLister | None = None,
        in_background: bool = False,
    ) -> None:
        self._list_processes = list_processes or _list_system_processes
        self._in_background = bool(in_background)
        self._watching: dict[int, weakref.ref[Train]] = {}
        self._children: dict[int, _ChildWatch] = {}
        self._lock = threading.RLock()
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def in_background(self) -> bool:
        """Whether polling is slowed down because the app is in the background."""
        return self._in_background

    @in_background.setter
    def in_background(self, value: bool) -> None:
        value = bool(value)
        if value == self._in_background:
            return
        self._in_background = value
        _log.debug("watcher: in_background? %s", "yes" if value else "no")
        if self.running:
            self.stop()
            self.start()

    @property
    def interval(self) -> float:
        """Seconds between polls."""
        return BACKGROUND_INTERVAL if self._in_background else FOREGROUND_INTERVAL

    @property
    def running(self) -> bool:
        """Whether periodic polling is active."""
        return self._thread is not None and self._thread.is_alive()

    @property
    def watched(self) -> list[int]:
        """Pids of the shells currently watched, in ascending order."""
        with self._lock:
            return sorted(self._watching)

    def watch(self, train: Train) -> None:
        """Register the shell of ``train`` with the watcher."""
        if not isinstance(train, Train):
            raise TypeError(f"expected a Train, got {type(train).__name__}")
        _log.debug("watcher: tracking %i", train.pid)
        with self._lock:
            self._watching[train.pid] = weakref.ref(train)

    def _handle_process(self, pid: int, process: ProcessInfo) -> None:
        parent = process.parent
        train_ref = self._watching.get(parent)
        if train_ref is None:
            return

        train = train_ref()
        if train is None:
            # The page died; stop caring about its processes
            del self._watching[parent]
            self._children.pop(pid, None)
            return

        if pid not in self._children:
            _log.debug("watcher: Hello %i!", pid)
            self._children[pid] = _ChildWatch(weakref.ref(train), process)

        train.push_child(process)

    def poll(self) -> None:
        """Read the process table once and update every watched train."""
        processes = self._list_processes()
        with self._lock:
            for pid in sorted(processes):
                self._handle_process(pid, processes[pid])

            dead = [pid for pid in self._children if pid not in processes]
            for pid in dead:
                _log.debug("watcher: %i marked as dead", pid)
                watch = self._children.pop(pid)
                train = watch.train()
                if train is not None:
                    train.pop_child(watch.process)

    def _run(self, stop_event: threading.Event, interval: float) -> None:
        while not stop_event.wait(interval):
            try:
                self.poll()
            except Exception:
                _log.exception("watcher: poll failed")

    def start(self) -> None:
        """Start polling in a background thread; does nothing if already running."""
        if self.running:
            return
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event, self.interval),
            name="[kgx] watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop polling and wait for the polling thread to finish."""
        thread = self._thread
        if thread is None:
            return
        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def __enter__(self) -> Watcher:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()