"""A shell session and the processes running inside it."""

from __future__ import annotations

import enum
import logging
import os
import uuid as _uuid
from collections.abc import Callable
from typing import Any

from kgx.pids import ProcessInfo

_log = logging.getLogger(__name__)

_REMOTE_PROGRAMS = frozenset({"ssh", "telnet", "mosh-client", "mosh", "et"})
_WAYPIPE_REMOTES = frozenset({"ssh", "telnet"})


class Status(enum.Flag):
    """What kind of session a train represents."""

    NONE = 0
    REMOTE = 1 << 0
    PRIVILEGED = 1 << 1


class Train:
    """A shell process and the children seen running under it.

    Signals, connected with :meth:`connect`:

    ``pid-died``
        the shell exited; called with its wait status
    ``child-added``
        a child was pushed; called with the :class:`ProcessInfo`
    ``child-removed``
        a child was popped; called with the :class:`ProcessInfo`
    ``status-changed``
        :attr:`status` changed; called with the new :class:`Status`
    """

    SIGNALS = ("pid-died", "child-added", "child-removed", "status-changed")

    def __init__(self, pid: int = 0, tag: str | None = None) -> None:
        self._uuid = str(_uuid.uuid4())
        self._pid = pid
        self._tag = tag
        self._status = Status.NONE
        self._root: set[int] = set()
        self._remote: set[int] = set()
        self._children: dict[int, ProcessInfo] = {}
        self._handlers: dict[str, list[Callable[..., Any]]] = {
            name: [] for name in self.SIGNALS
        }

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def tag(self) -> str | None:
        return self._tag

    @property
    def pid(self) -> int:
        return self._pid

    @property
    def status(self) -> Status:
        return self._status

    def connect(self, signal: str, callback: Callable[..., Any]) -> None:
        """Call ``callback`` whenever ``signal`` is emitted."""
        try:
            self._handlers[signal].append(callback)
        except KeyError:
            raise ValueError(f"unknown signal {signal!r}") from None

    def _emit(self, signal: str, *args: Any) -> None:
        for callback in list(self._handlers[signal]):
            callback(*args)

    def children(self) -> list[ProcessInfo]:
        """The child processes of this session, not including the shell itself."""
        return list(self._children.values())

    def _set_status(self, status: Status) -> None:
        if status == self._status:
            return
        self._status = status
        self._emit("status-changed", status)

    @staticmethod
    def _is_remote(argv: tuple[str, ...]) -> bool:
        if not argv:
            return False
        program = os.path.basename(argv[0].rstrip("/")) or argv[0]
        if program in _REMOTE_PROGRAMS:
            return True
        if program == "waypipe":
            return any(arg in _WAYPIPE_REMOTES for arg in argv[1:])
        return False

    def push_child(self, process: ProcessInfo) -> None:
        """Record ``process`` as running in this session."""
        pid = process.pid
        new_status = Status.NONE

        if self._is_remote(tuple(process.argv)):
            self._remote.add(pid)
            new_status |= Status.REMOTE
            _log.debug("train: Now %i remote", len(self._remote))

        if process.is_root:
            self._root.add(pid)
            new_status |= Status.PRIVILEGED
            _log.debug("train: Now %i privileged", len(self._root))

        self._children[pid] = process

        self._set_status(new_status)
        self._emit("child-added", process)

    def pop_child(self, process: ProcessInfo) -> None:
        """Forget ``process``, which is no longer running."""
        pid = process.pid
        new_status = Status.NONE

        self._remote.discard(pid)
        if self._remote:
            new_status |= Status.REMOTE
        self._root.discard(pid)
        if self._root:
            new_status |= Status.PRIVILEGED
        self._children.pop(pid, None)

        _log.debug("train: %s remaining", new_status)

        self._set_status(new_status)
        self._emit("child-removed", process)

    def process_died(self, status: int) -> None:
        """Report that the shell exited with wait status ``status``."""
        self._emit("pid-died", status)