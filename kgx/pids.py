"""Process table queries: parent, effective user and command line of pids."""

from __future__ import annotations

from dataclasses import dataclass

import psutil


class PidsError(OSError):
    """Raised when information about a process cannot be read."""


@dataclass(frozen=True)
class PidInfo:
    """The parent and effective user of a process."""

    parent: int
    euid: int


@dataclass(frozen=True)
class ProcessInfo:
    """A snapshot of a running process."""

    pid: int
    parent: int
    euid: int
    argv: tuple[str, ...]

    @property
    def is_root(self) -> bool:
        """Whether the process runs with an effective uid of 0."""
        return self.euid == 0


def _process(pid: int) -> psutil.Process:
    try:
        return psutil.Process(pid)
    except (psutil.Error, ValueError) as error:
        raise PidsError(f"no such process {pid}") from error


def get_pid_info(pid: int) -> PidInfo:
    """Return the parent pid and effective uid of ``pid``."""
    process = _process(pid)
    try:
        parent = process.ppid()
        uids = process.uids()
    except psutil.Error as error:
        raise PidsError(f"cannot read status of {pid}") from error
    except AttributeError as error:
        raise PidsError("user ids are not available on this platform") from error
    return PidInfo(parent=parent, euid=uids.effective)


def get_pid_cmdline(pid: int) -> list[str]:
    """Return the argument vector of ``pid``; empty if it cannot be read."""
    process = _process(pid)
    try:
        return list(process.cmdline())
    except (psutil.AccessDenied, psutil.ZombieProcess):
        return []
    except psutil.Error as error:
        raise PidsError(f"cannot read command line of {pid}") from error


def get_running_pids() -> list[int]:
    """Return the pids of every process on the system."""
    try:
        return list(psutil.pids())
    except (psutil.Error, OSError) as error:
        raise PidsError("cannot list processes") from error


def process_for_pid(pid: int) -> ProcessInfo:
    """Build a :class:`ProcessInfo` for ``pid``."""
    info = get_pid_info(pid)
    argv = get_pid_cmdline(pid)
    return ProcessInfo(pid=pid, parent=info.parent, euid=info.euid, argv=tuple(argv))


def list_processes() -> dict[int, ProcessInfo]:
    """Return every readable process, keyed and ordered by pid.

    Processes that exit while the table is being read are left out.
    """
    processes: dict[int, ProcessInfo] = {}
    for pid in sorted(get_running_pids()):
        try:
            processes[pid] = process_for_pid(pid)
        except PidsError:
            continue
    return processes