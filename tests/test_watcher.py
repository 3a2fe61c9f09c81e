import gc
import threading

import pytest

from kgx.pids import ProcessInfo
from kgx.train import Status, Train
from kgx.watcher import Watcher

SHELL = 100


def proc(pid, parent, argv=("sleep",), euid=1000):
    return ProcessInfo(pid=pid, parent=parent, euid=euid, argv=tuple(argv))


class FakeTable:
    def __init__(self, *processes):
        self.processes = {p.pid: p for p in processes}
        self.calls = 0
        self.called = threading.Event()

    def set(self, *processes):
        self.processes = {p.pid: p for p in processes}

    def __call__(self):
        self.calls += 1
        self.called.set()
        return dict(self.processes)


def test_child_of_watched_shell_is_pushed():
    child = proc(101, SHELL)
    table = FakeTable(proc(SHELL, 1, ("bash",)), child)
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    watcher.watch(train)

    watcher.poll()

    assert train.children() == [child]


def test_unrelated_and_grandchildren_are_ignored():
    table = FakeTable(
        proc(SHELL, 1, ("bash",)),
        proc(101, SHELL),
        proc(102, 101),
        proc(200, 1),
    )
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    watcher.watch(train)

    watcher.poll()

    assert [p.pid for p in train.children()] == [101]


def test_child_added_emitted_each_poll():
    table = FakeTable(proc(101, SHELL))
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    added = []
    train.connect("child-added", added.append)
    watcher.watch(train)

    watcher.poll()
    watcher.poll()

    assert [p.pid for p in added] == [101, 101]
    assert len(train.children()) == 1


def test_dead_child_is_popped():
    child = proc(101, SHELL)
    table = FakeTable(child)
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    removed = []
    train.connect("child-removed", removed.append)
    watcher.watch(train)

    watcher.poll()
    table.set()
    watcher.poll()

    assert removed == [child]
    assert train.children() == []


def test_remote_status_follows_children():
    table = FakeTable(proc(101, SHELL, ("/usr/bin/ssh", "host")))
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    watcher.watch(train)

    watcher.poll()
    assert train.status == Status.REMOTE

    table.set()
    watcher.poll()
    assert train.status == Status.NONE


def test_privileged_status():
    table = FakeTable(proc(101, SHELL, ("sudo", "ls"), euid=0))
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    watcher.watch(train)

    watcher.poll()

    assert train.status == Status.PRIVILEGED


def test_collected_train_is_forgotten():
    table = FakeTable(proc(101, SHELL))
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    watcher.watch(train)
    assert watcher.watched == [SHELL]

    del train
    gc.collect()
    watcher.poll()

    assert watcher.watched == []


def test_watch_rejects_non_train():
    watcher = Watcher(FakeTable())
    with pytest.raises(TypeError):
        watcher.watch(SHELL)


def test_interval_depends_on_background():
    watcher = Watcher(FakeTable())
    assert watcher.in_background is False
    assert watcher.interval == 0.5
    watcher.in_background = True
    assert watcher.in_background is True
    assert watcher.interval == 2.0


def test_start_polls_and_stop_ends():
    table = FakeTable(proc(101, SHELL))
    watcher = Watcher(table)
    train = Train(pid=SHELL)
    watcher.watch(train)

    watcher.start()
    try:
        assert watcher.running is True
        assert table.called.wait(5.0)
    finally:
        watcher.stop()

    assert watcher.running is False
    assert table.calls >= 1


def test_context_manager_stops_on_exit():
    table = FakeTable()
    with Watcher(table) as watcher:
        assert watcher.running is True
        assert table.called.wait(5.0)
    assert watcher.running is False


def test_stop_without_start_keeps_stopped():
    watcher = Watcher(FakeTable())
    watcher.stop()
    assert watcher.running is False