# kgx

Building blocks for a terminal emulator's session handling, usable on their own.

## Install

    pip install kgx

For running the tests:

    pip install "kgx[test]"
    pytest

## What is inside

- `kgx.pids`: process information read through psutil.
  `get_pid_info(pid)` returns a `PidInfo` (parent pid and effective uid),
  `get_pid_cmdline(pid)` the argument list (empty when it cannot be read),
  `get_running_pids()` every pid on the system, `process_for_pid(pid)` a
  `ProcessInfo` snapshot, and `list_processes()` a dict of `ProcessInfo`
  keyed and ordered by pid, leaving out processes that exit while being read.
  Failures raise `PidsError`, a subclass of `OSError`. `ProcessInfo.is_root`
  tells whether the effective uid is 0.
- `kgx.train`: a `Train` stands for one shell and the children seen
  running under it. `push_child` and `pop_child` keep its `Status` flags up
  to date: `Status.REMOTE` while `ssh`, `telnet`, `mosh`, `mosh-client`,
  `et` or a `waypipe` wrapping `ssh`/`telnet` runs, `Status.PRIVILEGED`
  while a process with uid 0 runs. Callbacks are added with
  `connect(signal, callback)` for `"pid-died"`, `"child-added"`,
  `"child-removed"` and `"status-changed"`; `process_died(status)` emits
  `"pid-died"`. Each train gets a random `uuid` and may carry a `tag`.
- `kgx.watcher`: a `Watcher` reads the process table on each `poll()`,
  pushes the direct children of watched shells onto their trains and pops
  the ones that have gone. Trains are held weakly. `start()` and `stop()`
  (or using the watcher as a context manager) poll in a background thread,
  every 0.5 seconds, or every 2 seconds when `in_background` is set. Any
  callable returning a mapping of pid to `ProcessInfo` can replace the
  system process list.
- `kgx.theme`: the `Theme` enum (`AUTO`, `DAY`, `NIGHT`, `HACKER`) and a
  `ThemeSwitcher` with system/light/dark choices. Setting `theme` or calling
  `selection_changed(system_active, light_active)` notifies callbacks added
  with `connect` when the theme changes.
- `kgx.rgba`: the `Rgba` colour and `parse_hex_rgba`, which reads 3, 4, 6
  or 8 hex digits (any other length gives transparent black, bad digits
  raise `ValueError`).
- `kgx.window`: header text helpers. `title_or_fallback` falls back to
  `"Console"`, `path_as_subtitle` shortens the home directory to `~` and
  returns `None` when it would repeat the title, `scale_as_label` formats a
  zoom factor as a percentage, and `decoration_is_inverted` tells whether a
  button layout such as `"close:minimize"` puts more close buttons on the
  left.

## Example

    from kgx.pids import ProcessInfo
    from kgx.train import Status, Train
    from kgx.watcher import Watcher

    train = Train(pid=100)
    snapshot = {
        101: ProcessInfo(pid=101, parent=100, euid=1000, argv=("ssh", "host.example.com")),
    }
    watcher = Watcher(list_processes=lambda: snapshot)
    watcher.watch(train)
    watcher.poll()
    # train.status == Status.REMOTE

    from kgx.window import path_as_subtitle, scale_as_label

    path_as_subtitle("/home/user/src", home="/home/user")  # "~/src"
    scale_as_label(1.5)                                    # "150%"

## What it does not do

There is no terminal itself here: no command to run, no window or terminal
widget, no parsing of an emulator's command-line options and no stored
preferences. The package only provides the session bookkeeping and helper
functions that such a program would build on.