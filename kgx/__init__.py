"""Terminal session helpers: process table, session trains, watcher, themes, colours and window text."""

__version__ = "48.0.1"

__all__ = ["pids", "rgba", "theme", "train", "watcher", "window"]