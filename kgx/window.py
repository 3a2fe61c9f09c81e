"""Helpers that turn window state into the text and flags shown in its header."""

from __future__ import annotations

import math
import os
from urllib.parse import quote

DISPLAY_NAME = "Console"

STYLE_ROOT = "root"
STYLE_REMOTE = "remote"
STYLE_RINGING = "bell"

PathLike = str | bytes | os.PathLike


def title_or_fallback(title: str | None) -> str:
    """Return ``title``, or the application's display name when it is empty."""
    if not title:
        return DISPLAY_NAME
    return title


def _file_uri(raw: bytes) -> str:
    return "file://" + quote(raw, safe="/")


def _normalise(path: str) -> str:
    normalised = os.path.normpath(path)
    # POSIX keeps a leading double slash; a file location does not
    if normalised.startswith("//"):
        normalised = "/" + normalised.lstrip("/")
    return normalised


def path_as_subtitle(
    path: PathLike | None,
    window_title: str | None = None,
    home: str | None = None,
) -> str | None:
    """Describe ``path`` for a subtitle, shortening the home directory to ``~``.

    Returns ``None`` when there is no path or when the description would only
    repeat ``window_title``. A path that is not valid UTF-8 is given as a
    ``file://`` URI.
    """
    if path is None:
        return None

    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            return _file_uri(raw)
    else:
        text = raw

    if not text or text == window_title:
        return None

    home_path = home if home is not None else os.path.expanduser("~")
    if not text.startswith(home_path):
        return text

    norm_home = _normalise(home_path)
    norm_path = _normalise(text)

    if norm_path == norm_home:
        short_home = "~"
    else:
        prefix = norm_home.rstrip("/") + "/"
        if not norm_path.startswith(prefix):
            # Shares a textual prefix with home but lives outside it
            return text
        short_home = "~/" + norm_path[len(prefix):]

    if short_home == window_title:
        # Avoid duplicating the title
        return None

    return short_home


def _round_half_away(value: float) -> int:
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def scale_as_label(scale: float) -> str:
    """Format a zoom factor such as ``1.5`` as a percentage label."""
    return f"{_round_half_away(scale * 100)}%"


def decoration_is_inverted(layout: str) -> bool:
    """Whether a button layout places more close buttons on the left side."""
    sides = layout.split(":", 1)
    counts = [
        sum(1 for element in side.split(",") if element == "close")
        for side in sides
    ]
    counts.extend([0] * (2 - len(counts)))
    return counts[0] > counts[1]