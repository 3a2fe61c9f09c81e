"""The light/dark/system style selector."""

from __future__ import annotations

import enum
from collections.abc import Callable


class Theme(enum.Enum):
    """Colour themes a window can use."""

    AUTO = "auto"
    DAY = "day"
    NIGHT = "night"
    HACKER = "hacker"


class _Selector(enum.Enum):
    SYSTEM = enum.auto()
    LIGHT = enum.auto()
    DARK = enum.auto()


_SELECTOR_FOR_THEME = {
    Theme.AUTO: _Selector.SYSTEM,
    Theme.DAY: _Selector.LIGHT,
    Theme.NIGHT: _Selector.DARK,
    Theme.HACKER: _Selector.DARK,
}


class ThemeSwitcher:
    """Three mutually exclusive choices mapped onto a :class:`Theme`.

    Listeners added with :meth:`connect` are called with the new theme
    whenever it changes.
    """

    def __init__(self, theme: Theme = Theme.NIGHT) -> None:
        self._theme = Theme(theme)
        self._selected = _SELECTOR_FOR_THEME[self._theme]
        self._listeners: list[Callable[[Theme], None]] = []

    def connect(self, callback: Callable[[Theme], None]) -> None:
        """Call ``callback`` with the theme each time it changes."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self._theme)

    @property
    def theme(self) -> Theme:
        return self._theme

    @theme.setter
    def theme(self, theme: Theme) -> None:
        theme = Theme(theme)
        if theme == self._theme:
            return
        self._selected = _SELECTOR_FOR_THEME[theme]
        self._theme = theme
        self._notify()

    @property
    def system_active(self) -> bool:
        return self._selected is _Selector.SYSTEM

    @property
    def light_active(self) -> bool:
        return self._selected is _Selector.LIGHT

    @property
    def dark_active(self) -> bool:
        return self._selected is _Selector.DARK

    def selection_changed(self, system_active: bool, light_active: bool) -> None:
        """Update the theme from the state of the choices.

        The system choice wins over the light one; with neither active the
        dark choice is taken.
        """
        if system_active:
            self._selected, theme = _Selector.SYSTEM, Theme.AUTO
        elif light_active:
            self._selected, theme = _Selector.LIGHT, Theme.DAY
        else:
            self._selected, theme = _Selector.DARK, Theme.NIGHT

        if theme == self._theme:
            return
        self._theme = theme
        self._notify()