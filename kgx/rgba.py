"""Colours written as hex strings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rgba:
    """A colour with channels in the range 0.0 to 1.0."""

    red: float
    green: float
    blue: float
    alpha: float


_TRANSPARENT = Rgba(0.0, 0.0, 0.0, 0.0)


def _nibble(char: str) -> int:
    try:
        return int(char, 16)
    except ValueError:
        raise ValueError(f"invalid hex digit {char!r}") from None


def _byte(high: str, low: str) -> int:
    return (_nibble(high) << 4) | _nibble(low)


def parse_hex_rgba(text: str) -> Rgba:
    """Parse ``RRGGBBAA``, ``RRGGBB``, ``RGBA`` or ``RGB`` hex notation.

    Any other length yields fully transparent black. Raises ValueError
    for characters that are not hex digits.
    """
    if len(text) in (8, 6):
        channels = [_byte(text[i], text[i + 1]) for i in range(0, len(text), 2)]
    elif len(text) in (4, 3):
        channels = [_byte(char, char) for char in text]
    else:
        return _TRANSPARENT

    if len(channels) == 3:
        channels.append(0xFF)

    red, green, blue, alpha = (channel / 255.0 for channel in channels)
    return Rgba(red, green, blue, alpha)