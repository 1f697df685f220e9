"""Color derivation utilities.

Small, dependency-free helpers over 24-bit ``#rrggbb`` strings used by the
color group rules:
- Parsing hex colors (case-insensitive, optional leading '#') into RGB tuples
- Formatting channels back to lowercase hex (rounded, then clamped)
- Lighten / darken / desaturate by a percentage
- Producing ``rgba(r, g, b, a)`` strings for translucent surfaces

Rounding is half-up (``floor(x + 0.5)``), not Python's banker's rounding.
Derived palettes are compared bit-for-bit against previously shipped themes,
so ``darken('#191919', 50)`` must give ``#0d0d0d``.

Public API:
    parse_hex(color) -> RGB | None
    to_hex(r, g, b) -> str
    lighten(color, percent) -> str
    darken(color, percent) -> str
    desaturate(color, percent) -> str
    to_alpha(color, alpha) -> str
    luminance(r, g, b) -> float

Transforms given a malformed color return the input unchanged.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple, Optional

__all__ = [
    "RGB",
    "parse_hex",
    "to_hex",
    "lighten",
    "darken",
    "desaturate",
    "to_alpha",
    "luminance",
    "format_decimal",
]

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def parse_hex(color: str) -> Optional[RGB]:
    """Parse ``#rrggbb`` / ``rrggbb`` into an RGB tuple, or None if malformed."""
    if not isinstance(color, str):
        return None
    match = _HEX_RE.match(color)
    if match is None:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r, g, b)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_byte(v: int) -> int:
    return 0 if v < 0 else 255 if v > 255 else v


def to_hex(r: float, g: float, b: float) -> str:
    """Format channels as ``#rrggbb``; each channel is rounded then clamped to 0-255."""
    channels = (_clamp_byte(_round_half_up(c)) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in channels)


def lighten(color: str, percent: float) -> str:
    """Interpolate each channel toward 255 by ``percent``/100."""
    rgb = parse_hex(color)
    if rgb is None:
        return color
    amount = percent / 100
    return to_hex(
        rgb.r + (255 - rgb.r) * amount,
        rgb.g + (255 - rgb.g) * amount,
        rgb.b + (255 - rgb.b) * amount,
    )


def darken(color: str, percent: float) -> str:
    """Scale each channel by ``1 - percent/100``."""
    rgb = parse_hex(color)
    if rgb is None:
        return color
    amount = 1 - (percent / 100)
    return to_hex(rgb.r * amount, rgb.g * amount, rgb.b * amount)


def luminance(r: float, g: float, b: float) -> float:
    return 0.299 * r + 0.587 * g + 0.114 * b


def desaturate(color: str, percent: float) -> str:
    """Move each channel toward the color's luminance by ``percent``/100."""
    rgb = parse_hex(color)
    if rgb is None:
        return color
    gray = luminance(*rgb)
    amount = percent / 100
    return to_hex(
        rgb.r + (gray - rgb.r) * amount,
        rgb.g + (gray - rgb.g) * amount,
        rgb.b + (gray - rgb.b) * amount,
    )


def format_decimal(value: float) -> str:
    """Render a number the way style engines expect (``1`` not ``1.0``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_alpha(color: str, alpha: float) -> str:
    """Return ``rgba(r, g, b, alpha)`` for a hex color, preserving the 0-1 alpha."""
    rgb = parse_hex(color)
    if rgb is None:
        return color
    return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {format_decimal(alpha)})"
