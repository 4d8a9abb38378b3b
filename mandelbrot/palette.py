"""Rainbow palette keyed on escape time."""

from __future__ import annotations

from typing import Optional

import numpy as np

INSIDE_COLOR = (0, 0, 0)

_F32 = np.float32


def _channel(value: np.float32) -> int:
    # Round half away from zero in float64; every float32 plus 0.5 is exact there.
    product = np.float64(_F32(value) * _F32(255.0))
    if np.isnan(product):
        return 0
    scaled = np.copysign(np.floor(abs(product) + 0.5), product)
    return int(np.clip(scaled, 0.0, 255.0))


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert hue (degrees), saturation and value into an 8-bit RGB triple.

    Arithmetic is done in single precision. Hues outside ``[0, 300)``,
    including non-finite ones, fall into the magenta-to-red sector.
    """

    h = _F32(h)
    s = _F32(s)
    v = _F32(v)
    c = v * s
    with np.errstate(invalid="ignore"):
        x = c * (_F32(1.0) - abs(np.fmod(h / _F32(60.0), _F32(2.0)) - _F32(1.0)))
    m = v - c
    zero = _F32(0.0)

    if 0.0 <= h < 60.0:
        r1, g1, b1 = c, x, zero
    elif 60.0 <= h < 120.0:
        r1, g1, b1 = x, c, zero
    elif 120.0 <= h < 180.0:
        r1, g1, b1 = zero, c, x
    elif 180.0 <= h < 240.0:
        r1, g1, b1 = zero, x, c
    elif 240.0 <= h < 300.0:
        r1, g1, b1 = x, zero, c
    else:
        r1, g1, b1 = c, zero, x

    return _channel(r1 + m), _channel(g1 + m), _channel(b1 + m)


def escape_hue(iteration: int, max_iter: int) -> np.float32:
    with np.errstate(divide="ignore", invalid="ignore"):
        return _F32(360.0) * _F32(iteration) / _F32(max_iter)


def color_from_escape(escape: Optional[int], max_iter: int) -> tuple[int, int, int]:
    """Color for an escape-time result; points that never escaped are black."""

    if escape is None:
        return INSIDE_COLOR
    return hsv_to_rgb(escape_hue(escape, max_iter), 1.0, 1.0)
