"""Rendering primitives for Mandelbrot images."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .generator import pixel_to_point
from .palette import color_from_escape

HORIZON = 4.0
MAX_ITERATIONS = 255


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of the Mandelbrot set."""

    width: int
    height: int
    upper_left: complex
    lower_right: complex
    max_iterations: int = MAX_ITERATIONS

    @property
    def bounds(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def buffer_size(self) -> int:
        return self.width * self.height * 3


def escape_time(c: complex, limit: int) -> Optional[int]:
    """Number of iterations of ``z = z*z + c`` completed before ``|z|`` left radius 2.

    The escape check happens before squaring, so a point detected on the
    ``i``-th pass returns ``i``. Returns ``None`` when the orbit is still
    bounded after ``limit`` iterations.
    """

    z = 0j
    for i in range(limit):
        if z.real * z.real + z.imag * z.imag > HORIZON:
            return i
        z = z * z + c
    return None


def render(
    pixels: np.ndarray,
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
    max_iter: int,
) -> None:
    """Fill ``pixels`` in place with the RGB rendering of the given rectangle.

    ``pixels`` is a flat ``uint8`` buffer of ``width * height * 3`` bytes,
    row-major.
    """

    width, height = bounds
    if len(pixels) != width * height * 3:
        raise ValueError(
            f"pixel buffer holds {len(pixels)} bytes, expected {width * height * 3} for {width}x{height}"
        )

    for row in range(height):
        for column in range(width):
            point = pixel_to_point(bounds, (column, row), upper_left, lower_right)
            offset = 3 * (row * width + column)
            pixels[offset:offset + 3] = color_from_escape(escape_time(point, max_iter), max_iter)


def render_frame(params: RenderParameters) -> np.ndarray:
    """Allocate a buffer for ``params`` and render into it."""

    pixels = np.zeros(params.buffer_size, dtype=np.uint8)
    render(pixels, params.bounds, params.upper_left, params.lower_right, params.max_iterations)
    return pixels
