"""Mapping between the pixel grid and the complex plane."""

from __future__ import annotations

import numpy as np


def plane_extent(upper_left: complex, lower_right: complex) -> tuple[np.float64, np.float64]:
    """Width and height of the plane rectangle spanned by the two corners."""

    width = np.float64(lower_right.real) - np.float64(upper_left.real)
    height = np.float64(upper_left.imag) - np.float64(lower_right.imag)
    return width, height


def pixel_to_point(
    bounds: tuple[int, int],
    pixel: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> complex:
    """Return the point of the complex plane that corresponds to ``pixel``.

    ``bounds`` is ``(width, height)`` of the image and ``pixel`` is
    ``(column, row)``. Column 0 maps to ``upper_left.real`` and column
    ``width`` to ``lower_right.real``; row 0 maps to ``upper_left.imag``
    and row ``height`` to ``lower_right.imag``, since image rows grow
    downwards while the imaginary axis grows upwards.
    """

    width, height = plane_extent(upper_left, lower_right)
    column, row = pixel
    with np.errstate(divide="ignore", invalid="ignore"):
        re = np.float64(upper_left.real) + np.float64(column) * width / np.float64(bounds[0])
        im = np.float64(upper_left.imag) - np.float64(row) * height / np.float64(bounds[1])
    return complex(float(re), float(im))
