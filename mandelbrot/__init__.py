"""Public API for Mandelbrot rendering utilities."""

from .renderer import HORIZON, MAX_ITERATIONS, RenderParameters, escape_time, render, render_frame
from .generator import pixel_to_point, plane_extent
from .palette import color_from_escape, hsv_to_rgb
from .parsing import parse_complex, parse_dimensions, parse_float, parse_int, parse_pair, parse_unsigned

__all__ = [
    "HORIZON",
    "MAX_ITERATIONS",
    "RenderParameters",
    "color_from_escape",
    "escape_time",
    "hsv_to_rgb",
    "parse_complex",
    "parse_dimensions",
    "parse_float",
    "parse_int",
    "parse_pair",
    "parse_unsigned",
    "pixel_to_point",
    "plane_extent",
    "render",
    "render_frame",
]
