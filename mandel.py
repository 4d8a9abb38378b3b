import os
import sys
import time
from pathlib import Path

import numpy as np
import PIL.Image

from mandelbrot import (
    MAX_ITERATIONS,
    RenderParameters,
    parse_complex,
    parse_dimensions,
    render_frame,
)

_VERBOSE_FLAGS = {"--verbose", "-v"}

VERBOSE = False


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


USAGE = "Usage: {prog} FILE PIXELS UPPERLEFT LOWERRIGHT [-v|--verbose]"
EXAMPLE = "Example: {prog} mandel.png 1000x750 -1.20,0.35 -1,0.20"

EXIT_USAGE = 1
EXIT_FAILURE = 2


def write_image(output_path: Path, pixels: np.ndarray, bounds: tuple[int, int]) -> None:
    """Encode the RGB buffer ``pixels`` of size ``bounds`` as a PNG at ``output_path``.

    The image is written to a temporary sibling first and renamed into
    place, so a failed write never leaves a truncated file behind.
    """

    if bounds[0] == 0 or bounds[1] == 0:
        raise ValueError(f"cannot encode an empty {bounds[0]}x{bounds[1]} image")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image = PIL.Image.frombytes("RGB", bounds, bytes(pixels))
    temp_path = output_path.with_name(output_path.name + ".tmp")
    try:
        image.save(str(temp_path), format="PNG")
        os.replace(temp_path, output_path)
    except BaseException:
        if temp_path.exists():
            temp_path.unlink()
        raise


def _split_args(argv):
    verbose = any(arg in _VERBOSE_FLAGS for arg in argv)
    positionals = [arg for arg in argv if arg not in _VERBOSE_FLAGS]
    return positionals, verbose


def _fail(message):
    print(message, file=sys.stderr)
    return EXIT_FAILURE


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "mandel"

    positionals, verbose = _split_args(list(argv))

    global VERBOSE
    VERBOSE = verbose

    if len(positionals) != 4:
        print(USAGE.format(prog=prog), file=sys.stderr)
        print(EXAMPLE.format(prog=prog), file=sys.stderr)
        return EXIT_USAGE

    filename, pixels_arg, upper_left_arg, lower_right_arg = positionals

    bounds = parse_dimensions(pixels_arg)
    if bounds is None:
        return _fail(f"error parsing image dimensions: {pixels_arg!r}")
    upper_left = parse_complex(upper_left_arg)
    if upper_left is None:
        return _fail(f"error parsing upper left corner point: {upper_left_arg!r}")
    lower_right = parse_complex(lower_right_arg)
    if lower_right is None:
        return _fail(f"error parsing lower right corner point: {lower_right_arg!r}")

    params = RenderParameters(
        width=bounds[0],
        height=bounds[1],
        upper_left=upper_left,
        lower_right=lower_right,
        max_iterations=MAX_ITERATIONS,
    )
    log("rendering {0}x{1} from {2} to {3}".format(params.width, params.height, upper_left, lower_right))

    start = time.perf_counter()
    pixels = render_frame(params)
    log("rendered in {0:.3f}s".format(time.perf_counter() - start))

    try:
        write_image(Path(filename), pixels, params.bounds)
    except (OSError, ValueError) as exc:
        return _fail(f"error writing PNG file: {exc}")

    log("wrote %s" % filename)
    return 0


if __name__ == '__main__':
    sys.exit(main())
