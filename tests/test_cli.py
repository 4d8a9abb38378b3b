import numpy as np
import PIL.Image
import pytest

import mandel
from mandelbrot import RenderParameters, render_frame


@pytest.fixture(autouse=True)
def _reset_verbose():
    yield
    mandel.VERBOSE = False


def test_renders_png(tmp_path):
    output = tmp_path / "mandel.png"
    assert mandel.main([str(output), "12x8", "-2.5,1.2", "1,-1.2"]) == 0

    with PIL.Image.open(output) as image:
        assert image.format == "PNG"
        assert image.mode == "RGB"
        assert image.size == (12, 8)
        data = np.asarray(image, dtype=np.uint8).reshape(-1)

    expected = render_frame(RenderParameters(12, 8, complex(-2.5, 1.2), complex(1.0, -1.2)))
    assert data.tobytes() == expected.tobytes()


def test_single_pixel_at_origin_is_black(tmp_path):
    output = tmp_path / "dot.png"
    assert mandel.main([str(output), "1x1", "0,0", "0,0"]) == 0
    with PIL.Image.open(output) as image:
        assert image.getpixel((0, 0)) == (0, 0, 0)


def test_creates_missing_directories(tmp_path):
    output = tmp_path / "nested" / "dir" / "out.png"
    assert mandel.main([str(output), "4x3", "-1.20,0.35", "-1,0.20"]) == 0
    assert output.is_file()
    assert not output.with_name("out.png.tmp").exists()


@pytest.mark.parametrize("argv", [[], ["a.png"], ["a.png", "4x3", "0,0"], ["a.png", "4x3", "0,0", "1,1", "extra"]])
def test_wrong_argument_count(tmp_path, capsys, argv):
    assert mandel.main(argv) == mandel.EXIT_USAGE == 1
    err = capsys.readouterr().err
    assert "Usage:" in err
    assert "Example:" in err
    assert not list(tmp_path.iterdir())


@pytest.mark.parametrize(
    "pixels, upper_left, lower_right, message",
    [
        ("1000", "-1.20,0.35", "-1,0.20", "error parsing image dimensions"),
        ("10x-5", "-1.20,0.35", "-1,0.20", "error parsing image dimensions"),
        ("10x5", ",0.35", "-1,0.20", "error parsing upper left corner point"),
        ("10x5", "-1.20,0.35", "-1;0.20", "error parsing lower right corner point"),
    ],
)
def test_parse_errors_are_fatal(tmp_path, capsys, pixels, upper_left, lower_right, message):
    output = tmp_path / "out.png"
    assert mandel.main([str(output), pixels, upper_left, lower_right]) == mandel.EXIT_FAILURE
    assert message in capsys.readouterr().err
    assert not output.exists()


def test_write_error_is_reported(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    output = blocker / "out.png"
    assert mandel.main([str(output), "4x3", "-1,1", "1,-1"]) == mandel.EXIT_FAILURE
    assert "error writing PNG file" in capsys.readouterr().err


def test_empty_image_is_a_write_error(tmp_path, capsys):
    output = tmp_path / "out.png"
    assert mandel.main([str(output), "0x3", "-1,1", "1,-1"]) == mandel.EXIT_FAILURE
    assert "error writing PNG file" in capsys.readouterr().err
    assert not output.exists()


def test_verbose_logging(tmp_path, capsys):
    output = tmp_path / "out.png"
    assert mandel.main(["-v", str(output), "4x3", "-1,1", "1,-1"]) == 0
    out = capsys.readouterr().out
    assert "rendering 4x3" in out
    assert str(output) in out


def test_quiet_by_default(tmp_path, capsys):
    output = tmp_path / "out.png"
    assert mandel.main([str(output), "4x3", "-1,1", "1,-1"]) == 0
    assert capsys.readouterr().out == ""


def test_write_image_leaves_no_partial_file(tmp_path, monkeypatch):
    output = tmp_path / "out.png"

    def broken_save(self, *args, **kwargs):
        with open(args[0], "wb") as handle:
            handle.write(b"\x89PNG")
        raise OSError("disk full")

    monkeypatch.setattr(PIL.Image.Image, "save", broken_save)
    with pytest.raises(OSError):
        mandel.write_image(output, np.zeros(4 * 3 * 3, dtype=np.uint8), (4, 3))
    assert not output.exists()
    assert not list(tmp_path.iterdir())
