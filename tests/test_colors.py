import pytest

pytest.importorskip("PyQt5")

from tri_viewer.errors import InvalidConfigurationError
from tri_viewer.rendering.colors import parse_color


@pytest.mark.parametrize("value", [None, "", "none", "  None "])
def test_disabled_colours(value):
    assert parse_color(value) is None


def test_named_and_hex_colours():
    assert parse_color("red").name() == "#ff0000"
    assert parse_color("#123456").name() == "#123456"


def test_css_rgba_colour():
    color = parse_color("rgba(200,200,200,0.5)")

    assert (color.red(), color.green(), color.blue()) == (200, 200, 200)
    assert color.alphaF() == pytest.approx(0.5, abs=1 / 255)


@pytest.mark.parametrize("value", ["not-a-colour", "rgb(300, 0, 0)", "rgba(0,0,0,2)"])
def test_invalid_colours_raise(value):
    with pytest.raises(InvalidConfigurationError):
        parse_color(value)


def test_styles_reject_invalid_colours():
    from tri_viewer.rendering.triangle_painter import GridStyle, TriangleStyle

    with pytest.raises(InvalidConfigurationError):
        GridStyle(color="bogus")
    with pytest.raises(InvalidConfigurationError):
        TriangleStyle(fill="rgba(0,0,0,7)")

    assert TriangleStyle(fill="none", vertex_color="red").fill == "none"
