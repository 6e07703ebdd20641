import math

import pytest

from pocketkit import surface


def test_f_is_nan_at_origin():
    assert str(surface.f(0.0, 0.0)) == "nan"


def test_f_is_radially_symmetric():
    assert surface.f(3.0, 4.0) == pytest.approx(surface.f(4.0, 3.0))
    assert surface.f(3.0, 4.0) == pytest.approx(surface.f(-3.0, 4.0))
    assert surface.f(3.0, 4.0) == pytest.approx(surface.f(0.0, 5.0))


def test_eggbox_at_origin():
    assert surface.eggbox(0.0, 0.0) == pytest.approx(0.4)


def test_eggbox_is_periodic():
    assert surface.eggbox(1.0 + 2 * math.pi, 2.0) == pytest.approx(surface.eggbox(1.0, 2.0))


def test_corner_mirror_symmetry():
    ax, ay = surface.corner(10, 30)
    bx, by = surface.corner(30, 10)
    assert ax + bx == pytest.approx(surface.WIDTH)
    assert ay == pytest.approx(by)


def test_corner_at_center_is_nan():
    sx, sy = surface.corner(surface.CELLS // 2, surface.CELLS // 2)
    assert sx == pytest.approx(surface.WIDTH / 2)
    assert str(sy) == "nan"


def test_minmax_bounds():
    lo, hi = surface.minmax()
    assert not math.isnan(lo)
    assert not math.isnan(hi)
    assert lo < 0 < hi < 1


def test_color_format():
    lo, hi = surface.minmax()
    hexdigits = set("0123456789abcdef")
    for i, j in [(0, 0), (10, 20), (70, 40), (99, 99)]:
        c = surface.color(i, j, lo, hi)
        assert len(c) == 7
        assert c[0] == "#"
        assert set(c[1:]) <= hexdigits
        assert c[3:] == "0000" or c[1:5] == "0000"


def test_color_of_peak_cell_is_full_red():
    lo, hi = surface.minmax()
    assert surface.color(49, 49, lo, hi) == "#ff0000"


def test_render_svg_structure():
    svg = surface.render_svg()
    assert svg.startswith("<svg xmlns=")
    assert "width='600' height='320'" in svg
    assert svg.endswith("</svg>")
    assert svg.count("<polygon") == surface.CELLS**2