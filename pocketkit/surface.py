"""SVG rendering of the 3-D surface sin(r)/r, coloured by height."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable
from wsgiref.simple_server import make_server

from pocketkit.servers import _reply, _split_addr
from pocketkit.tempconv import _format_g

WIDTH, HEIGHT = 600, 320  # canvas size in pixels
CELLS = 100  # number of grid cells
XYRANGE = 30.0  # axis ranges (-XYRANGE..+XYRANGE)
XYSCALE = WIDTH / 2 / XYRANGE  # pixels per x or y unit
ZSCALE = HEIGHT * 0.4  # pixels per z unit
ANGLE = math.pi / 6  # angle of x, y axes (=30°)

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)
_SVG_NS = "http://www.w3.org/2000/svg"


def f(x: float, y: float) -> float:
    """Height of the surface at (x, y); NaN at the origin, where 0/0."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def eggbox(x: float, y: float) -> float:
    """An egg-box shaped surface."""
    return 0.2 * (math.cos(x) + math.cos(y))


def _grid(i: int, j: int) -> tuple[float, float]:
    return XYRANGE * (i / CELLS - 0.5), XYRANGE * (j / CELLS - 0.5)


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of cell (i, j) onto the canvas.

    Raises ValueError if the surface height there is infinite.
    """
    x, y = _grid(i, j)
    z = f(x, y)
    if math.isinf(z):
        raise ValueError("infinite height")
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def _extremes(heights: Iterable[float]) -> tuple[float, float]:
    """Smallest and largest heights; NaN values after the first are skipped."""
    lo = hi = math.nan
    for z in heights:
        if math.isnan(lo) or z < lo:
            lo = z
        if math.isnan(hi) or z > hi:
            hi = z
    return lo, hi


def minmax() -> tuple[float, float]:
    """Return the lowest and highest surface heights over the grid."""
    return _extremes(
        f(*_grid(i, j)) for i in range(CELLS + 1) for j in range(CELLS + 1)
    )


def color(i: int, j: int, zmin: float, zmax: float) -> str:
    """Stroke colour of cell (i, j): red for peaks, blue for valleys."""
    lo, hi = _extremes(
        f(*_grid(i + k, j + l)) for k in (0, 1) for l in (0, 1)
    )
    if abs(hi) > abs(lo):
        red = min(math.exp(abs(hi)) / math.exp(abs(zmax)) * 255, 255)
        return f"#{int(red):02x}0000"
    blue = min(math.exp(abs(lo)) / math.exp(abs(zmin)) * 255, 255)
    return f"#0000{int(blue):02x}"


def render_svg() -> str:
    """Render the whole surface as an SVG document."""
    parts = [
        f"<svg xmlns='{_SVG_NS}' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    lo, hi = minmax()
    for i in range(CELLS):
        for j in range(CELLS):
            try:
                corners = [
                    corner(i + 1, j),
                    corner(i, j),
                    corner(i, j + 1),
                    corner(i + 1, j + 1),
                ]
            except ValueError:
                continue
            points = " ".join(
                f"{_format_g(px)},{_format_g(py)}" for px, py in corners
            )
            parts.append(
                f"<polygon style='stroke: {color(i, j, lo, hi)}; fill: white' "
                f"points='{points}'/>\n"
            )
    parts.append("</svg>")
    return "".join(parts)


def _app(environ: dict, start_response: Callable) -> list[bytes]:
    return _reply(start_response, render_svg(), content_type="image/svg+xml")


def main(argv: list[str] | None = None) -> int:
    """Serve the surface as SVG until interrupted."""
    parser = argparse.ArgumentParser(prog="surface", description="Serve an SVG surface.")
    parser.add_argument("--addr", default="localhost:8000")
    ns = parser.parse_args(sys.argv[1:] if argv is None else argv)
    host, port = _split_addr(ns.addr)
    with make_server(host, port, _app) as httpd:
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())