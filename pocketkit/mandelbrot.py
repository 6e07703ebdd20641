"""Colourings of the complex plane: the Mandelbrot set and others."""

from __future__ import annotations

import cmath
import sys

from PIL import Image

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024


def _gray(y: int) -> Color:
    return (y, y, y)


def _u8(x: float) -> int:
    """Truncate x toward zero and wrap it into a byte."""
    return int(x) & 0xFF


def _clamp16(v: int) -> int:
    if 0 <= v < 1 << 24:
        return v >> 16
    return 0 if v < 0 else 255


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    """Convert a Y'CbCr triple to RGB with fixed-point arithmetic."""
    yy = y * 0x10101
    cb -= 128
    cr -= 128
    r = yy + 91881 * cr
    g = yy - 22554 * cb - 46802 * cr
    b = yy + 116130 * cb
    return (_clamp16(r), _clamp16(g), _clamp16(b))


def mandelbrot(z: complex) -> Color:
    """Shade z by how quickly it escapes the Mandelbrot iteration."""
    iterations, contrast = 200, 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray((255 - contrast * n) & 0xFF)
    return BLACK


def acos(z: complex) -> Color:
    """Colour z by its complex arc cosine."""
    v = cmath.acos(z)
    blue = (_u8(v.real * 128) + 127) & 0xFF
    red = (_u8(v.imag * 128) + 127) & 0xFF
    return _ycbcr(192, blue, red)


def sqrt(z: complex) -> Color:
    """Colour z by its complex square root."""
    v = cmath.sqrt(z)
    blue = (_u8(v.real * 128) + 127) & 0xFF
    red = (_u8(v.imag * 128) + 127) & 0xFF
    return _ycbcr(128, blue, red)


def newton(z: complex) -> Color:
    """Shade z by how fast Newton's method finds a root of z**4 - 1."""
    iterations, contrast = 37, 7
    try:
        for i in range(iterations):
            z -= (z - 1 / (z * z * z)) / 4
            if abs(z * z * z * z - 1) < 1e-6:
                return _gray(255 - contrast * i)
    except (ZeroDivisionError, OverflowError):
        pass
    return BLACK


def render(width: int = WIDTH, height: int = HEIGHT) -> Image.Image:
    """Render the Mandelbrot set over [-2, 2] x [-2, 2]."""
    img = Image.new("RGB", (width, height))
    img.putdata([
        mandelbrot(
            complex(
                px / width * (XMAX - XMIN) + XMIN,
                py / height * (YMAX - YMIN) + YMIN,
            )
        )
        for py in range(height)
        for px in range(width)
    ])
    return img


def main(argv: list[str] | None = None) -> int:
    """Write a PNG of the Mandelbrot set to standard output."""
    del argv
    sys.stdout.flush()
    render().save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())