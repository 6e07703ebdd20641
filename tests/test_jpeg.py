import io

import pytest
from PIL import Image

from pocketkit.jpeg import to_jpeg


def _encode(img, fmt):
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    buf.seek(0)
    return buf


def _convert(src):
    out = io.BytesIO()
    kind = to_jpeg(src, out)
    return kind, out.getvalue()


def test_png_becomes_jpeg():
    src = _encode(Image.new("RGB", (8, 6), (255, 0, 0)), "PNG")
    kind, data = _convert(src)
    assert kind == "png"
    assert data[:2] == b"\xff\xd8"
    decoded = Image.open(io.BytesIO(data))
    assert decoded.format == "JPEG"
    assert decoded.size == (8, 6)
    r, g, b = decoded.convert("RGB").getpixel((3, 3))
    assert r > 240 and g < 15 and b < 15


def test_jpeg_input_is_accepted():
    src = _encode(Image.new("RGB", (4, 4), (0, 0, 255)), "JPEG")
    kind, data = _convert(src)
    assert kind == "jpeg"
    assert Image.open(io.BytesIO(data)).size == (4, 4)


def test_transparent_pixels_become_black():
    src = _encode(Image.new("RGBA", (4, 4), (255, 255, 255, 0)), "PNG")
    _, data = _convert(src)
    r, g, b = Image.open(io.BytesIO(data)).convert("RGB").getpixel((1, 1))
    assert max(r, g, b) < 15


def test_gray_stays_gray():
    src = _encode(Image.new("L", (4, 4), 128), "PNG")
    _, data = _convert(src)
    assert Image.open(io.BytesIO(data)).mode == "L"


def test_unknown_format_is_rejected():
    with pytest.raises(ValueError, match="image: unknown format"):
        to_jpeg(io.BytesIO(b"not an image at all"), io.BytesIO())


def test_unregistered_format_is_rejected():
    src = _encode(Image.new("RGB", (4, 4)), "GIF")
    with pytest.raises(ValueError, match="unknown format"):
        to_jpeg(src, io.BytesIO())