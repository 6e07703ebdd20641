"""Convert a PNG or JPEG image to a JPEG image."""

from __future__ import annotations

import io
import sys
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

_FORMATS = {"PNG": "png", "JPEG": "jpeg"}
_QUALITY = 95


def _for_jpeg(img: Image.Image) -> Image.Image:
    """Return img in a mode JPEG can hold; transparency is laid over black."""
    has_alpha = img.mode in ("RGBA", "LA", "PA", "RGBa", "La") or "transparency" in img.info
    if has_alpha:
        rgba = img.convert("RGBA")
        backdrop = Image.new("RGBA", img.size, (0, 0, 0, 255))
        return Image.alpha_composite(backdrop, rgba).convert("RGB")
    if img.mode in ("L", "1"):
        return img.convert("L")
    return img.convert("RGB")


def to_jpeg(src: BinaryIO, dst: BinaryIO) -> str:
    """Decode the image read from src and write it to dst as JPEG.

    Returns the input format name; raises ValueError if it is not known.
    """
    data = src.read()
    try:
        img = Image.open(io.BytesIO(data), formats=list(_FORMATS))
        img.load()
    except UnidentifiedImageError:
        raise ValueError("image: unknown format") from None
    kind = _FORMATS[img.format]
    _for_jpeg(img).save(dst, format="JPEG", quality=_QUALITY)
    return kind


def main(argv: list[str] | None = None) -> int:
    """Read an image from standard input and write JPEG to standard output."""
    del argv
    sys.stdout.flush()
    try:
        kind = to_jpeg(sys.stdin.buffer, sys.stdout.buffer)
    except (OSError, ValueError) as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    print("Input format =", kind, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())