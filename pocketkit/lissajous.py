"""Animated GIFs of random Lissajous figures."""

from __future__ import annotations

import io
import math
import random
import re
import sys
from collections.abc import Callable
from typing import BinaryIO
from wsgiref.simple_server import make_server

from PIL import Image

from pocketkit.servers import _form, _reply

CYCLES = 5
_RES = 0.001
_SIZE = 100
_NFRAMES = 64
_DELAY = 8  # in 10 ms units

# white background, then red, green, blue and cyan
_PALETTE = [
    255, 255, 255,
    255, 0, 0,
    0, 255, 0,
    0, 0, 255,
    0, 255, 255,
]

_INT_RE = re.compile(r"[+-]?[0-9]+")


def lissajous(
    out: BinaryIO,
    cycles: int = CYCLES,
    rng: random.Random | None = None,
) -> None:
    """Write a GIF animation of a Lissajous figure with a random frequency."""
    gen = random.Random() if rng is None else rng
    freq = gen.random() * 3.0
    side = 2 * _SIZE + 1

    limit = cycles * 2 * math.pi
    ts: list[float] = []
    t = 0.0
    while t < limit:
        ts.append(t)
        t += _RES
    xs = [_SIZE + int(math.sin(t) * _SIZE + 0.5) for t in ts]

    frames = []
    phase = 0.0
    for i in range(_NFRAMES):
        img = Image.new("P", (side, side), 0)
        img.putpalette(_PALETTE)
        pixels = img.load()
        index = i // 16 + 1
        for x, t in zip(xs, ts):
            y = _SIZE + int(math.sin(t * freq + phase) * _SIZE + 0.5)
            pixels[x, y] = index
        phase += 0.1
        frames.append(img)

    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=_DELAY * 10,
        loop=_NFRAMES,
    )


def lissajous_app(environ: dict, start_response: Callable) -> list[bytes]:
    """Serve an animation; a "cycles" form value sets the cycle count."""
    values = _form(environ).get("cycles")
    cycles = CYCLES
    if values is not None:
        text = values[0]
        if not _INT_RE.fullmatch(text):
            return _reply(start_response, "invalid input of cycles: " + text)
        cycles = int(text)
    buf = io.BytesIO()
    lissajous(buf, cycles)
    return _reply(start_response, buf.getvalue(), content_type="image/gif")


def main(argv: list[str] | None = None) -> int:
    """Write an animation to standard output, or serve them with "web"."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] == "web":
        with make_server("localhost", 8000, lissajous_app) as httpd:
            try:
                httpd.serve_forever()
            except KeyboardInterrupt:
                pass
        return 0
    sys.stdout.flush()
    lissajous(sys.stdout.buffer, CYCLES)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())