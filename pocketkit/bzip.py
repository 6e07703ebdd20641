"""A writer that bzip2-compresses what is written to it."""

from __future__ import annotations

import bz2
import sys
from typing import BinaryIO

_BLOCK_SIZE = 9
_CHUNK = 64 * 1024


class Writer:
    """Compress written bytes and pass them on to an underlying stream.

    Closing flushes the compressed stream; it does not close the
    underlying stream.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(_BLOCK_SIZE)

    def write(self, data: bytes) -> int:
        """Compress data; return the number of uncompressed bytes taken."""
        if self._compressor is None:
            raise ValueError("closed")
        chunk = self._compressor.compress(bytes(data))
        if chunk:
            self._out.write(chunk)
        return len(data)

    def close(self) -> None:
        """Flush the rest of the compressed stream."""
        if self._compressor is None:
            raise ValueError("closed")
        compressor, self._compressor = self._compressor, None
        self._out.write(compressor.flush())

    @property
    def closed(self) -> bool:
        return self._compressor is None

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._compressor is not None:
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Compress standard input to standard output."""
    del argv
    sys.stdout.flush()
    out = sys.stdout.buffer
    w = Writer(out)
    try:
        while chunk := sys.stdin.buffer.read(_CHUNK):
            w.write(chunk)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        w.close()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())