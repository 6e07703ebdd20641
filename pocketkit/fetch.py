"""Fetch URLs and print their content, or time several fetches in parallel."""

from __future__ import annotations

import argparse
import io
import shutil
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import BinaryIO

HTTP_PREFIX = "http://"


def _open(url: str):
    """Open url; an HTTP error status still yields a readable response."""
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err


def _status(resp) -> str:
    reason = getattr(resp, "reason", "") or ""
    return f"{resp.status} {reason}".rstrip()


def fetch(url: str, out: BinaryIO | None = None) -> str:
    """Write the status line and body found at url to out.

    A missing "http://" prefix is added. Returns the status text; raises
    OSError if the request or the read fails.
    """
    stream = sys.stdout.buffer if out is None else out
    if not url.startswith(HTTP_PREFIX):
        url = HTTP_PREFIX + url
    try:
        resp = _open(url)
    except ValueError as err:
        raise OSError(str(err)) from err
    try:
        status = _status(resp)
        stream.write(f"fetch: status code: {status}\n".encode())
        try:
            shutil.copyfileobj(resp, stream)
        except OSError as err:
            raise OSError(f"reading {url}: {err}") from err
    finally:
        resp.close()
    return status


def fetch_timed(url: str) -> str:
    """Fetch url and describe the time taken and bytes read, or the error."""
    start = time.monotonic()
    try:
        resp = _open(url)
    except (OSError, ValueError) as err:
        return str(err)
    try:
        nbytes = 0
        while chunk := resp.read(io.DEFAULT_BUFFER_SIZE):
            nbytes += len(chunk)
    except OSError as err:
        return f"while reading {url}: {err}"
    finally:
        resp.close()
    secs = time.monotonic() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch all urls concurrently, yielding each report as it completes."""
    targets = list(urls)
    with ThreadPoolExecutor(max_workers=max(1, len(targets))) as pool:
        futures = [pool.submit(fetch_timed, url) for url in targets]
        for future in as_completed(futures):
            yield future.result()


def main(argv: list[str] | None = None) -> int:
    """Print each URL's content, or with --all, time parallel fetches."""
    parser = argparse.ArgumentParser(prog="fetch", description="Fetch URLs.")
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="fetch in parallel and report times and sizes",
    )
    parser.add_argument("urls", nargs="*")
    ns = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if ns.all:
        start = time.monotonic()
        for report in fetch_all(ns.urls):
            print(report)
        print(f"{time.monotonic() - start:.2f}s elapsed")
        return 0

    sys.stdout.flush()
    out = sys.stdout.buffer
    for url in ns.urls:
        try:
            fetch(url, out)
        except OSError as err:
            out.flush()
            print(f"fetch: {err}", file=sys.stderr)
            return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())