"""Small WSGI echo servers: the request path, a counter, the whole request."""

from __future__ import annotations

import argparse
import sys
import threading
import urllib.parse
from collections.abc import Callable, Iterable
from wsgiref.simple_server import make_server

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(s: str) -> str:
    """Quote s as a double-quoted literal with backslash escapes."""
    parts = ['"']
    for ch in s:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            cp = ord(ch)
            if cp < 0x80:
                parts.append(f"\\x{cp:02x}")
            elif cp < 0x10000:
                parts.append(f"\\u{cp:04x}")
            else:
                parts.append(f"\\U{cp:08x}")
    parts.append('"')
    return "".join(parts)


def _quote_list(values: Iterable[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def _path(environ: dict) -> str:
    raw = environ.get("PATH_INFO", "") or "/"
    return raw.encode("latin-1", "replace").decode("utf-8", "replace")


def _form(environ: dict) -> dict[str, list[str]]:
    """Collect form values: an url-encoded body first, then the query."""
    form: dict[str, list[str]] = {}
    method = environ.get("REQUEST_METHOD", "GET")
    ctype = environ.get("CONTENT_TYPE", "").split(";")[0].strip().lower()
    if method in ("POST", "PUT", "PATCH") and ctype == "application/x-www-form-urlencoded":
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        stream = environ.get("wsgi.input")
        body = stream.read(length).decode("utf-8", "replace") if stream and length > 0 else ""
        for key, value in urllib.parse.parse_qsl(body, keep_blank_values=True):
            form.setdefault(key, []).append(value)
    query = environ.get("QUERY_STRING", "")
    for key, value in urllib.parse.parse_qsl(query, keep_blank_values=True):
        form.setdefault(key, []).append(value)
    return form


def _reply(
    start_response: Callable,
    body: str | bytes,
    content_type: str = "text/plain; charset=utf-8",
    status: str = "200 OK",
) -> list[bytes]:
    data = body.encode("utf-8") if isinstance(body, str) else body
    start_response(
        status,
        [("Content-Type", content_type), ("Content-Length", str(len(data)))],
    )
    return [data]


def path_app(environ: dict, start_response: Callable) -> list[bytes]:
    """Echo the path component of the requested URL."""
    return _reply(start_response, f"URL.Path = {_quote(_path(environ))}\n")


class CounterApp:
    """Echo the request path and count requests; /count reports the count."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.count = 0

    def __call__(self, environ: dict, start_response: Callable) -> list[bytes]:
        if _path(environ) == "/count":
            with self._lock:
                body = f"Count {self.count}\n"
            return _reply(start_response, body)
        with self._lock:
            self.count += 1
        return path_app(environ, start_response)


def _header_name(key: str) -> str:
    return "-".join(part.capitalize() for part in key.split("_"))


def request_app(environ: dict, start_response: Callable) -> list[bytes]:
    """Echo the request line, headers, host, remote address and form."""
    url = urllib.parse.quote(_path(environ), safe="/:@!$&'()*+,;=-._~")
    query = environ.get("QUERY_STRING", "")
    if query:
        url += "?" + query
    lines = [
        f"{environ.get('REQUEST_METHOD', 'GET')} {url} "
        f"{environ.get('SERVER_PROTOCOL', 'HTTP/1.1')}"
    ]
    for key, value in environ.items():
        if key.startswith("HTTP_") and key != "HTTP_HOST":
            name = _header_name(key[5:])
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
            name = _header_name(key)
        else:
            continue
        lines.append(f"Header[{_quote(name)}] = {_quote_list([value])}")
    host = environ.get("HTTP_HOST") or environ.get("SERVER_NAME", "")
    lines.append(f"Host = {_quote(host)}")
    remote = environ.get("REMOTE_ADDR", "")
    if environ.get("REMOTE_PORT"):
        remote = f"{remote}:{environ['REMOTE_PORT']}"
    lines.append(f"RemoteAddr = {_quote(remote)}")
    for key, values in _form(environ).items():
        lines.append(f"Form[{_quote(key)}] = {_quote_list(values)}")
    return _reply(start_response, "".join(line + "\n" for line in lines))


_APPS: dict[str, Callable[[], Callable]] = {
    "echo": lambda: path_app,
    "counter": CounterApp,
    "request": lambda: request_app,
}


def _split_addr(addr: str) -> tuple[str, int]:
    host, _, port = addr.rpartition(":")
    return host or "localhost", int(port)


def main(argv: list[str] | None = None) -> int:
    """Serve one of the echo applications until interrupted."""
    parser = argparse.ArgumentParser(prog="servers", description="Echo server.")
    parser.add_argument("app", nargs="?", choices=sorted(_APPS), default="echo")
    parser.add_argument("--addr", default="localhost:8000")
    ns = parser.parse_args(sys.argv[1:] if argv is None else argv)
    host, port = _split_addr(ns.addr)
    with make_server(host, port, _APPS[ns.app]()) as httpd:
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())