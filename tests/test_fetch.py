import io
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from pocketkit.fetch import fetch, fetch_all, fetch_timed, main


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/missing":
            code, body = 404, b"gone"
        else:
            code, body = 200, b"hello"
        self.send_response(code)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server(monkeypatch):
    for name in ("http_proxy", "HTTP_PROXY", "all_proxy", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def _closed_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_fetch_writes_status_and_body(server):
    buf = io.BytesIO()
    status = fetch(f"http://{server}/", buf)
    assert status == "200 OK"
    assert buf.getvalue() == b"fetch: status code: 200 OK\nhello"


def test_fetch_adds_http_prefix(server):
    buf = io.BytesIO()
    fetch(f"{server}/", buf)
    assert buf.getvalue().endswith(b"hello")


def test_fetch_error_status_is_not_an_exception(server):
    buf = io.BytesIO()
    status = fetch(f"http://{server}/missing", buf)
    assert status.startswith("404")
    assert buf.getvalue().startswith(b"fetch: status code: 404")
    assert buf.getvalue().endswith(b"gone")


def test_fetch_refused_raises():
    with pytest.raises(OSError):
        fetch(f"http://127.0.0.1:{_closed_port()}/", io.BytesIO())


def test_fetch_timed_reports_size_and_url(server):
    url = f"http://{server}/"
    report = fetch_timed(url)
    seconds, rest = report.split("s  ", 1)
    assert rest == f"      5  {url}"
    assert float(seconds) >= 0
    assert len(seconds.split(".")[1]) == 2


def test_fetch_timed_reports_error_as_text():
    url = f"http://127.0.0.1:{_closed_port()}/"
    report = fetch_timed(url)
    assert not report.endswith(url)
    assert "refused" in report.lower() or "error" in report.lower()


def test_fetch_all_reports_every_url(server):
    urls = [f"http://{server}/a", f"http://{server}/b", f"http://{server}/c"]
    reports = list(fetch_all(urls))
    assert len(reports) == len(urls)
    assert sorted(r.split()[-1] for r in reports) == sorted(urls)


def test_main_prints_content(server, capsysbinary):
    assert main([f"http://{server}/"]) == 0
    assert capsysbinary.readouterr().out.endswith(b"hello")


def test_main_all_prints_elapsed(server, capsys):
    assert main(["--all", f"http://{server}/"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[-1].endswith("s elapsed")


def test_main_failure_exits_one(capsys):
    assert main([f"127.0.0.1:{_closed_port()}/"]) == 1
    assert capsys.readouterr().err.startswith("fetch: ")