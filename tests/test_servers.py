import io

from pocketkit.servers import CounterApp, path_app, request_app


def make_environ(path="/", query="", method="GET", body=b"", extra=None):
    environ = {
        "REQUEST_METHOD": method,
        "PATH_INFO": path,
        "QUERY_STRING": query,
        "SERVER_PROTOCOL": "HTTP/1.1",
        "SERVER_NAME": "localhost",
        "SERVER_PORT": "8000",
        "HTTP_HOST": "localhost:8000",
        "REMOTE_ADDR": "127.0.0.1",
        "wsgi.input": io.BytesIO(body),
        "CONTENT_LENGTH": str(len(body)) if body else "",
    }
    environ.update(extra or {})
    return environ


class Recorder:
    def __init__(self):
        self.status = None
        self.headers = {}

    def __call__(self, status, headers):
        self.status = status
        self.headers = dict(headers)


def test_path_app_echoes_path():
    rec = Recorder()
    body = b"".join(path_app(make_environ("/hello"), rec))
    assert rec.status.startswith("200")
    assert body == b'URL.Path = "/hello"\n'
    assert rec.headers["Content-Length"] == str(len(body))


def test_path_app_quotes_special_characters():
    body = b"".join(path_app(make_environ('/a"b'), Recorder()))
    assert body == b'URL.Path = "/a\\"b"\n'


def test_counter_counts_only_non_count_requests():
    app = CounterApp()
    b"".join(app(make_environ("/x"), Recorder()))
    b"".join(app(make_environ("/y"), Recorder()))
    first = b"".join(app(make_environ("/count"), Recorder()))
    second = b"".join(app(make_environ("/count"), Recorder()))
    assert first == b"Count 2\n"
    assert second == first
    assert app.count == 2


def test_counter_echoes_path():
    body = b"".join(CounterApp()(make_environ("/z"), Recorder()))
    assert body == b'URL.Path = "/z"\n'


def test_request_app_request_line_and_host():
    body = b"".join(request_app(make_environ("/x", query="a=1"), Recorder()))
    lines = body.decode().splitlines()
    assert lines[0] == "GET /x?a=1 HTTP/1.1"
    assert 'Host = "localhost:8000"' in lines
    assert 'RemoteAddr = "127.0.0.1"' in lines
    assert 'Form["a"] = ["1"]' in lines


def test_request_app_lists_headers():
    environ = make_environ("/", extra={"HTTP_USER_AGENT": "probe"})
    body = b"".join(request_app(environ, Recorder()))
    assert 'Header["User-Agent"] = ["probe"]' in body.decode().splitlines()


def test_request_app_body_values_precede_query():
    environ = make_environ(
        "/",
        query="a=2",
        method="POST",
        body=b"a=1",
        extra={"CONTENT_TYPE": "application/x-www-form-urlencoded"},
    )
    body = b"".join(request_app(environ, Recorder()))
    assert 'Form["a"] = ["1" "2"]' in body.decode().splitlines()