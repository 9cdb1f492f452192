import pytest

from netscope.server import (
    NOT_FOUND,
    Handlers,
    get_mime_type,
    handle_request,
    parse_query_params,
    read_file,
)


def _split(response):
    head, _, body = response.partition(b"\r\n\r\n")
    lines = head.decode("latin-1").split("\r\n")
    headers = dict(line.split(": ", 1) for line in lines[1:])
    return lines[0], headers, body


def _get(path):
    return f"GET {path} HTTP/1.1\r\nHost: localhost\r\n\r\n".encode()


@pytest.mark.parametrize(
    "path, mime",
    [
        ("index.html", "text/html"),
        ("style.css", "text/css"),
        ("app.js", "application/javascript"),
        ("data.json", "application/json"),
        ("notes.txt", "text/plain"),
        ("html", "text/plain"),
    ],
)
def test_get_mime_type(path, mime):
    assert get_mime_type(path) == mime


def test_parse_query_params():
    assert parse_query_params("/api/ping?host=example.com&x=1") == {"host": "example.com", "x": "1"}


def test_parse_query_params_without_query():
    assert parse_query_params("/api/ping") == {}


def test_parse_query_params_edge_tokens():
    assert parse_query_params("/p?flag&a=b=c&a2=&") == {"a": "b=c", "a2": ""}


def test_parse_query_params_later_key_wins():
    assert parse_query_params("/p?k=1&k=2") == {"k": "2"}


def test_ping_route_calls_handler(tmp_path):
    calls = []

    def ping(host):
        calls.append(host)
        return '{"host":"%s"}' % host

    response = handle_request(_get("/api/ping?host=example.com"), Handlers(ping=ping), tmp_path)
    status, headers, body = _split(response)
    assert status == "HTTP/1.1 200 OK"
    assert headers["Content-Type"] == "application/json"
    assert headers["Connection"] == "close"
    assert body == b'{"host":"example.com"}'
    assert calls == ["example.com"]


def test_missing_parameter_passes_empty_string(tmp_path):
    calls = []
    handlers = Handlers(scan=lambda ip: calls.append(ip) or "{}")
    handle_request(_get("/api/scan"), handlers, tmp_path)
    assert calls == [""]


def test_whois_route_uses_domain_parameter(tmp_path):
    handlers = Handlers(whois=lambda domain: domain.upper())
    _, _, body = _split(handle_request(_get("/api/whois?domain=example.com"), handlers, tmp_path))
    assert body == b"EXAMPLE.COM"


def test_ipinfo_route_is_exact(tmp_path):
    handlers = Handlers(ip_info=lambda: '{"ip":"203.0.113.7"}')
    _, _, body = _split(handle_request(_get("/api/ipinfo"), handlers, tmp_path))
    assert body == b'{"ip":"203.0.113.7"}'
    status, _, _ = _split(handle_request(_get("/api/ipinfo?x=1"), handlers, tmp_path))
    assert status == "HTTP/1.1 404 OK"


def test_request_line_without_version(tmp_path):
    handlers = Handlers(ip_info=lambda: "{}")
    _, headers, body = _split(handle_request(b"GET /api/ipinfo", handlers, tmp_path))
    assert headers["Content-Type"] == "application/json"
    assert body == b"{}"


def test_missing_handler_answers_not_found(tmp_path):
    status, _, body = _split(handle_request(_get("/api/ping?host=a"), Handlers(), tmp_path))
    assert status == "HTTP/1.1 404 OK"
    assert body == NOT_FOUND.encode()


def test_root_serves_index(tmp_path):
    (tmp_path / "index.html").write_text("<h1>hi</h1>")
    status, headers, body = _split(handle_request(_get("/"), Handlers(), tmp_path))
    assert status == "HTTP/1.1 200 OK"
    assert headers["Content-Type"] == "text/html"
    assert body == b"<h1>hi</h1>"


def test_static_file_in_subdirectory(tmp_path):
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_text("body{}")
    _, headers, body = _split(handle_request(_get("/css/site.css"), Handlers(), tmp_path))
    assert headers["Content-Type"] == "text/css"
    assert body == b"body{}"


def test_missing_static_file(tmp_path):
    status, headers, body = _split(handle_request(_get("/nope.js"), Handlers(), tmp_path))
    assert status == "HTTP/1.1 404 OK"
    assert headers["Content-Type"] == "text/plain"
    assert body == NOT_FOUND.encode()


def test_path_outside_public_dir_is_refused(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (tmp_path / "outside.txt").write_text("hidden")
    status, _, body = _split(handle_request(_get("/../outside.txt"), Handlers(), public))
    assert status == "HTTP/1.1 404 OK"
    assert body == NOT_FOUND.encode()


def test_content_length_matches_body(tmp_path):
    (tmp_path / "index.html").write_text("héllo wörld", encoding="utf-8")
    _, headers, body = _split(handle_request(_get("/"), Handlers(), tmp_path))
    assert int(headers["Content-Length"]) == len(body)


def test_too_short_request_raises(tmp_path):
    with pytest.raises(ValueError):
        handle_request(b"GE", Handlers(), tmp_path)


def test_read_file_existing(tmp_path):
    target = tmp_path / "a.txt"
    target.write_bytes(b"\x00\x01data")
    assert read_file(target) == b"\x00\x01data"


def test_read_file_missing(tmp_path):
    assert read_file(tmp_path / "missing.txt") == NOT_FOUND.encode()