"""HTTP front end serving static files and the network tool API."""

import socketserver
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from netscope.utils import log

PORT = 8080
NOT_FOUND = "404 Not Found"

_MIME_TYPES = (
    (".html", "text/html"),
    (".css", "text/css"),
    (".js", "application/javascript"),
    (".json", "application/json"),
)

_API_ROUTES = (
    ("/api/ping", "ping", "host"),
    ("/api/scan", "scan", "ip"),
    ("/api/whois", "whois", "domain"),
)


@dataclass(frozen=True)
class Handlers:
    """Callbacks for the API routes; a route whose callback is missing answers 404."""

    ping: Optional[Callable[[str], str]] = None
    scan: Optional[Callable[[str], str]] = None
    whois: Optional[Callable[[str], str]] = None
    ip_info: Optional[Callable[[], str]] = None


def read_file(path) -> bytes:
    """Return the file's contents, or the not-found text if it cannot be read."""
    try:
        return Path(path).read_bytes()
    except OSError:
        return NOT_FOUND.encode()


def get_mime_type(path: str) -> str:
    """Guess the content type from the file name's suffix."""
    for suffix, mime in _MIME_TYPES:
        if path.endswith(suffix):
            return mime
    return "text/plain"


def parse_query_params(request: str) -> dict[str, str]:
    """Split the query string after the first ``?`` into a dictionary."""
    _, sep, query = request.partition("?")
    if not sep:
        return {}
    params = {}
    for token in query.split("&"):
        key, eq, value = token.partition("=")
        if eq:
            params[key] = value
    return params


def _request_path(request: Union[bytes, str]) -> str:
    if isinstance(request, bytes):
        request = request.split(b"\0", 1)[0].decode("latin-1")
    if len(request) < 4:
        raise ValueError("malformed request line")
    end = request.find(" ", 4)
    return request[4:] if end == -1 else request[4:end]


def _not_found() -> tuple[int, str, bytes]:
    return 404, "text/plain", NOT_FOUND.encode()


def _static(path: str, public_dir: Path) -> tuple[int, str, bytes]:
    target = public_dir / "index.html" if path == "/" else Path(f"{public_dir}{path}")
    if not target.resolve().is_relative_to(public_dir.resolve()):
        return _not_found()
    if not target.exists():
        return _not_found()
    return 200, get_mime_type(str(target)), read_file(target)


def _route(path: str, handlers: Handlers, public_dir: Path) -> tuple[int, str, bytes]:
    for prefix, name, param in _API_ROUTES:
        if path.startswith(prefix):
            handler = getattr(handlers, name)
            if handler is None:
                return _not_found()
            value = parse_query_params(path).get(param, "")
            return 200, "application/json", handler(value).encode()
    if path == "/api/ipinfo":
        if handlers.ip_info is None:
            return _not_found()
        return 200, "application/json", handlers.ip_info().encode()
    return _static(path, public_dir)


def handle_request(request, handlers: Handlers, public_dir="public") -> bytes:
    """Answer one raw HTTP request with a complete raw HTTP response."""
    path = _request_path(request)
    status, content_type, body = _route(path, handlers, Path(public_dir))
    head = (
        f"HTTP/1.1 {status} OK\r\n"
        f"Content-Type: {content_type}\r\n"
        f"Content-Length: {len(body)}\r\n"
        "Connection: close\r\n\r\n"
    )
    return head.encode("latin-1") + body


class _Server(socketserver.ThreadingTCPServer):
    daemon_threads = True
    request_queue_size = 10

    def __init__(self, address, handlers: Handlers, public_dir):
        self.handlers = handlers
        self.public_dir = public_dir
        super().__init__(address, _Client)


class _Client(socketserver.BaseRequestHandler):
    def handle(self):
        data = self.request.recv(8192)
        try:
            response = handle_request(data, self.server.handlers, self.server.public_dir)
        except ValueError:
            return
        self.request.sendall(response)


def serve(port=PORT, handlers=None, public_dir="public") -> None:
    """Listen on all interfaces and answer requests until interrupted."""
    with _Server(("", port), handlers or Handlers(), public_dir) as server:
        log(f"Server started on http://localhost:{port}")
        server.serve_forever()


def main(argv=None) -> int:
    """Run the server on the default port."""
    try:
        serve(PORT, Handlers(), "public")
    except OSError as exc:
        print(f"Bind failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0