"""Report which TCP ports in a range accept connections."""

import re
import socket
import sys

TIMEOUT = 1.0
RANGE_FORMAT_ERROR = "Invalid port range format. Use <start_port-end_port>"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid port number: {text!r}")
    return int(match.group(1))


def parse_port_range(text: str) -> tuple[int, int]:
    """Parse ``start-end`` into a pair of port numbers."""
    start, sep, end = text.partition("-")
    if not sep:
        raise ValueError(RANGE_FORMAT_ERROR)
    return _leading_int(start), _leading_int(end)


def is_port_open(ip: str, port: int) -> bool:
    """Return True if a TCP connection to ``ip``:``port`` succeeds."""
    try:
        with socket.create_connection((ip, port), timeout=TIMEOUT):
            return True
    except (OSError, OverflowError):
        return False


def main(argv=None) -> int:
    """Scan the port range given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: port_scanner <hostname or IP> <start_port-end_port>", file=sys.stderr)
        return 1
    target, spec = args
    try:
        start, end = parse_port_range(spec)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Scanning ports on {target} from {start} to {end}")
    for port in range(start, end + 1):
        state = "open" if is_port_open(target, port) else "closed"
        print(f"Port {port} is {state}.")
    return 0