"""Small helpers shared by the network tools."""

import re
import time

_IPV4 = re.compile(
    r"((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
)


def is_valid_ip(ip: str) -> bool:
    """Return True if ``ip`` is a dotted-quad IPv4 address."""
    return _IPV4.fullmatch(ip) is not None


def sleep_ms(ms: float) -> None:
    """Sleep for ``ms`` milliseconds; non-positive values return at once."""
    time.sleep(max(ms, 0) / 1000)


def log(msg: str) -> None:
    """Print ``msg`` with the application prefix."""
    print(f"[NetScope] {msg}", flush=True)