"""Query a WHOIS server over TCP."""

import socket
import sys

WHOIS_SERVER = "whois.iana.org"
WHOIS_PORT = 43
ERROR_MESSAGE = "Error: Unable to connect to WHOIS server"


def whois_query(domain: str, server: str = WHOIS_SERVER, port: int = WHOIS_PORT) -> str:
    """Send ``domain`` to the WHOIS server and return its whole reply."""
    with socket.create_connection((server, port)) as sock:
        sock.sendall(f"{domain}\r\n".encode())
        chunks = []
        while chunk := sock.recv(4096):
            chunks.append(chunk)
    return b"".join(chunks).decode("utf-8", errors="replace")


def main(argv=None) -> int:
    """Look up the domain given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: whois <domain>", file=sys.stderr)
        return 1
    domain = args[0]
    print(f"Performing WHOIS lookup for: {domain}")
    try:
        result = whois_query(domain)
    except OSError as exc:
        print(f"Connection failed: {exc}", file=sys.stderr)
        result = ERROR_MESSAGE
    print(f"WHOIS Response:\n{result}")
    return 0