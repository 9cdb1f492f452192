"""Look up the machine's public IP address through a web service."""

import sys
import urllib.error
import urllib.request

DEFAULT_URL = "https://api.ipify.org"
ERROR_MESSAGE = "Error: Unable to fetch IP"


def get_public_ip(url: str) -> str:
    """Fetch ``url`` and return the response body as text.

    HTTP error statuses still yield their body; transport failures raise
    ``OSError`` (``urllib.error.URLError``) and malformed URLs ``ValueError``.
    """
    try:
        with urllib.request.urlopen(url) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        body = exc.read()
        exc.close()
    return body.decode("utf-8", errors="replace")


def main(argv=None) -> int:
    """Print the public IP address, optionally from a given service URL."""
    args = sys.argv[1:] if argv is None else list(argv)
    url = args[0] if args else DEFAULT_URL
    print("Fetching public IP address...")
    try:
        public_ip = get_public_ip(url)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        public_ip = ERROR_MESSAGE
    print(f"Your public IP address is: {public_ip}")
    return 0