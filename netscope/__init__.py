"""Network diagnostics toolkit: ping, port scanning, WHOIS, public IP lookup and an HTTP server."""

__version__ = "0.1.0"