# netscope

A small network toolkit built on the standard library alone. It has a few
everyday diagnostics as commands and functions, and a minimal threaded HTTP
server that serves static files and can expose the diagnostics as API
endpoints.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `netscope` | Starts the HTTP server on port 8080, serving files from `./public` |
| `netscope-ping <host>` | Sends one ICMP echo request and reports whether an echo reply came back |
| `netscope-scan <host> <start-end>` | Tries a TCP connection to each port in the range and prints open/closed |
| `netscope-whois <domain>` | Queries `whois.iana.org` on TCP port 43 and prints the reply |
| `netscope-ipinfo [url]` | Fetches your public IP address (from `https://api.ipify.org` unless a URL is given) |

Examples:

```
netscope-scan 127.0.0.1 20-1000
netscope-whois example.com
netscope-ping 127.0.0.1
```

Notes:

- `netscope-ping` opens a raw ICMP socket, which on most systems needs
  administrator privileges. It waits one second for a reply.
- `netscope-scan` gives each connection attempt a one-second timeout. A range
  without a `-` is rejected with an error.
- `netscope-whois` and `netscope-ipinfo` print an error line to stderr and an
  error message in place of the result when the network request fails.

## The server

`netscope.server.serve(port, handlers, public_dir)` listens on all interfaces
and answers each connection with one response, then closes it. Requests are
routed by path:

- `/api/ping?host=...` calls `handlers.ping(host)`
- `/api/scan?ip=...` calls `handlers.scan(ip)`
- `/api/whois?domain=...` calls `handlers.whois(domain)`
- `/api/ipinfo` calls `handlers.ip_info()`

A handler's returned string is sent as `application/json`; a missing query
parameter is passed as an empty string. Every other path is served as a static
file from `public_dir`, with `/` mapped to `index.html`. Paths that are
missing or lead outside `public_dir` get `404 Not Found`. Content types are
chosen by suffix (`.html`, `.css`, `.js`, `.json`; anything else is
`text/plain`).

`Handlers` is a frozen dataclass with the optional fields `ping`, `scan`,
`whois` and `ip_info`:

```python
from netscope.server import Handlers, serve
from netscope.whois import whois_query

serve(8080, Handlers(whois=whois_query), "public")
```

`handle_request(request, handlers, public_dir)` builds the full HTTP response
bytes for one raw request (bytes or text) without opening a socket, and raises
`ValueError` for a request too short to hold a request line.

## Using it as a library

```python
from netscope.utils import is_valid_ip
from netscope.ping import checksum, create_ping_packet, is_echo_reply
from netscope.port_scanner import is_port_open, parse_port_range
from netscope.server import get_mime_type, parse_query_params

is_valid_ip("192.168.1.1")          # True
is_valid_ip("256.0.0.1")            # False
parse_port_range("20-1000")         # (20, 1000)
get_mime_type("style.css")          # "text/css"
parse_query_params("/api/ping?host=127.0.0.1")  # {"host": "127.0.0.1"}
```

- `netscope.ping`: `checksum(data)` computes the 16-bit Internet checksum,
  `create_ping_packet(pid)` builds a 64-byte echo request with sequence 1,
  and `is_echo_reply(datagram)` checks a received IPv4 datagram.
- `netscope.port_scanner.is_port_open(ip, port)` reports whether a TCP
  connection succeeds.
- `netscope.whois.whois_query(domain, server, port)` returns the raw reply
  text and raises `OSError` on network failure.
- `netscope.ip_info.get_public_ip(url)` returns the response body of the given
  service and raises `OSError` or `ValueError` on failure.
- `netscope.utils` also has `sleep_ms(ms)` and `log(msg)`, which prints with a
  `[NetScope]` prefix.

## What it does not do

The `netscope` command starts the server with no API handlers, so all four
`/api/...` paths answer `404 Not Found` there; only static files are served.
To have working endpoints, call `serve` with a `Handlers` of your own. The
package ships no dashboard files of its own, and it does not turn ping, scan
or WHOIS results into JSON: a handler's string is sent as it is.