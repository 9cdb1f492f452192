"""Send a single ICMP echo request and report the reply."""

import os
import socket
import struct
import sys

ICMP_ECHO = 8
ICMP_ECHOREPLY = 0
PING_PKT_SIZE = 64
TIMEOUT = 1.0

_HEADER = struct.Struct("!BBHHH")


def checksum(data: bytes) -> int:
    """Return the 16-bit one's complement Internet checksum of ``data``."""
    data = bytes(data)
    if len(data) % 2:
        data += b"\x00"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return ~total & 0xFFFF


def create_ping_packet(pid: int) -> bytes:
    """Build a zero-padded ICMP echo request with identifier ``pid`` and sequence 1."""
    header = _HEADER.pack(ICMP_ECHO, 0, 0, pid & 0xFFFF, 1)
    packet = header + bytes(PING_PKT_SIZE - _HEADER.size)
    return packet[:2] + struct.pack("!H", checksum(packet)) + packet[4:]


def is_echo_reply(datagram: bytes) -> bool:
    """Return True if the IPv4 ``datagram`` carries an ICMP echo reply."""
    if not datagram:
        raise ValueError("empty datagram")
    offset = (datagram[0] & 0x0F) << 2
    if len(datagram) <= offset:
        raise ValueError("datagram too short for an ICMP header")
    return datagram[offset] == ICMP_ECHOREPLY


def main(argv=None) -> int:
    """Ping the host given on the command line once."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: ping <hostname or IP>", file=sys.stderr)
        return 1
    host = args[0]
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    except OSError as exc:
        print(f"Socket creation failed: {exc}", file=sys.stderr)
        return 1
    with sock:
        sock.settimeout(TIMEOUT)
        try:
            sock.sendto(create_ping_packet(os.getpid()), (host, 0))
        except OSError as exc:
            print(f"Send failed: {exc}", file=sys.stderr)
            return 1
        print(f"Ping sent to {host}")
        try:
            data, (address, _) = sock.recvfrom(1024)
        except OSError as exc:
            print(f"Receive failed: {exc}", file=sys.stderr)
            return 1
    try:
        reply = is_echo_reply(data)
    except ValueError:
        reply = False
    if reply:
        print(f"Received reply from {host} ({address})")
    else:
        print("Received unknown ICMP response")
    return 0