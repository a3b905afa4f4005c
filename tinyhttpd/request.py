"""Reading and parsing of HTTP requests."""

from __future__ import annotations

import re
import socket
from dataclasses import dataclass

METHOD_LEN = 8
PATH_LEN = 256
VERSION_LEN = 16
BUFFER_SIZE = 1024

_HEADER_END = b"\r\n\r\n"
_CONTENT_LENGTH = re.compile(r"Content-Length:\s*(\d+)")


@dataclass(frozen=True)
class Request:
    """A parsed request line plus the raw request text."""

    method: str
    path: str
    version: str
    raw: str
    body_length: int = 0


def parse_request(raw: str) -> Request:
    """Parse the request line and Content-Length header out of ``raw``.

    Missing request-line tokens become empty strings.
    """
    tokens = raw.split(maxsplit=3)[:3]
    method, path, version = tokens + [""] * (3 - len(tokens))

    body_length = 0
    position = raw.find("Content-Length:")
    if position != -1:
        match = _CONTENT_LENGTH.match(raw, position)
        if match:
            body_length = int(match.group(1))

    return Request(method, path, version, raw, body_length)


def read_client_request(sock: socket.socket) -> Request | None:
    """Read one request from ``sock``.

    Reading stops at the end of the header block or after
    ``BUFFER_SIZE - 1`` bytes. Returns None once the peer has closed
    the connection or the read fails.
    """
    limit = BUFFER_SIZE - 1
    buffer = bytearray()
    while len(buffer) < limit:
        try:
            chunk = sock.recv(limit - len(buffer))
        except OSError:
            return None
        if not chunk:
            return None
        buffer += chunk
        if _HEADER_END in buffer:
            break
    return parse_request(buffer.decode("latin-1"))