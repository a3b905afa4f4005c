"""HTTP responses and writing them to a socket."""

from __future__ import annotations

import socket
from dataclasses import dataclass

from tinyhttpd.request import BUFFER_SIZE


@dataclass(frozen=True)
class Response:
    """Status line text, content type and body of a response."""

    status: str
    content_type: str
    body: bytes = b""

    @classmethod
    def text(cls, status: str, message: str) -> Response:
        """Build a plain-text response."""
        return cls(status, "text/plain", message.encode("latin-1"))

    @property
    def body_length(self) -> int:
        return len(self.body)

    def header_bytes(self) -> bytes:
        """Return the encoded status line and headers."""
        return (
            f"HTTP/1.1 {self.status}\r\n"
            f"Content-Type: {self.content_type}\r\n"
            f"Content-Length: {self.body_length}\r\n"
            "Connection: close\r\n\r\n"
        ).encode("latin-1")

    def to_bytes(self) -> bytes:
        """Return the full response as sent on the wire."""
        return self.header_bytes() + self.body


def send_response(sock: socket.socket, response: Response) -> None:
    """Write the headers, then the body in chunks of ``BUFFER_SIZE``."""
    sock.sendall(response.header_bytes())
    body = memoryview(response.body)
    for start in range(0, len(body), BUFFER_SIZE):
        sock.sendall(body[start:start + BUFFER_SIZE])