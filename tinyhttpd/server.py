"""Listening socket, accept loop and per-connection handling."""

from __future__ import annotations

import logging
import socket
import threading
from pathlib import Path

from tinyhttpd.request import read_client_request
from tinyhttpd.response import send_response
from tinyhttpd.routes import generate_response

LISTEN_BACKLOG = 5
DEFAULT_PORT = 80

log = logging.getLogger(__name__)


def create_listening_socket(port: int, host: str = "") -> socket.socket:
    """Create a TCP socket bound to ``host:port`` and listening.

    Raises OSError if the socket cannot be created, bound or put in
    listening mode.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    log.info("Binding to port %d", port)
    try:
        sock.bind((host, port))
        sock.listen(LISTEN_BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock


def handle_connection(client: socket.socket, root: str | Path = ".") -> None:
    """Answer requests on ``client`` until the peer closes, then close it."""
    fd = client.fileno()
    log.info("Handling connection on %d", fd)
    with client:
        while (req := read_client_request(client)) is not None:
            try:
                send_response(client, generate_response(req, root))
            except OSError:
                break
    log.info("Closing connection on %d", fd)


def run_server(listener: socket.socket, root: str | Path = ".") -> None:
    """Accept connections forever, one thread per connection.

    Returns once the listening socket has been closed.
    """
    with listener:
        while listener.fileno() != -1:
            try:
                client, _ = listener.accept()
            except OSError as exc:
                if listener.fileno() == -1:
                    break
                log.error("Failed to accept connection: %s", exc)
                continue
            log.info("Accepted connection on %d", client.fileno())
            threading.Thread(
                target=handle_connection, args=(client, root), daemon=True
            ).start()