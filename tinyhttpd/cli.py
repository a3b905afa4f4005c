"""Command-line entry point."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence

from tinyhttpd.server import DEFAULT_PORT, create_listening_socket, run_server

MIN_PORT = 80
MAX_PORT = 65535

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_port(argv: Sequence[str] | None = None) -> int:
    """Return the port given with ``-p``, or the default.

    A value without a leading integer leaves the port unchanged.
    Raises ValueError for a port outside 80..65535.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    port = DEFAULT_PORT
    for flag, value in zip(args, args[1:]):
        if flag != "-p":
            continue
        match = _LEADING_INT.match(value)
        if match:
            port = int(match.group(1))
        if not MIN_PORT <= port <= MAX_PORT:
            raise ValueError(f"Invalid port number: {port}")
    return port


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and serve the current directory."""
    try:
        port = parse_port(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        listener = create_listening_socket(port)
    except OSError as exc:
        print(f"Failed to create listening socket: {exc}", file=sys.stderr)
        return 1

    try:
        run_server(listener, ".")
    except KeyboardInterrupt:
        listener.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())