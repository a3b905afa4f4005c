"""Request routing: static files and integer calculations."""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path

from tinyhttpd.request import Request
from tinyhttpd.response import Response

log = logging.getLogger(__name__)

STATIC_PREFIX = "/static/"
CALC_PREFIX = "/calc/"

_CALC = re.compile(r"/calc/([^/]{1,7})/\s*([+-]?\d+)/\s*([+-]?\d+)")

_OPERATIONS = {
    "add": ("+", lambda a, b: a + b),
    "sub": ("-", lambda a, b: a - b),
    "mul": ("*", lambda a, b: a * b),
}


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def static_file_response(req: Request, root: str | Path = ".") -> Response:
    """Serve the file that ``req.path`` names below ``root``."""
    relative = "." + req.path
    if ".." in relative:
        return Response.text("403 Forbidden", "Access denied.")

    file_path = Path(root) / req.path.lstrip("/")
    if file_path.is_dir():
        return Response.text(
            "403 Forbidden",
            "Access denied because it is a directory, not a file.",
        )

    try:
        content = file_path.read_bytes()
    except OSError as exc:
        log.warning("Failed to open file: %s", exc)
        return Response.text("404 Not Found", "File not found.")

    if ".png" in relative:
        content_type = "image/png"
    elif ".jpg" in relative:
        content_type = "image/jpg"
    else:
        content_type = "application/octet-stream"
    return Response("200 OK", content_type, content)


def calc_response(req: Request) -> Response:
    """Evaluate ``/calc/<op>/<a>/<b>`` with op one of add, sub, mul, div."""
    match = _CALC.match(req.path)
    if match is None:
        return Response.text("400 Bad Request", "Invalid calculation request format")

    operation = match.group(1)
    num1, num2 = int(match.group(2)), int(match.group(3))

    if operation == "div":
        if num2 == 0:
            return Response.text("400 Bad Request", "Division by zero")
        symbol, result = "/", _truncating_div(num1, num2)
    elif operation in _OPERATIONS:
        symbol, func = _OPERATIONS[operation]
        result = func(num1, num2)
    else:
        return Response.text("400 Bad Request", "Invalid operation")

    return Response.text("200 OK", f"result: {num1} {symbol} {num2} = {result}")


def generate_response(req: Request, root: str | Path = ".") -> Response:
    """Route a request to the matching handler."""
    if req.method != "GET":
        return Response.text("405 Method Not Allowed", "Method not allowed")

    log.info(
        "Thread [%d]: Received complete HTTP request:\n%s",
        threading.get_ident(),
        req.raw,
    )
    if req.path.startswith(STATIC_PREFIX):
        return static_file_response(req, root)
    if req.path.startswith(CALC_PREFIX):
        return calc_response(req)
    return Response.text("404 Not Found", "i got it")