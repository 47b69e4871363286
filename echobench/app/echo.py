"""
Rebuilding the raw HTTP request that reached the echo endpoint.

ASGI hands us the request already parsed, so the echoed text is put back
together from the scope: request line, one line per header in arrival
order, a blank line, then the body. Header names arrive lowercased.
"""
from typing import Iterable, Tuple

from fastapi import Request

BODILESS_METHODS = ("CONNECT", "GET", "HEAD", "OPTIONS", "TRACE")


def is_bodiless(request_line: str) -> bool:
    """True if the request line starts with a method that carries no body."""
    return request_line.startswith(BODILESS_METHODS)


def render_raw_request(
    method: str,
    target: str,
    http_version: str,
    headers: Iterable[Tuple[bytes, bytes]],
    body: bytes = b""
) -> bytes:
    lines = [f"{method} {target} HTTP/{http_version}".encode("latin-1")]
    lines.extend(name + b": " + value for name, value in headers)
    return b"\r\n".join(lines) + b"\r\n\r\n" + body


def request_target(scope: dict) -> str:
    """Path plus query string as the client sent it."""
    target = scope.get("raw_path") or scope["path"].encode("utf-8")
    if scope.get("query_string"):
        target += b"?" + scope["query_string"]
    return target.decode("latin-1")


async def read_raw_request(request: Request) -> bytes:
    """Reassemble the full request; bodiless methods never read a body."""
    method = request.method
    body = b"" if is_bodiless(method) else await request.body()
    return render_raw_request(
        method,
        request_target(request.scope),
        request.scope.get("http_version", "1.1"),
        request.scope["headers"],
        body
    )


def decode_request(raw: bytes) -> str:
    """
    Raises:
        UnicodeDecodeError: if the request is not valid UTF-8
    """
    return raw.decode("utf-8")
