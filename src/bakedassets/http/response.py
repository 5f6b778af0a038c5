"""
=============================================================================
HTTP RESPONSE BUILDER
=============================================================================

Builds the responses a baked-asset handler returns to its host chain.

=============================================================================
A SERVED ASSET ON THE WIRE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │   HTTP/1.1 200 OK\r\n                                               │
    │   Content-Type: text/javascript\r\n     ← from "app.js", not ".br"  │
    │   Content-Encoding: br\r\n              ← only for variants         │
    │   Vary: Accept-Encoding\r\n             ← only for variants         │
    │   Cache-Control: max-age=604800\r\n     ← only when configured      │
    │   Content-Length: 1342\r\n              ← size of what was opened   │
    │   Date: Fri, 16 Oct 2026 12:00:00 GMT\r\n                          │
    │   Server: bakedassets\r\n                                           │
    │   \r\n                                                              │
    │   <1342 bytes of brotli data>           ← empty for HEAD            │
    └─────────────────────────────────────────────────────────────────────┘

HEAD responses set Content-Length explicitly to the asset size while the
body stays empty; to_bytes() only fills Content-Length in when a handler
did not, so the HEAD value survives serialisation.

=============================================================================
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Union

from .status_codes import HTTPStatus


DEFAULT_SERVER_NAME = "bakedassets"


@dataclass
class HTTPResponse:
    """
    Represents an HTTP response to be sent to the client.

    Headers keep insertion order, so serialised responses list them in the
    order the handler set them.
    """

    status: HTTPStatus = HTTPStatus.OK
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    version: str = "HTTP/1.1"

    @property
    def status_line(self) -> str:
        """
        Get the HTTP status line.

        Example: "HTTP/1.1 200 OK"
        """
        return f"{self.version} {int(self.status)} {self.status.phrase}"

    def set_header(self, name: str, value: str) -> "HTTPResponse":
        """Set a response header. Returns self for chaining."""
        self.headers[name] = value
        return self

    def to_bytes(self, server_name: str = DEFAULT_SERVER_NAME) -> bytes:
        """
        Serialize the response to bytes for sending over a socket.

        Content-Length, Date and Server are added when missing.
        """
        response_headers = dict(self.headers)

        if "Content-Length" not in response_headers:
            response_headers["Content-Length"] = str(len(self.body))
        if "Date" not in response_headers:
            response_headers["Date"] = format_http_date(datetime.now(timezone.utc))
        if "Server" not in response_headers:
            response_headers["Server"] = server_name

        lines = [self.status_line]
        for name, value in response_headers.items():
            lines.append(f"{name}: {value}")
        lines.append("")

        header_bytes = "\r\n".join(lines).encode("utf-8") + b"\r\n"
        return header_bytes + self.body


class ResponseBuilder:
    """
    Fluent builder for constructing HTTP responses.

        response = (ResponseBuilder()
            .status(HTTPStatus.OK)
            .content_type("text/css")
            .header("Cache-Control", "max-age=604800")
            .body(data)
            .build())

    Each method returns `self` except build().
    """

    def __init__(self):
        self._status = HTTPStatus.OK
        self._headers: Dict[str, str] = {}
        self._body: bytes = b""

    def status(self, status: HTTPStatus) -> "ResponseBuilder":
        self._status = status
        return self

    def header(self, name: str, value: str) -> "ResponseBuilder":
        self._headers[name] = value
        return self

    def content_type(self, content_type: str) -> "ResponseBuilder":
        return self.header("Content-Type", content_type)

    def content_length(self, size: int) -> "ResponseBuilder":
        """
        Set Content-Length explicitly.

        Needed for HEAD, where the body is empty but the length must still
        describe the asset a GET would have returned.
        """
        return self.header("Content-Length", str(size))

    def cache_control(self, value: Optional[str]) -> "ResponseBuilder":
        """
        Set Cache-Control, or leave it out entirely when value is None.

        An empty header ("Cache-Control: ") is never sent.
        """
        if value is not None:
            self._headers["Cache-Control"] = value
        return self

    def body(self, body: Union[str, bytes]) -> "ResponseBuilder":
        """Set the response body. Strings are encoded to UTF-8."""
        if isinstance(body, str):
            self._body = body.encode("utf-8")
        else:
            self._body = body
        return self

    def text(self, text: str, content_type: str = "text/plain; charset=utf-8") -> "ResponseBuilder":
        """Set a plain text body together with its Content-Type."""
        self._body = text.encode("utf-8")
        self._headers["Content-Type"] = content_type
        return self

    def build(self) -> HTTPResponse:
        return HTTPResponse(
            status=self._status,
            headers=dict(self._headers),
            body=self._body,
        )


def format_http_date(dt: datetime) -> str:
    """
    Format a datetime as an HTTP-date (RFC 7231).

    Example: Wed, 01 Jan 2026 12:00:00 GMT

    HTTP dates are always GMT; pass a UTC datetime.
    """
    days = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

    return (
        f"{days[dt.weekday()]}, "
        f"{dt.day:02d} {months[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def not_found(message: str = "Not Found") -> HTTPResponse:
    """
    Create a 404 Not Found response.

    The asset handler never returns this itself; it is what a terminal
    handler at the end of a pipeline answers once every handler declined.
    """
    return ResponseBuilder().status(HTTPStatus.NOT_FOUND).text(message).build()


def method_not_allowed(allowed_methods: Iterable[str]) -> HTTPResponse:
    """
    Create a 405 Method Not Allowed response with an Allow header and no body.

    Args:
        allowed_methods: Methods the resource accepts, e.g. ("GET", "HEAD")
    """
    return (ResponseBuilder()
        .status(HTTPStatus.METHOD_NOT_ALLOWED)
        .header("Allow", ", ".join(allowed_methods))
        .build())


def internal_error(message: str = "Internal Server Error") -> HTTPResponse:
    """
    Create a 500 Internal Server Error response with a plain text body.

    Keep the message generic; details belong in the log, not the response.
    """
    return (ResponseBuilder()
        .status(HTTPStatus.INTERNAL_SERVER_ERROR)
        .text(message)
        .build())
