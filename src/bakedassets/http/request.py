"""
=============================================================================
HTTP REQUEST DESCRIPTOR
=============================================================================

The slice of an inbound HTTP request a baked-asset handler looks at:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    WHAT THE HANDLER READS                           │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │    GET /assets/css/site%20main.css?v=3 HTTP/1.1                     │
    │    ─┬─ ──────────────┬──────────────── ──┬─                         │
    │     │                │                   └── query: ignored          │
    │   method        path (STILL ENCODED)                                │
    │                                                                      │
    │    Accept-Encoding: br, gzip        ──► compressed variant choice   │
    │    Range: bytes=0-99                ──► ignored (no range support)  │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The path is kept percent-encoded on purpose. Mount scoping compares the raw
path against the mount prefix, and decoding happens exactly once, during
key resolution (see paths.py). Decoding twice would turn "%252e%252e" into
"..".

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict
from urllib.parse import urlsplit


@dataclass
class HTTPRequest:
    """
    Represents an inbound HTTP request as seen by the handler chain.

    Attributes:
        method:         HTTP method, uppercase ("GET", "HEAD", ...)
        path:           Request path without query string, percent-encoded
        headers:        Header name → value, with LOWERCASE names
    """

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Header names are case-insensitive (RFC 7230); normalise once here
        # instead of calling .lower() at every lookup.
        self.method = self.method.upper()
        self.headers = {name.lower(): value for name, value in self.headers.items()}

    @classmethod
    def from_target(
        cls,
        method: str,
        target: str,
        headers: Dict[str, str] | None = None,
    ) -> "HTTPRequest":
        """
        Build a request from a request-target such as "/a/b.css?v=1".

        The query string is dropped and the path is NOT decoded.

        Example:
            request = HTTPRequest.from_target("GET", "/app.js?v=2",
                                              {"Accept-Encoding": "gzip"})
            request.path  # "/app.js"
        """
        path = urlsplit(target).path or "/"
        return cls(method=method, path=path, headers=dict(headers or {}))

    @property
    def is_head(self) -> bool:
        """HEAD requests get headers only, never a body."""
        return self.method == "HEAD"

    def get_header(self, name: str, default: str = "") -> str:
        """
        Get a header value (case-insensitive lookup).

        Example:
            request.get_header("Accept-Encoding")
        """
        return self.headers.get(name.lower(), default)
