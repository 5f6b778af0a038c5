"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The status codes a baked-asset handler can produce.

    ┌────────────────────────────────────────────────────────────────────┐
    │                 STATUS CODES EMITTED BY THIS PACKAGE               │
    ├────────┬───────────────────────────────────────────────────────────┤
    │  200   │ Asset found and served (GET body or HEAD headers only)   │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  404   │ Never emitted by the handler itself. A miss DECLINES and │
    │        │ the next handler in the chain decides what to answer.    │
    │        │ Kept for terminal handlers at the end of a pipeline.     │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  405   │ Method other than GET/HEAD with fallthrough disabled     │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  500   │ Asset exists but the store failed to open or read it     │
    └────────┴───────────────────────────────────────────────────────────┘

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes used by the handler and its host chain.

    IntEnum so values compare equal to plain ints:

        HTTPStatus.OK == 200  # True
    """

    OK = 200
    NOT_FOUND = 404                 # Terminal handlers only (see above)
    METHOD_NOT_ALLOWED = 405        # Allow header is mandatory (RFC 7231)
    INTERNAL_SERVER_ERROR = 500

    @property
    def phrase(self) -> str:
        """
        Get the reason phrase for this status code.

            HTTP/1.1 405 Method Not Allowed
                     ─── ──────────────────
                      │   └── Reason phrase
                      └────── Status code
        """
        return _STATUS_PHRASES.get(self, "Unknown")


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}
