"""
=============================================================================
HTTP MODULE
=============================================================================

The HTTP vocabulary shared by the asset handler and its host chain:

    ┌─────────────────────────────────────────────────────────────────────┐
    │ request.py       HTTPRequest: method, raw path, lowercase headers   │
    │ response.py      HTTPResponse, ResponseBuilder, 404/405/500 helpers │
    │ status_codes.py  HTTPStatus with reason phrases                     │
    │ mime_types.py    extension → Content-Type                           │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .request import HTTPRequest
from .response import (
    HTTPResponse,
    ResponseBuilder,
    not_found,           # 404 Not Found
    method_not_allowed,  # 405 Method Not Allowed
    internal_error,      # 500 Internal Server Error
)
from .status_codes import HTTPStatus
from .mime_types import get_mime_type, DEFAULT_MIME_TYPE

__all__ = [
    "HTTPRequest",
    "HTTPResponse",
    "ResponseBuilder",
    "not_found",
    "method_not_allowed",
    "internal_error",
    "HTTPStatus",
    "get_mime_type",
    "DEFAULT_MIME_TYPE",
]
