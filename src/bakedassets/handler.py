"""
=============================================================================
BAKED FILE HANDLER
=============================================================================

Serves assets from an AssetStore, or declines so the next handler in the
chain can answer.

=============================================================================
RESOLUTION ORDER
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                   handle(request) → Served | Declined               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   path outside mount? ──────────────────────────────► Declined      │
    │   method not GET/HEAD? ── fallthrough ──────────────► Declined      │
    │                        └─ no fallthrough ───────────► 405           │
    │   key escapes mount / undecodable ──────────────────► Declined      │
    │                                                                      │
    │   for K in [key, index key (if enabled and dir-like)]:              │
    │       1. K.br  exists and client advertises br   ──► 200 (br)       │
    │       2. K.gz  exists and client advertises gzip ──► 200 (gzip)     │
    │       3. K     exists                            ──► 200            │
    │                                                                      │
    │   nothing matched ──────────────────────────────────► Declined      │
    │   store raised (exists/open/read/close) ────────────► 500           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

"Dir-like" means the request path ends with "/" or the key is the mount
root itself. The root key is never looked up literally.

=============================================================================
WHY A MISS DECLINES INSTEAD OF 404
=============================================================================

The handler usually sits in front of an application router. "/api/users"
is not an asset, but it is not a 404 either; the router decides. Only the
last handler of a chain should produce 404.

A 500 is the one terminal failure. It covers every store fault: exists()
raising, open() or a read failing after exists() said yes, and close()
failing. Nothing the store raises escapes handle().

=============================================================================
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple, Union
import io
import logging
import shutil

from .compression import CompressedVariant, acceptable_variants
from .config import HandlerConfig
from .http.mime_types import get_mime_type
from .http.request import HTTPRequest
from .http.response import (
    HTTPResponse, ResponseBuilder, HTTPStatus,
    method_not_allowed, internal_error,
)
from .paths import ROOT_KEY, in_mount, resolve_key, index_key
from .store import AssetStore

if TYPE_CHECKING:
    from .middleware.baked import BakedAssetMiddleware


SERVABLE_METHODS = ("GET", "HEAD")

# Body of every 500 response; the details go to the log only.
ERROR_BODY = "Error serving file."

COPY_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class Served:
    """The handler produced a final response; the chain stops here."""

    response: HTTPResponse


@dataclass(frozen=True)
class Declined:
    """The handler is not responsible; the chain moves to the next handler."""


DECLINED = Declined()

Outcome = Union[Served, Declined]


class BakedFileHandler:
    """
    Resolves requests against an asset store.

    =========================================================================
    USAGE
    =========================================================================

        store = MemoryAssetStore.bake_folder("./public")
        handler = BakedFileHandler(HandlerConfig(store, mount_path="/assets"))

        outcome = handler.handle(request)
        if isinstance(outcome, Served):
            send(outcome.response)
        else:
            ...  # next handler

        # Or plug it into a middleware pipeline:
        pipeline.add(handler.middleware())

    =========================================================================
    THREAD SAFETY
    =========================================================================

    No state is written after __init__. One instance can serve any number
    of concurrent requests.

    =========================================================================
    """

    def __init__(self, config: HandlerConfig, logger: Optional[logging.Logger] = None):
        """
        Args:
            config: Immutable handler configuration (store included).
            logger: Logger for lookup traces and store failures. Defaults
                    to this module's logger.
        """
        self._config = config
        self._store = config.store
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def config(self) -> HandlerConfig:
        return self._config

    def handle(self, request: HTTPRequest) -> Outcome:
        """
        Serve the request from the store, or decline it.

        Never raises for store problems: those become a 500 response.
        """
        config = self._config

        # Out-of-mount requests never reach the store or the log.
        if not in_mount(request.path, config.mount_path):
            return DECLINED

        if request.method not in SERVABLE_METHODS:
            if config.fallthrough_on_miss:
                return DECLINED
            return Served(method_not_allowed(SERVABLE_METHODS))

        key = resolve_key(request.path, config.mount_path)
        if key is None:
            self._logger.debug(f"Rejected request path {request.path!r}: no valid asset key")
            return DECLINED

        variants = acceptable_variants(request.get_header("accept-encoding"))

        if key != ROOT_KEY:
            response = self._serve_key(request, key, variants)
            if response is not None:
                return Served(response)

        if config.serve_index_html and (request.path.endswith("/") or key == ROOT_KEY):
            response = self._serve_key(request, index_key(key), variants)
            if response is not None:
                return Served(response)

        return DECLINED

    def middleware(self) -> "BakedAssetMiddleware":
        """Wrap this handler as middleware for a MiddlewarePipeline."""
        from .middleware.baked import BakedAssetMiddleware
        return BakedAssetMiddleware(self)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def _serve_key(
        self,
        request: HTTPRequest,
        key: str,
        variants: List[CompressedVariant],
    ) -> Optional[HTTPResponse]:
        """
        Try the compressed variants of `key`, then `key` itself.

        Returns None when none of them exist, and a 500 response when the
        store cannot even answer whether they exist.
        """
        self._logger.debug(f"Attempting to serve baked key {key!r}")

        try:
            match = self._find(key, variants)
        except Exception:
            self._logger.exception(f"Existence check failed for baked key {key!r}")
            return internal_error(ERROR_BODY)

        if match is None:
            self._logger.debug(f"Baked key not found: {key!r}")
            return None

        stored_key, variant = match
        return self._build_response(request, stored_key, key, variant)

    def _find(
        self,
        key: str,
        variants: List[CompressedVariant],
    ) -> Optional[Tuple[str, Optional[CompressedVariant]]]:
        """First (stored_key, variant) the store holds; variant None is `key` itself."""
        for variant in variants:
            stored_key = variant.variant_key(key)
            if self._store.exists(stored_key):
                return stored_key, variant

        if self._store.exists(key):
            return key, None
        return None

    # =========================================================================
    # RESPONSE CONSTRUCTION
    # =========================================================================

    def _build_response(
        self,
        request: HTTPRequest,
        stored_key: str,
        key: str,
        variant: Optional[CompressedVariant],
    ) -> HTTPResponse:
        """
        Open `stored_key` and build the 200 response for it.

        `key` is the uncompressed key; Content-Type always comes from it.
        """
        stream = None
        released = True
        try:
            stream, size = self._store.open(stored_key)
            body = b"" if request.is_head else _read_all(stream)
        except Exception:
            self._logger.exception(f"Error serving baked key {stored_key!r}")
            return internal_error(ERROR_BODY)
        finally:
            if stream is not None:
                released = self._release(stream, stored_key)

        if not released:
            return internal_error(ERROR_BODY)

        builder = (ResponseBuilder()
            .status(HTTPStatus.OK)
            .content_type(get_mime_type(key)))

        if variant is not None:
            builder.header("Content-Encoding", variant.encoding)
            builder.header("Vary", "Accept-Encoding")

        builder.cache_control(self._config.cache_control)
        builder.content_length(size if request.is_head else len(body))

        self._logger.debug(f"Served baked key {stored_key!r} ({size} bytes)")
        return builder.body(body).build()

    def _release(self, stream, stored_key: str) -> bool:
        """Close a store stream; False (and logged) if closing fails."""
        try:
            stream.close()
        except Exception:
            self._logger.exception(f"Error closing baked key {stored_key!r}")
            return False
        return True


def _read_all(stream) -> bytes:
    """Copy a whole stream into memory."""
    buffer = io.BytesIO()
    shutil.copyfileobj(stream, buffer, COPY_CHUNK_SIZE)
    return buffer.getvalue()


def serve_baked(store: AssetStore, logger: Optional[logging.Logger] = None, **options) -> BakedFileHandler:
    """
    Create a baked file handler.

    Factory function for convenient handler creation.

    Args:
        store: Asset store to serve from.
        logger: Optional logger to inject.
        **options: HandlerConfig options (mount_path, cache_control,
                   serve_index_html, fallthrough_on_miss).

    Example:
        assets = serve_baked(MemoryAssetStore.bake_folder("./public"),
                             mount_path="/assets")
        pipeline.add(assets.middleware())
    """
    return BakedFileHandler(HandlerConfig(store=store, **options), logger=logger)
