"""
=============================================================================
BAKEDASSETS - Serve Static Assets Baked Into Your Application
=============================================================================

An HTTP handler that serves static files from an in-memory, read-only
asset store instead of the filesystem, so an application ships as one
package with its frontend inside.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        PACKAGE LAYOUT                               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   store.py        AssetStore contract, MemoryAssetStore, baking     │
    │   config.py       HandlerConfig (immutable, validated at startup)   │
    │   paths.py        mount scoping, decoding, traversal-safe keys      │
    │   compression.py  pre-compressed .br / .gz variant selection        │
    │   handler.py      BakedFileHandler.handle() → Served | Declined     │
    │   middleware/     pipeline + adapter for the request chain          │
    │   http/           request, response, status codes, MIME types       │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
QUICK START
=============================================================================

    from bakedassets import MemoryAssetStore, serve_baked
    from bakedassets.middleware import MiddlewarePipeline

    assets = serve_baked(MemoryAssetStore.bake_folder("./public"))

    pipeline = MiddlewarePipeline().add(assets.middleware())
    app = pipeline.wrap(router.handle)

What it does NOT do: directory listings, Range requests, ETag or
If-Modified-Since. Baked assets never change while the process runs, so
caching relies on Cache-Control alone.

=============================================================================
"""

__version__ = "0.2.0"

from .config import HandlerConfig, DEFAULT_CACHE_CONTROL
from .errors import AssetStoreError, AssetNotFoundError
from .handler import BakedFileHandler, Served, Declined, DECLINED, Outcome, serve_baked
from .store import AssetStore, MemoryAssetStore
from .compression import CompressedVariant
from .logs import configure_logging

__all__ = [
    "BakedFileHandler",
    "HandlerConfig",
    "DEFAULT_CACHE_CONTROL",
    "Served",
    "Declined",
    "DECLINED",
    "Outcome",
    "serve_baked",
    "AssetStore",
    "MemoryAssetStore",
    "AssetStoreError",
    "AssetNotFoundError",
    "CompressedVariant",
    "configure_logging",
    "__version__",
]
