"""
=============================================================================
MIDDLEWARE FRAMEWORK
=============================================================================

The request chain baked-asset handlers are composed into.

    Incoming Request
         │
         ▼
    ┌──────────────────────┐
    │ BakedAssetMiddleware │ ──► served from the store, or ...
    └──────────┬───────────┘
               ▼ (declined)
    ┌──────────────────────┐
    │   Your Handler       │ ──► everything that is not an asset
    └──────────────────────┘

=============================================================================
"""

from .base import Middleware, MiddlewarePipeline, NextHandler
from .baked import BakedAssetMiddleware

__all__ = [
    "Middleware",
    "MiddlewarePipeline",
    "NextHandler",
    "BakedAssetMiddleware",
]
