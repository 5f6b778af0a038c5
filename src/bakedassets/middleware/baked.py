"""
Adapter that puts a BakedFileHandler into a MiddlewarePipeline.

The handler knows nothing about the chain; it only answers Served or
Declined. This middleware turns Declined into a call to next().
"""

from ..handler import BakedFileHandler, Served
from ..http.request import HTTPRequest
from ..http.response import HTTPResponse
from .base import Middleware, NextHandler


class BakedAssetMiddleware(Middleware):
    """
    Serve baked assets, or pass the request down the chain.

    Usage:
        pipeline.add(BakedAssetMiddleware(handler))
        # same as
        pipeline.add(handler.middleware())
    """

    def __init__(self, handler: BakedFileHandler):
        self.handler = handler

    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        outcome = self.handler.handle(request)
        if isinstance(outcome, Served):
            return outcome.response
        return next(request)

    @property
    def name(self) -> str:
        return f"{self.__class__.__name__}({self.handler.config.mount_path})"
