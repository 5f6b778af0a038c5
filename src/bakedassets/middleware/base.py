"""
=============================================================================
BASE MIDDLEWARE INTERFACE
=============================================================================

The host chain a baked-asset handler plugs into: Chain of Responsibility.

    ┌─────────────────────────────────────────────────────────────────────┐
    │              CHAIN OF RESPONSIBILITY - REQUEST FLOW                 │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Request ─────────────────────────────────────────────►            │
    │                                                                      │
    │   ┌──────────┐    ┌──────────────┐    ┌──────────────┐              │
    │   │  /assets │───►│   / (SPA)    │───►│  app router  │              │
    │   │  baked   │    │   baked      │    │  (terminal)  │              │
    │   └────┬─────┘    └──────┬───────┘    └──────┬───────┘              │
    │        │                 │                   │                       │
    │     served?           served?             always                    │
    │     stop here         stop here           answers                   │
    │                                                                      │
    │   Each middleware either returns a response (short-circuit) or      │
    │   calls next(request) to DECLINE and let the next one decide.       │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from abc import ABC, abstractmethod
from typing import Callable, List
import logging

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse


logger = logging.getLogger(__name__)


# The next middleware or the final handler: takes a request, returns a response.
NextHandler = Callable[[HTTPRequest], HTTPResponse]


class Middleware(ABC):
    """
    Abstract base class for middleware.

    Every middleware implements:

        def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse

    Return a response to stop the chain, or `return next(request)` to pass
    the request on.
    """

    @abstractmethod
    def __call__(self, request: HTTPRequest, next: NextHandler) -> HTTPResponse:
        """
        Process the request.

        Args:
            request: The incoming HTTP request
            next: The next handler in the chain

        Returns:
            HTTP response (either from next() or short-circuited)
        """
        pass

    @property
    def name(self) -> str:
        """Get the middleware name for logging."""
        return self.__class__.__name__


class MiddlewarePipeline:
    """
    Chains multiple middleware together with a final handler.

    First added = outermost = consulted first:

        pipeline = MiddlewarePipeline()
        pipeline.add(serve_baked(assets, mount_path="/assets").middleware())
        pipeline.add(serve_baked(spa).middleware())

        handler = pipeline.wrap(router.handle)
        response = handler(request)
    """

    def __init__(self):
        self._middleware: List[Middleware] = []

    def add(self, middleware: Middleware) -> "MiddlewarePipeline":
        """Add middleware to the pipeline. Returns self for chaining."""
        self._middleware.append(middleware)
        logger.debug(f"Added middleware: {middleware.name}")
        return self

    def use(self, *middleware: Middleware) -> "MiddlewarePipeline":
        """Add several middleware at once, in order."""
        for mw in middleware:
            self.add(mw)
        return self

    def wrap(self, handler: NextHandler) -> NextHandler:
        """
        Wrap a final handler with all middleware in the pipeline.

        Given [MW1, MW2] and handler, builds MW1 → MW2 → handler by
        wrapping in reverse order.
        """
        current = handler
        for middleware in reversed(self._middleware):
            current = self._create_wrapped_handler(middleware, current)
        return current

    def _create_wrapped_handler(
        self,
        middleware: Middleware,
        next_handler: NextHandler
    ) -> NextHandler:
        # Closure over middleware and next_handler
        def wrapped(request: HTTPRequest) -> HTTPResponse:
            return middleware(request, next_handler)

        return wrapped

    def __len__(self) -> int:
        return len(self._middleware)

    def __iter__(self):
        return iter(self._middleware)
