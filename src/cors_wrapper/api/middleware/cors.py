"""
CORS Middleware

Adds the configured CORS headers to every response and answers preflight
(OPTIONS) requests with an empty 204 without calling the wrapped application.
"""

from typing import Callable, Optional
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from loguru import logger

from ...core.policy import CorsPolicy, ConfigOption, build_policy


PREFLIGHT_METHOD = "OPTIONS"


class CorsMiddleware(BaseHTTPMiddleware):
    """
    Middleware emitting headers from a fixed CORS policy
    """

    def __init__(self, app: ASGIApp, policy: Optional[CorsPolicy] = None):
        """
        Initialize CORS middleware

        Args:
            app: Wrapped ASGI application
            policy: Policy to emit; an empty policy when omitted
        """
        super().__init__(app)
        self.policy = policy if policy is not None else CorsPolicy()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Short-circuit preflight requests, decorate everything else

        Args:
            request: HTTP request
            call_next: Wrapped application

        Returns:
            204 for OPTIONS, otherwise the wrapped application's response
            with the CORS headers placed ahead of its own headers
        """
        if request.method == PREFLIGHT_METHOD:
            response = Response(status_code=204)
            for name, value in self.policy.header_items() + self.policy.preflight_items():
                response.headers.append(name, value)
            logger.debug(f"Preflight answered: {request.url.path}")
            return response

        # Errors from the wrapped app propagate untouched
        response = await call_next(request)
        self._prepend_headers(response)
        return response

    def _prepend_headers(self, response: Response):
        """Insert policy headers before the wrapped app's, replacing none"""
        policy_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in self.policy.header_items()
        ]
        if isinstance(response.raw_headers, list):
            # in place, so an already-built response.headers view stays in sync
            response.raw_headers[:0] = policy_headers
        else:
            response.raw_headers = policy_headers + list(response.raw_headers)


class Cors:
    """Policy holder that wraps ASGI applications with CorsMiddleware"""

    def __init__(self, *options: ConfigOption, policy: Optional[CorsPolicy] = None):
        """
        Args:
            options: Configuration options, applied in order
            policy: Prebuilt policy; options are ignored when given
        """
        self.policy = policy if policy is not None else build_policy(*options)

    @classmethod
    def from_policy(cls, policy: CorsPolicy) -> "Cors":
        return cls(policy=policy)

    def wrap(self, app: ASGIApp) -> ASGIApp:
        """
        Wrap an ASGI application

        Args:
            app: Inner application

        Returns:
            New ASGI application with the same interface
        """
        return CorsMiddleware(app, policy=self.policy)


def add_cors_middleware(app, *options: ConfigOption, policy: Optional[CorsPolicy] = None):
    """
    Add CORS middleware to FastAPI app

    Args:
        app: FastAPI or Starlette application instance
        options: Configuration options, ignored when policy is given
        policy: Prebuilt policy

    Returns:
        The same application
    """
    if policy is None:
        policy = build_policy(*options)

    app.add_middleware(CorsMiddleware, policy=policy)
    logger.info(f"CORS middleware configured: {policy}")

    return app
