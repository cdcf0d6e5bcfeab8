"""
cors-wrapper - CORS headers and preflight handling for ASGI applications.

Build a policy from configuration options, then wrap any ASGI application so
every response carries the configured CORS headers and OPTIONS requests are
answered with an empty 204.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .core.policy import (
    CorsPolicy,
    PolicyBuilder,
    build_policy,
    with_origins,
    with_methods,
    with_headers,
    with_max_age,
)
from .api.middleware.cors import Cors, CorsMiddleware, add_cors_middleware
from .exceptions import CorsWrapperError, ConfigurationError

__all__ = [
    "__version__",
    "CorsPolicy",
    "PolicyBuilder",
    "build_policy",
    "with_origins",
    "with_methods",
    "with_headers",
    "with_max_age",
    "Cors",
    "CorsMiddleware",
    "add_cors_middleware",
    "CorsWrapperError",
    "ConfigurationError",
]
