"""
cors-wrapper API module

CORS middleware for ASGI applications and a demo application that uses it.
"""

from .main import create_app
from .middleware import CorsMiddleware, Cors, add_cors_middleware

__all__ = [
    'create_app',
    'CorsMiddleware',
    'Cors',
    'add_cors_middleware',
]
