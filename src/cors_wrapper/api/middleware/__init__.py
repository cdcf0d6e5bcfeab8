"""
Middleware package for API
"""

from .cors import CorsMiddleware, Cors, add_cors_middleware

__all__ = [
    "CorsMiddleware",
    "Cors",
    "add_cors_middleware"
]
