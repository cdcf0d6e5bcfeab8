"""
cors-wrapper API - Demo application

Small FastAPI application served behind the CORS middleware, used to check a
policy end to end from a browser or curl.
"""

from dataclasses import asdict
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI
from loguru import logger

from ..core.config_manager import ConfigManager, get_config_manager
from ..core.policy import CorsPolicy
from .middleware.cors import add_cors_middleware


def create_app(policy: Optional[CorsPolicy] = None,
               config_file: Optional[Union[str, Path]] = None) -> FastAPI:
    """
    Create the demo application

    Args:
        policy: Policy to serve; loaded from configuration when omitted
        config_file: YAML file to load the policy from

    Returns:
        FastAPI application wrapped with CorsMiddleware
    """
    if policy is None:
        manager = ConfigManager(config_file) if config_file else get_config_manager()
        policy = manager.build_policy()

    app = FastAPI(
        title="cors-wrapper demo",
        description="Echoes the active CORS policy",
        version="1.0.0",
    )

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.get("/policy")
    async def show_policy():
        return asdict(policy)

    add_cors_middleware(app, policy=policy)

    if policy.is_empty:
        logger.warning("CORS policy is empty; no CORS headers will be sent")

    return app
