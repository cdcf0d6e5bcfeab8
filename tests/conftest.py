"""
Shared fixtures for cors-wrapper tests
"""

import sys
from pathlib import Path

# Make src/ importable without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from starlette.responses import PlainTextResponse

from cors_wrapper.core.config_manager import ENV_MAPPINGS


class CountingApp:
    """ASGI app that records how often it is called"""

    def __init__(self, body="hello", status_code=200, headers=None):
        self.body = body
        self.status_code = status_code
        self.headers = headers or {}
        self.calls = 0
        self.methods = []

    async def __call__(self, scope, receive, send):
        self.calls += 1
        self.methods.append(scope["method"])
        response = PlainTextResponse(self.body, status_code=self.status_code, headers=self.headers)
        await response(scope, receive, send)


@pytest.fixture
def inner_app():
    return CountingApp()


@pytest.fixture(autouse=True)
def clean_cors_env(monkeypatch):
    """Keep CORS_* variables from the outer environment out of the tests"""
    for env_var in list(ENV_MAPPINGS) + ["CORS_CONFIG_FILE"]:
        monkeypatch.delenv(env_var, raising=False)
