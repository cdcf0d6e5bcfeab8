#!/usr/bin/env python3
"""
Wrap a plain Starlette application with CORS headers

Run with: python examples/basic_usage/wrap_app.py
"""

from datetime import timedelta

import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route

from cors_wrapper import Cors, with_origins, with_methods, with_headers, with_max_age
from cors_wrapper.utils.logger import setup_logger


async def items(request):
    return JSONResponse({"items": ["a", "b"]})


def main():
    setup_logger("DEBUG")

    inner = Starlette(routes=[Route("/items", items)])
    cors = Cors(
        with_origins("https://a.com", "https://b.com"),
        with_methods("GET", "POST"),
        with_headers("Content-Type"),
        with_max_age(timedelta(minutes=10)),
    )

    uvicorn.run(cors.wrap(inner), host="127.0.0.1", port=8000)


if __name__ == '__main__':
    main()
