#!/usr/bin/env python
"""Setup script for cors-wrapper."""

import sys
from pathlib import Path
from setuptools import setup, find_packages

# Ensure Python version compatibility
if sys.version_info < (3, 8):
    raise RuntimeError("cors-wrapper requires Python 3.8 or higher")

# Get the project root directory
HERE = Path(__file__).parent.absolute()

# Read version from __init__.py
def get_version():
    """Extract version from __init__.py"""
    version_file = HERE / "src" / "cors_wrapper" / "__init__.py"
    version_line = [line for line in version_file.read_text().splitlines()
                   if line.startswith("__version__")]
    if version_line:
        return version_line[0].split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"

# Read the README file
def get_long_description():
    """Get long description from README.md"""
    readme_file = HERE / "README.md"
    if readme_file.exists():
        return readme_file.read_text(encoding="utf-8")
    return ""

# Core dependencies
INSTALL_REQUIRES = [
    "fastapi>=0.100.0",
    "uvicorn>=0.20.0",
    "pydantic>=2.0",
    "pyyaml>=6.0",
    "loguru>=0.7.0",
]

EXTRAS_REQUIRE = {
    # Development tools
    "dev": [
        "pytest>=7.4.0",
        "pytest-asyncio>=0.21.0",
        "pytest-cov>=4.1.0",
        "httpx>=0.24.0",
        "black>=23.7.0",
        "isort>=5.12.0",
        "flake8>=6.0.0",
        "mypy>=1.5.0",
    ],
}

EXTRAS_REQUIRE["test"] = [
    dep for dep in EXTRAS_REQUIRE["dev"]
    if dep.startswith(("pytest", "httpx"))
]

# Console scripts entry points
CONSOLE_SCRIPTS = [
    "cors-server=cors_wrapper.api.__main__:main",
]

# Project classifiers
CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Framework :: FastAPI",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

# Project keywords
KEYWORDS = [
    "cors", "preflight", "asgi", "middleware", "fastapi", "starlette", "http",
]

setup(
    name="cors-wrapper",
    version=get_version(),
    description="CORS response headers and preflight handling for ASGI applications",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",

    # Package configuration
    packages=find_packages(where="src"),
    package_dir={"": "src"},

    # Python version requirement
    python_requires=">=3.8",

    # Dependencies
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,

    # Console scripts
    entry_points={
        "console_scripts": CONSOLE_SCRIPTS,
    },

    # Metadata
    classifiers=CLASSIFIERS,
    keywords=", ".join(KEYWORDS),
    license="MIT",

    # Options
    zip_safe=False,

    # Platform compatibility
    platforms=["any"],
)
