"""
Exceptions raised by cors-wrapper
"""


class CorsWrapperError(Exception):
    """Base class for cors-wrapper errors"""


class ConfigurationError(CorsWrapperError):
    """Configuration data that cannot be turned into policy options"""

    def __init__(self, message: str, source: str = ""):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
