"""
CORS Policy - Immutable policy object and the options used to build it

A policy is assembled once at start-up from a sequence of configuration
options, each of which sets exactly one field. Options are applied in the
order given, so a later option replaces an earlier one on the same field.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, List, Optional, Tuple, Union
from loguru import logger


ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"
ALLOW_METHODS_HEADER = "Access-Control-Allow-Methods"
ALLOW_HEADERS_HEADER = "Access-Control-Allow-Headers"
MAX_AGE_HEADER = "Access-Control-Max-Age"

LIST_SEPARATOR = ", "

Duration = Union[timedelta, int, float]


@dataclass(frozen=True)
class CorsPolicy:
    """Configured CORS values, emitted verbatim as response headers"""
    allowed_origins: str = ""
    allowed_methods: str = ""
    allowed_headers: str = ""
    max_age: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """True when no field is configured"""
        return not (
            self.allowed_origins
            or self.allowed_methods
            or self.allowed_headers
            or self.max_age is not None
        )

    def header_items(self) -> List[Tuple[str, str]]:
        """
        Headers sent on every response

        Returns:
            (name, value) pairs in emission order, skipping empty fields
        """
        items = []
        if self.allowed_origins:
            items.append((ALLOW_ORIGIN_HEADER, self.allowed_origins))
        if self.allowed_methods:
            items.append((ALLOW_METHODS_HEADER, self.allowed_methods))
        if self.allowed_headers:
            items.append((ALLOW_HEADERS_HEADER, self.allowed_headers))
        return items

    def preflight_items(self) -> List[Tuple[str, str]]:
        """Headers sent only on preflight responses"""
        # Zero is a configured value and is emitted as "0"
        if self.max_age is None:
            return []
        return [(MAX_AGE_HEADER, str(self.max_age))]


class PolicyBuilder:
    """Mutable policy under construction"""

    def __init__(self):
        self._allowed_origins = ""
        self._allowed_methods = ""
        self._allowed_headers = ""
        self._max_age: Optional[int] = None

    def origins(self, *origins: str) -> "PolicyBuilder":
        self._allowed_origins = LIST_SEPARATOR.join(origins)
        return self

    def methods(self, *methods: str) -> "PolicyBuilder":
        self._allowed_methods = LIST_SEPARATOR.join(methods)
        return self

    def headers(self, *headers: str) -> "PolicyBuilder":
        self._allowed_headers = LIST_SEPARATOR.join(headers)
        return self

    def max_age(self, age: Duration) -> "PolicyBuilder":
        self._max_age = duration_to_seconds(age)
        return self

    def apply(self, *options: "ConfigOption") -> "PolicyBuilder":
        """Apply configuration options in order"""
        for option in options:
            option(self)
        return self

    def build(self) -> CorsPolicy:
        return CorsPolicy(
            allowed_origins=self._allowed_origins,
            allowed_methods=self._allowed_methods,
            allowed_headers=self._allowed_headers,
            max_age=self._max_age,
        )


ConfigOption = Callable[[PolicyBuilder], None]


def duration_to_seconds(age: Duration) -> int:
    """
    Convert a duration to whole seconds, truncating toward zero

    Args:
        age: timedelta, or a number of seconds

    Returns:
        Whole seconds (negative durations stay negative)
    """
    if isinstance(age, timedelta):
        return int(age.total_seconds())
    return int(age)


def with_origins(*origins: str) -> ConfigOption:
    """Option setting the origins sent in Access-Control-Allow-Origin"""
    def option(builder: PolicyBuilder) -> None:
        builder.origins(*origins)
    return option


def with_methods(*methods: str) -> ConfigOption:
    """Option setting the methods sent in Access-Control-Allow-Methods"""
    def option(builder: PolicyBuilder) -> None:
        builder.methods(*methods)
    return option


def with_headers(*headers: str) -> ConfigOption:
    """Option setting the header names sent in Access-Control-Allow-Headers"""
    def option(builder: PolicyBuilder) -> None:
        builder.headers(*headers)
    return option


def with_max_age(age: Duration) -> ConfigOption:
    """
    Option setting how long a preflight result may be cached

    Args:
        age: timedelta or seconds; fractions of a second are dropped
    """
    def option(builder: PolicyBuilder) -> None:
        builder.max_age(age)
    return option


def build_policy(*options: ConfigOption) -> CorsPolicy:
    """
    Build an immutable policy from configuration options

    Args:
        options: Options applied in order; later ones win on the same field

    Returns:
        The built policy. With no options every field is empty.
    """
    policy = PolicyBuilder().apply(*options).build()
    logger.debug(f"CORS policy built: {policy}")
    return policy
