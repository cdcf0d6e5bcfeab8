"""
cors-wrapper core module

Contains the CORS policy, the options that build it, and configuration loading.
"""

from .policy import (
    CorsPolicy, PolicyBuilder, ConfigOption, build_policy,
    with_origins, with_methods, with_headers, with_max_age
)
from .config_manager import ConfigManager, CorsSettings, get_config_manager

__all__ = [
    # Policy
    'CorsPolicy',
    'PolicyBuilder',
    'ConfigOption',
    'build_policy',
    'with_origins',
    'with_methods',
    'with_headers',
    'with_max_age',

    # Configuration Management
    'ConfigManager',
    'CorsSettings',
    'get_config_manager',
]
