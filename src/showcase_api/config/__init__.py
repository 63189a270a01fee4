"""Configuration helpers for showcase-api."""

from .base import ConfigurationError, ConfigValidationError, ConfigValidationResult, SerializationError
from .environment import Environment, HttpConfig, ShowcaseConfig, http_config

__all__ = [
    "ConfigValidationError",
    "ConfigValidationResult",
    "ConfigurationError",
    "Environment",
    "HttpConfig",
    "SerializationError",
    "ShowcaseConfig",
    "http_config",
]
