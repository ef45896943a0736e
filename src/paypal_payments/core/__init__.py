"""
Core primitives that validate PayPal settings and hand them to the HTTP layer.
"""

from .client import API_URLS, PayPalHttpClient
from .config import (
    ALLOWED_CURRENCIES,
    ALLOWED_MODES,
    ConfigError,
    ConfigurationError,
    ConfigurationValidator,
)
from .environment import (
    EnvironmentConfigSource,
    PayPalEnvironment,
    StaticConfigSource,
    build_environment,
)

__all__ = [
    "ALLOWED_CURRENCIES",
    "ALLOWED_MODES",
    "API_URLS",
    "ConfigError",
    "ConfigurationError",
    "ConfigurationValidator",
    "EnvironmentConfigSource",
    "PayPalEnvironment",
    "PayPalHttpClient",
    "StaticConfigSource",
    "build_environment",
]
