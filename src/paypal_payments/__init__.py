"""
Public facade for the PayPal configuration package.

The module re-exports the most useful pieces for integrators so they can
``from paypal_payments import ...`` without navigating the package.
"""

from .api import create_paypal_client, load_settings
from .core import (
    ALLOWED_CURRENCIES,
    ALLOWED_MODES,
    API_URLS,
    ConfigError,
    ConfigurationError,
    ConfigurationValidator,
    EnvironmentConfigSource,
    PayPalEnvironment,
    PayPalHttpClient,
    StaticConfigSource,
    build_environment,
)

__version__ = "0.1.0"

__all__ = (
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
    "create_paypal_client",
    "load_settings",
    "__version__",
)
