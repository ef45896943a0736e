"""
Public, high-level helpers for wiring PayPal settings to an HTTP client.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import requests

from .core.client import API_URLS, PayPalHttpClient
from .core.config import (
    ALLOWED_CURRENCIES,
    ALLOWED_MODES,
    ConfigError,
    ConfigurationError,
    ConfigurationValidator,
)
from .core.environment import (
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
    "create_paypal_client",
    "load_settings",
]


def _resolve_raw_config(
    config: Optional[Mapping[str, Any]],
    source: Optional[Any],
) -> Optional[Mapping[str, Any]]:
    if config:
        return config
    if source is not None:
        return source.load()
    return config


def load_settings(
    config: Optional[Mapping[str, Any]] = None,
    *,
    source: Optional[Any] = None,
    http_client: Optional[Any] = None,
) -> ConfigurationValidator:
    """
    Validate a configuration and return the resulting settings.

    ``source`` is any object with a ``load()`` method (for example
    :class:`EnvironmentConfigSource`). It is consulted once, and only when
    ``config`` is empty.
    """
    settings = ConfigurationValidator(http_client=http_client)
    settings.set_api_credentials(_resolve_raw_config(config, source))
    return settings


def create_paypal_client(
    config: Optional[Mapping[str, Any]] = None,
    *,
    source: Optional[Any] = None,
    session: Optional[requests.Session] = None,
    timeout: float = 30,
) -> PayPalHttpClient:
    """
    Construct a :class:`PayPalHttpClient` configured from validated settings.

    The settings remain reachable through ``client.settings`` so headers can be
    adjusted after construction.
    """
    client = PayPalHttpClient(session=session, timeout=timeout)
    load_settings(config, source=source, http_client=client)
    return client
