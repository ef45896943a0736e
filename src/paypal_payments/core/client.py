"""
HTTP client collaborator that applies validated settings to a requests session.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import requests

from .config import ConfigError, ConfigurationValidator

__all__ = [
    "API_URLS",
    "PayPalHttpClient",
]

API_URLS = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "live": "https://api-m.paypal.com",
}

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class PayPalHttpClient:
    """
    Thin wrapper around a :class:`requests.Session` configured from settings.

    The client sends single requests only; it does not retry and does not
    fetch or refresh access tokens.
    """

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self.settings: Optional[ConfigurationValidator] = None
        self._api_url: Optional[str] = None

    @property
    def api_url(self) -> str:
        if self._api_url is None:
            raise ConfigError("HTTP client has not been configured")
        return self._api_url

    def configure(self, settings: ConfigurationValidator) -> None:
        """
        Apply mode, SSL policy and headers from ``settings``.

        The remaining request options are read again on every :meth:`send`,
        so later changes through ``settings.set_options`` take effect.
        """
        self.settings = settings
        self._api_url = API_URLS[settings.mode]

        if isinstance(settings.validate_ssl, bool):
            self.session.verify = settings.validate_ssl

        self.session.headers.update(_DEFAULT_HEADERS)
        self._sync_headers()

    def apply_headers(self, headers: Mapping[str, str]) -> None:
        self.session.headers.update(dict(headers))

    def _sync_headers(self) -> None:
        headers = self.settings.options.get("headers") or {}
        if "Authorization" not in headers:
            self.session.headers.pop("Authorization", None)
        self.apply_headers(headers)

    def _request_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"timeout": self.timeout}
        if self.settings is not None:
            options.update(
                (key, value)
                for key, value in self.settings.options.items()
                if key != "headers"
            )
        return options

    def send(
        self,
        method: str,
        path: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.api_url}/{path.lstrip('/')}"
        if self.settings is not None:
            # headers may have changed since configure()
            self._sync_headers()

        logging.info("Sending %s request to %s", method.upper(), url)
        request_options = self._request_options()
        request_options.update(json=json_body, params=params)
        response = self.session.request(method.upper(), url, **request_options)
        if response.status_code >= 400:
            raise RuntimeError(
                f"PayPal responded with {response.status_code}: {response.text}"
            )
        if not response.text:
            return {}
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Failed to parse JSON from PayPal at {url}: {response.text}"
            ) from exc
