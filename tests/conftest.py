"""
Shared fixtures for the paypal_payments test-suite.
"""

import json
import os
from typing import Any, Dict, List, Optional

import pytest


@pytest.fixture(autouse=True)
def clean_paypal_environment(monkeypatch):
    """Keep PAYPAL_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("PAYPAL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sandbox_config() -> Dict[str, Any]:
    return {
        "mode": "sandbox",
        "sandbox": {
            "client_id": "sandbox-client-id",
            "client_secret": "sandbox-client-secret",
            "app_id": "APP-80W284485P519543T",
        },
        "live": {
            "client_id": "live-client-id",
            "client_secret": "live-client-secret",
        },
        "payment_action": "Sale",
        "locale": "en_US",
        "validate_ssl": True,
    }


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = '{"id": "ORDER-1"}'):
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Stand-in for requests.Session that records outbound requests."""

    def __init__(self, response: Optional[FakeResponse] = None):
        self.headers: Dict[str, str] = {}
        self.verify = True
        self.response = response or FakeResponse()
        self.requests: List[Dict[str, Any]] = []

    def request(self, method, url, **kwargs):
        self.requests.append(
            {"method": method, "url": url, "headers": dict(self.headers), **kwargs}
        )
        return self.response


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
