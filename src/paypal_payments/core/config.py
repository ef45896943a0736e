"""
Validation and bookkeeping for PayPal API credentials and request options.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

__all__ = [
    "ALLOWED_CURRENCIES",
    "ALLOWED_MODES",
    "ConfigError",
    "ConfigurationError",
    "ConfigurationValidator",
]

ALLOWED_MODES: Tuple[str, ...] = ("sandbox", "live")

ALLOWED_CURRENCIES: Tuple[str, ...] = (
    "AUD",
    "BRL",
    "CAD",
    "CNY",
    "CZK",
    "DKK",
    "EUR",
    "HKD",
    "HUF",
    "ILS",
    "INR",
    "JPY",
    "MYR",
    "MXN",
    "NOK",
    "NZD",
    "PHP",
    "PLN",
    "GBP",
    "SGD",
    "SEK",
    "CHF",
    "TWD",
    "THB",
    "USD",
    "RUB",
)

DEFAULT_CURRENCY = "USD"
DEFAULT_PAYMENT_ACTION = "Sale"
DEFAULT_LOCALE = "en_US"
DEFAULT_VALIDATE_SSL = True

_REQUIRED_CREDENTIALS = ("client_id", "client_secret")

_INVALID_CONFIGURATION = (
    "Invalid configuration provided. Please provide valid configuration for "
    "PayPal API."
)


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


ConfigurationError = ConfigError


def _is_empty(value: Any) -> bool:
    # a literal "0" counts as empty too
    return not value or value == "0"


def _passthrough(raw: Mapping[str, Any], key: str, default: Any) -> Any:
    value = raw.get(key)
    return default if value is None else value


def _resolve_mode(raw: Mapping[str, Any]) -> str:
    mode = raw.get("mode")
    if _is_empty(mode):
        raise ConfigError(_INVALID_CONFIGURATION)
    if mode not in ALLOWED_MODES:
        logging.warning("Unknown PayPal mode %r, falling back to 'live'", mode)
        return "live"
    return mode


def _resolve_credentials(raw: Mapping[str, Any], mode: str) -> Dict[str, Any]:
    block = raw.get(mode)
    if _is_empty(block):
        raise ConfigError(_INVALID_CONFIGURATION)
    if not isinstance(block, Mapping):
        raise ConfigError(f"The '{mode}' configuration block must be a mapping")

    for item in _REQUIRED_CREDENTIALS:
        if _is_empty(block.get(item)):
            raise ConfigError(
                f"{item} missing from the provided configuration. "
                f"Please add your application {item}."
            )
    return dict(block)


def _positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"{field_name} must be a positive integer, got {value!r}")
    return value


class ConfigurationValidator:
    """
    Holds validated PayPal settings and the mutable request options.

    A fresh instance is unconfigured. :meth:`set_api_credentials` validates a
    raw mapping and commits the result only when every rule passes, so a
    failed call never leaves partially applied settings behind. Headers and
    other request options can be adjusted afterwards through the fluent
    setters, each of which returns the instance.

    Instances are not thread-safe; callers sharing one across threads must
    serialise header and option updates themselves.

    ``http_client`` is an optional collaborator exposing
    ``configure(settings)``. It is invoked after every successful
    :meth:`set_api_credentials` call.
    """

    allowed_modes = ALLOWED_MODES

    def __init__(self, *, http_client: Optional[Any] = None) -> None:
        self.http_client = http_client
        self._mode: Optional[str] = None
        self._credentials: Dict[str, Any] = {}
        self._currency: Optional[str] = None
        self._payment_action: Optional[Any] = None
        self._locale: Optional[str] = None
        self._validate_ssl: Optional[Any] = None
        self._notify_url: str = ""
        self._access_token: Optional[str] = None
        self._options: Dict[str, Any] = {"headers": {}}
        self.page_size = 20
        self.current_page = 1
        self.show_totals = True

    def __repr__(self) -> str:
        return (
            f"ConfigurationValidator(mode={self._mode!r}, "
            f"currency={self._currency!r}, "
            f"locale={self._locale!r}, "
            f"credentials=***REDACTED***)"
        )

    @property
    def is_configured(self) -> bool:
        return self._mode is not None

    @property
    def mode(self) -> Optional[str]:
        return self._mode

    @property
    def payment_action(self) -> Optional[Any]:
        return self._payment_action

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @property
    def validate_ssl(self) -> Optional[Any]:
        return self._validate_ssl

    @property
    def notify_url(self) -> str:
        return self._notify_url

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def options(self) -> Dict[str, Any]:
        """The live request options mapping consumed by the HTTP layer."""
        return self._options

    def set_api_credentials(self, raw: Optional[Mapping[str, Any]]) -> None:
        """
        Validate ``raw`` and make it the active configuration.

        ``mode`` must be present; an unrecognised value is coerced to
        ``"live"``, which means the credentials are then looked up under
        ``raw["live"]`` and a configuration that only carries a ``sandbox``
        block fails on the missing live block. ``currency`` defaults to
        ``USD`` when absent. ``payment_action``, ``locale`` and
        ``validate_ssl`` default to ``"Sale"``, ``"en_US"`` and ``True``.
        ``Accept-Language`` always follows ``locale``, even when
        ``options["headers"]`` carries its own value. Reconfiguring with a
        different mode or credential block clears the stored access token.

        Raises :class:`ConfigError` naming the first rule that failed.
        """
        if not raw:
            raise ConfigError(_INVALID_CONFIGURATION)

        mode = _resolve_mode(raw)
        credentials = _resolve_credentials(raw, mode)

        locale = _passthrough(raw, "locale", DEFAULT_LOCALE)
        currency = _passthrough(raw, "currency", DEFAULT_CURRENCY)
        if currency not in ALLOWED_CURRENCIES:
            raise ConfigError("Currency is not supported by PayPal.")

        extra_options = raw.get("options") or {}
        if not isinstance(extra_options, Mapping):
            raise ConfigError("options must be a mapping")
        if not isinstance(extra_options.get("headers") or {}, Mapping):
            raise ConfigError("options['headers'] must be a mapping")

        options = {key: value for key, value in self._options.items() if key != "headers"}
        options.update(
            (key, value) for key, value in extra_options.items() if key != "headers"
        )
        headers = dict(self._options.get("headers") or {})
        if self.is_configured and (mode, credentials) != (self._mode, self._credentials):
            # drop a token issued for the previous credentials
            headers.pop("Authorization", None)
            access_token = None
        else:
            access_token = self._access_token
        headers.update(extra_options.get("headers") or {})
        headers["Accept-Language"] = locale
        options["headers"] = headers

        self._mode = mode
        self._credentials = credentials
        self._payment_action = _passthrough(raw, "payment_action", DEFAULT_PAYMENT_ACTION)
        self._locale = locale
        self._validate_ssl = _passthrough(raw, "validate_ssl", DEFAULT_VALIDATE_SSL)
        self._notify_url = _passthrough(raw, "notify_url", "")
        self._access_token = access_token
        self._options = options
        self.set_currency(currency)

        if self.http_client is not None:
            self.http_client.configure(self)

    def get_configuration(self) -> Dict[str, Any]:
        """Return a copy of the credential block for the active mode."""
        if not self.is_configured:
            raise ConfigError("API credentials have not been configured")
        return copy.deepcopy(self._credentials)

    def allowed_currencies(self) -> Tuple[str, ...]:
        return ALLOWED_CURRENCIES

    def set_currency(self, currency: str = DEFAULT_CURRENCY) -> "ConfigurationValidator":
        if currency not in ALLOWED_CURRENCIES:
            raise ConfigError("Currency is not supported by PayPal.")
        self._currency = currency
        return self

    def get_currency(self) -> str:
        if self._currency is None:
            raise ConfigError("Currency has not been set")
        return self._currency

    def set_request_header(self, key: str, value: str) -> "ConfigurationValidator":
        self._options.setdefault("headers", {})[key] = value
        return self

    def set_request_headers(self, headers: Mapping[str, str]) -> "ConfigurationValidator":
        for key, value in headers.items():
            self.set_request_header(key, value)
        return self

    def get_request_header(self, key: str) -> str:
        headers = self._options.get("headers") or {}
        if key not in headers:
            raise ConfigError("Options header is not set.")
        return headers[key]

    def set_options(self, options: Mapping[str, Any]) -> "ConfigurationValidator":
        """
        Merge arbitrary request options.

        A ``headers`` entry is applied header by header, so existing headers
        are updated rather than replaced. Every other key is forwarded to the
        HTTP layer as a keyword argument of each outbound request, e.g.
        ``timeout`` or ``proxies``.
        """
        for key, value in options.items():
            if key == "headers":
                self.set_request_headers(value or {})
            else:
                self._options[key] = value
        return self

    def set_access_token(
        self, token: str, token_type: str = "Bearer"
    ) -> "ConfigurationValidator":
        if not token:
            raise ConfigError("Access token must not be empty")
        self._access_token = token
        return self.set_request_header("Authorization", f"{token_type} {token}")

    def set_page_size(self, size: int) -> "ConfigurationValidator":
        self.page_size = _positive_int(size, "page_size")
        return self

    def set_current_page(self, page: int) -> "ConfigurationValidator":
        self.current_page = _positive_int(page, "current_page")
        return self

    def set_show_totals(self, show_totals: bool) -> "ConfigurationValidator":
        self.show_totals = bool(show_totals)
        return self

    def pagination_params(self) -> Dict[str, Any]:
        return {
            "page_size": self.page_size,
            "page": self.current_page,
            "total_required": "true" if self.show_totals else "false",
        }
