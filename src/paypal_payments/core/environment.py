"""
Configuration sources for the PayPal settings pipeline.

The helpers understand .env files, allow callers to layer overrides, and
expose small source objects whose ``load()`` returns the raw mapping fed into
:class:`paypal_payments.core.config.ConfigurationValidator`.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .config import ConfigError

__all__ = [
    "EnvironmentConfigSource",
    "PayPalEnvironment",
    "StaticConfigSource",
    "build_environment",
]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip()
    return values


def _parse_bool(raw_value: str, field_name: str) -> bool:
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{field_name} must be a boolean, got '{raw_value}'")


@dataclass(frozen=True)
class PayPalEnvironment:
    """
    A resolved set of environment variables used to configure PayPal.
    """

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> PayPalEnvironment:
    """
    Assemble a :class:`PayPalEnvironment` from multiple sources.

    ``base`` defaults to :data:`os.environ`. ``env_file`` is optional; set it to
    ``None`` to skip file loading entirely. ``overrides`` always win.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _parse_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return PayPalEnvironment(variables=merged)


def _credential_block(environment: PayPalEnvironment, mode: str) -> Dict[str, str]:
    prefix = f"PAYPAL_{mode.upper()}_"
    return {
        "client_id": environment.get(prefix + "CLIENT_ID", ""),
        "client_secret": environment.get(prefix + "CLIENT_SECRET", ""),
        "app_id": environment.get(prefix + "APP_ID", ""),
    }


@dataclass
class EnvironmentConfigSource:
    """
    Build the raw PayPal configuration from ``PAYPAL_*`` variables.

    Unset variables fall back to the same defaults the package documents for
    a fresh install: sandbox mode, ``Sale``, ``USD``, ``en_US`` and SSL
    validation switched on.
    """

    env_file: Optional[str] = ".env"
    base: Optional[Mapping[str, str]] = None
    overrides: Optional[Mapping[str, str]] = None

    def load(self) -> Dict[str, Any]:
        environment = build_environment(
            env_file=self.env_file,
            base=self.base,
            overrides=self.overrides,
        )
        return {
            "mode": environment.get("PAYPAL_MODE", "sandbox"),
            "sandbox": _credential_block(environment, "sandbox"),
            "live": _credential_block(environment, "live"),
            "payment_action": environment.get("PAYPAL_PAYMENT_ACTION", "Sale"),
            "currency": environment.get("PAYPAL_CURRENCY", "USD"),
            "notify_url": environment.get("PAYPAL_NOTIFY_URL", ""),
            "locale": environment.get("PAYPAL_LOCALE", "en_US"),
            "validate_ssl": _parse_bool(
                environment.get("PAYPAL_VALIDATE_SSL", "true"),
                "PAYPAL_VALIDATE_SSL",
            ),
        }


@dataclass
class StaticConfigSource:
    """Serve a fixed configuration mapping, e.g. one loaded by a host app."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def load(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self.values))
