"""
Command-line interface for checking PayPal configuration.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence, Tuple

from .api import ConfigError, EnvironmentConfigSource, load_settings


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _redact(value: object) -> str:
    text = str(value)
    if len(text) <= 4:
        return "****"
    return "****" + text[-4:]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paypal-config",
        description="Validate PayPal API configuration from the environment",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYPAL_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    source = EnvironmentConfigSource(
        env_file=args.env_file,
        overrides=_collect_overrides(args.set or ()),
    )

    try:
        settings = load_settings(source=source)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    credentials = settings.get_configuration()
    logging.info(
        "PayPal configuration is valid: mode=%s currency=%s locale=%s",
        settings.mode,
        settings.get_currency(),
        settings.locale,
    )
    logging.info("Client id: %s", _redact(credentials["client_id"]))
    for key, value in settings.options["headers"].items():
        logging.info("Header %s: %s", key, value)
    return 0


def main() -> None:
    sys.exit(run_cli())
