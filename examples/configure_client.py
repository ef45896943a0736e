"""
Minimal script that builds a configured PayPal HTTP client from the environment.
"""

from __future__ import annotations

import argparse
import logging
import sys

from paypal_payments import ConfigError, EnvironmentConfigSource, create_paypal_client


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Configure a PayPal client from PAYPAL_* settings")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYPAL_* settings",
    )
    parser.add_argument(
        "--currency",
        help="Override the default currency (e.g. EUR)",
    )
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Extra request header to send with every call",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    overrides = {"PAYPAL_CURRENCY": args.currency} if args.currency else None
    source = EnvironmentConfigSource(env_file=args.env_file, overrides=overrides)

    try:
        client = create_paypal_client(source=source)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    headers = dict(item.split("=", 1) for item in args.header if "=" in item)
    client.settings.set_request_headers(headers).set_page_size(10)
    client.apply_headers(client.settings.options["headers"])

    logging.info(
        "Client ready for %s (currency %s, page size %s)",
        client.api_url,
        client.settings.get_currency(),
        client.settings.page_size,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
