"""Command-line interface for the Shoper API client."""

from __future__ import annotations

import argparse
import sys
from typing import Any

import orjson
from loguru import logger

from shoper_api.clients import ShoperClient, is_failure
from shoper_api.settings import Settings, get_settings


def configure_logging(settings: Settings) -> None:
    """Route loguru output to stderr at the configured level."""

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


def command_check_config(args: argparse.Namespace) -> int:
    """Print active configuration."""

    settings = get_settings()
    print("Shoper API configuration")
    print(f"Shop URL: {settings.shop_url}")
    print(f"Client ID: {settings.client_id}")
    print(f"Client secret: {_mask(settings.client_secret)}")
    print(f"Timeout: {settings.timeout}s")
    print(f"Log level: {settings.log_level}")
    return 0


def command_call(args: argparse.Namespace) -> int:
    """Perform a single API call and print the decoded payload."""

    settings = get_settings()
    configure_logging(settings)
    body: Any = None
    if args.data is not None:
        try:
            body = orjson.loads(args.data)
        except orjson.JSONDecodeError as exc:
            print(f"--data is not valid JSON: {exc}", file=sys.stderr)
            return 2

    with ShoperClient.from_settings(settings) as client:
        result = client.call(args.endpoint, args.method, body)

    if is_failure(result):
        print(str(result), file=sys.stderr)
        return 1
    sys.stdout.write(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shoper REST API command-line tools.")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check-config", help="Print active configuration.")
    check.set_defaults(func=command_check_config)

    call = sub.add_parser("call", help="Call an API endpoint and print the JSON response.")
    call.add_argument("endpoint", help="Endpoint relative to /webapi/rest/, e.g. products/42.")
    call.add_argument(
        "--method",
        "-X",
        type=str.upper,
        choices=["GET", "POST", "PUT", "DELETE"],
        default="GET",
        help="HTTP method.",
    )
    call.add_argument("--data", "-d", type=str, default=None, help="JSON request body for POST/PUT.")
    call.set_defaults(func=command_call)

    return parser


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


def _mask(secret: str) -> str:
    if len(secret) <= 4:
        return "*" * len(secret)
    return secret[:2] + "*" * (len(secret) - 4) + secret[-2:]


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
