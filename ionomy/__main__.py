#!/usr/bin/env python3
"""
Call an Ionomy endpoint from the shell and print the data payload as JSON.

Credentials and the API URL are read from IONOMY_* environment variables
(see ionomy.core.config).

Usage examples:
  python -m ionomy markets
  python -m ionomy order-book btc-hive --type bid
  python -m ionomy balance hive
  python -m ionomy limit-buy btc-hive 1 0.00005
"""

import argparse
import asyncio
import json
import sys
from typing import Any, List, Optional

import aiohttp

from ionomy.api_client import ORDER_BOOK_TYPES, IonomyAPIClient
from ionomy.core.config import settings, validate_configuration
from ionomy.core.errors import ApiError, ArgumentError
from ionomy.core.logging import set_log_level, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="ionomy", description="Call an Ionomy API endpoint.")
    p.add_argument("--api", default=None, help="API base URL (default: IONOMY_API_URL)")
    p.add_argument("--log-level", default=None, help="Log level (default: IONOMY_LOG_LEVEL)")
    sub = p.add_subparsers(dest="command", required=True)

    for name in ("markets", "currencies", "market-summaries", "balances"):
        sub.add_parser(name)

    for name in ("market-summary", "market-history", "open-orders", "order-history"):
        sub.add_parser(name).add_argument("market")

    for name in ("balance", "deposit-address", "deposit-history", "withdrawal-history"):
        sub.add_parser(name).add_argument("currency")

    for name in ("cancel-order", "order"):
        sub.add_parser(name).add_argument("order_id")

    book = sub.add_parser("order-book")
    book.add_argument("market")
    book.add_argument("--type", default="both", choices=ORDER_BOOK_TYPES)

    for name in ("limit-buy", "limit-sell"):
        order = sub.add_parser(name)
        order.add_argument("market")
        order.add_argument("amount")
        order.add_argument("price")

    withdraw = sub.add_parser("withdraw")
    withdraw.add_argument("currency")
    withdraw.add_argument("amount")
    withdraw.add_argument("address")

    return p.parse_args(argv)


def dispatch(client: IonomyAPIClient, args: argparse.Namespace):
    """Map the parsed command onto the client method and return its awaitable"""
    method = getattr(client, args.command.replace("-", "_"))
    values = {
        key: value for key, value in vars(args).items()
        if key not in ("api", "log_level", "command")
    }
    return method(**values)


async def run(args: argparse.Namespace) -> Any:
    overrides = {"api": args.api} if args.api else {}
    async with IonomyAPIClient.from_settings(settings, **overrides) as client:
        return await dispatch(client, args)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(log_level=settings.log_level)
    if args.log_level:
        set_log_level(args.log_level)

    try:
        validate_configuration()
        result = asyncio.run(run(args))
    except (ArgumentError, ApiError, ValueError) as e:
        logger.error(str(e))
        return 1
    except aiohttp.ClientError as e:
        logger.error(f"Request failed: {e}")
        return 2

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
