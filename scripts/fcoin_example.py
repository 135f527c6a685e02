#!/usr/bin/env python3
"""
Walk through the Fcoin client end to end.

Public endpoints always run. Private endpoints (balance, order placement,
lookup and cancellation) run only when FCOIN_API_KEY / FCOIN_SECRET_KEY are
configured and --trade is passed.

Usage examples:
  python scripts/fcoin_example.py
  python scripts/fcoin_example.py --symbol ethusdt --depth L100
  python scripts/fcoin_example.py --trade --price 1.0 --amount 1.0
  python scripts/fcoin_example.py --debug
"""

import argparse
import json
import sys

from core.config import settings, validate_configuration
from core.logging import set_log_level
from core.utils.time import to_utc_datetime
from exchanges.fcoin import FcoinAPIClient


def show(title: str, result) -> None:
    """Print one call outcome."""
    print("=" * 60)
    print(title)
    print("=" * 60)
    if result:
        print(json.dumps(result.data, indent=2)[:800])
    else:
        print(f"FAILED: code={result.error.code} message={result.error.message}")
    print()


def main() -> int:
    parser = argparse.ArgumentParser(description="Exercise the Fcoin REST client")
    parser.add_argument("--symbol", default="btcusdt", help="Trading pair (default: btcusdt)")
    parser.add_argument("--depth", default="L20", help="Depth level: L20, L100 or full")
    parser.add_argument("--trade", action="store_true", help="Also place and cancel a limit buy order")
    parser.add_argument("--price", default="1.0", help="Limit price for --trade")
    parser.add_argument("--amount", default="1.0", help="Order amount for --trade")
    parser.add_argument("--debug", action="store_true", help="Log every request and response")
    args = parser.parse_args()

    if args.debug:
        set_log_level("DEBUG")

    validate_configuration()
    client = FcoinAPIClient.instance()

    result = client.get_server_time()
    show("get_server_time", result)
    if result:
        print(f"Server time (UTC): {to_utc_datetime(result.data['data'])}\n")

    show("get_currencies", client.get_currencies())
    show("get_symbols", client.get_symbols())
    show("get_tick_data", client.get_tick_data(args.symbol))
    show("get_market_depth", client.get_market_depth(args.symbol, args.depth))
    show("get_market_transaction", client.get_market_transaction(args.symbol, limit=20))

    if not args.trade:
        return 0
    if not settings.has_fcoin_credentials:
        print("[Info] --trade needs FCOIN_API_KEY and FCOIN_SECRET_KEY; skipping private endpoints.")
        return 0

    show("get_balance", client.get_balance())
    show("get_orders_list", client.get_orders_list(args.symbol, "submitted"))

    order = client.create_order(args.symbol, "buy", args.price, args.amount, "limit")
    show("create_order", order)
    if not order:
        return 1

    order_id = order.data["data"]
    show("get_order", client.get_order(order_id))
    show("get_order_transaction", client.get_order_transaction(order_id))
    show("cancel_order", client.cancel_order(order_id))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[Info] Interrupted. Bye.")
        sys.exit(0)
