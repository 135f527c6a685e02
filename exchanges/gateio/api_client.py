"""
Gate.io REST API Client

This module provides a synchronous HTTP client for the Gate.io API2 REST API.
It handles:
- Request signing (HMAC-SHA512 over the decoded form body, see core.signing.GateioSigner)
- Canonical form-encoded bodies and query strings
- Response normalization (a non-zero `code` field means failure)

API Documentation:
    https://gate.io/api2

Authentication Headers (every private endpoint is a signed POST):
    KEY           API key
    SIGN          Request signature
    Content-Type  application/x-www-form-urlencoded;charset=UTF-8

Usage:
    client = GateioAPIClient.instance("my-key", "my-secret")
    result = client.buy("eth_btc", "0.05", "1")
    if not result:
        print(client.get_error())
"""

import json
from typing import Any, Dict, Mapping, Optional

import httpx

from core.canonical import canonicalize
from core.client import BaseAPIClient
from core.config import settings
from core.errors import GATEIO_ERRORS
from core.schemas import ApiResult, Credential, SignedRequest
from core.signing import GateioSigner
from core.utils.time import current_timestamp


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"

# cancelAllOrders type: 0 = sell, 1 = buy, -1 = any side
CANCEL_ALL_TYPES = (0, 1, -1)


class GateioAPIClient(BaseAPIClient):
    """
    Synchronous HTTP client for the Gate.io API2 REST API

    Public market-data endpoints are unsigned GETs; account and trading
    endpoints are signed form POSTs. No explicit timeout is configured, so the
    httpx default applies.

    Attributes:
        name: Exchange identifier ("gateio")

    Example:
        >>> client = GateioAPIClient()
        >>> client.get_tickers("ETH_BTC").data["last"]
        '0.0713'
    """

    name = "gateio"
    error_catalog = GATEIO_ERRORS

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        credential = Credential(
            key=key or settings.gateio_api_key,
            secret=secret or settings.gateio_secret_key
        )
        super().__init__(
            credential=credential,
            base_url=base_url or settings.gateio_base_url,
            signer=GateioSigner(credential.secret),
            transport=transport
        )

    # ============================================
    # Request Building
    # ============================================

    def _prepare(self, method: str, path: str, params: Mapping[str, Any], signed: bool) -> SignedRequest:
        payload = canonicalize(params)
        url = f"{self.base_url}{path}"

        headers: Dict[str, str] = {}
        signature = None
        if signed:
            signature = self.signer.sign(method, url, None, payload)
            headers.update({
                "KEY": self.credential.key,
                "SIGN": signature,
                "Content-Type": FORM_CONTENT_TYPE,
            })

        if method == "POST":
            target, content = path, payload
        else:
            target, content = (f"{path}?{payload}" if payload else path), ""

        return SignedRequest(
            method=method,
            path=path,
            url=url,
            target=target,
            payload=payload,
            content=content,
            signature=signature,
            headers=headers
        )

    def _business_error(self, payload: Any):
        """Only a present, non-zero `code` is an error; many responses carry no code at all."""
        if not isinstance(payload, dict) or "code" not in payload:
            return None
        code = payload["code"]
        if code in (0, "0", None):
            return None
        return code, payload.get("message", "")

    def _private(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResult:
        """Signed form POST to a private endpoint."""
        return self.request("POST", path, params, signed=True)

    @staticmethod
    def _pair_path(prefix: str, pair: Optional[str]) -> str:
        return f"{prefix}/{pair.lower()}" if pair else prefix

    # ============================================
    # Public Market Data
    # ============================================

    def get_all_pairs(self) -> ApiResult:
        """
        All supported trading pairs.

        GET https://data.gateio.io/api2/1/pairs
        """
        return self.request("GET", "pairs")

    def get_market_info(self) -> ApiResult:
        """
        Fee, minimum amount and precision of every market.

        GET https://data.gateio.io/api2/1/marketinfo
        """
        return self.request("GET", "marketinfo")

    def get_market_list(self) -> ApiResult:
        """
        Detailed market and currency list (rate, volume, market cap, trend).

        GET https://data.gateio.io/api2/1/marketlist
        """
        return self.request("GET", "marketlist")

    def get_tickers(self, pair: Optional[str] = None) -> ApiResult:
        """
        Latest, highest and lowest prices and volume (all pairs or one pair).

        GET https://data.gateio.io/api2/1/tickers[/CURR_A_CURR_B]
        """
        return self.request("GET", self._pair_path("tickers", pair))

    def get_order_books(self, pair: Optional[str] = None) -> ApiResult:
        """
        Market depth (all pairs or one pair).

        GET https://data.gateio.io/api2/1/orderBook[/CURR_A_CURR_B]
        """
        return self.request("GET", self._pair_path("orderBook", pair))

    def get_trade_history(self, pair: str, trade_id: Optional[str] = None) -> ApiResult:
        """
        Latest 80 trades of a pair, optionally starting after a trade id.

        GET https://data.gateio.io/api2/1/tradeHistory/CURR_A_CURR_B[/TID]
        """
        path = self._pair_path("tradeHistory", pair)
        if trade_id:
            path = f"{path}/{trade_id}"
        return self.request("GET", path)

    def get_candlestick2(self, pair: str, group_sec: int = 60, range_hour: int = 1) -> ApiResult:
        """
        Candles of a pair over the last range_hour hours.

        GET https://data.gateio.io/api2/1/candlestick2/CURR_A_CURR_B?group_sec=..&range_hour=..

        Args:
            pair: Trading pair (e.g., "btc_usdt")
            group_sec: Candle width in seconds, capped at 60
            range_hour: Time range in hours
        """
        group_sec = min(group_sec, 60)
        return self.request("GET", self._pair_path("candlestick2", pair), {
            "group_sec": abs(group_sec),
            "range_hour": abs(range_hour),
        })

    # ============================================
    # Account (signed)
    # ============================================

    def get_balances(self) -> ApiResult:
        """
        Available and locked balances.

        POST https://api.gateio.io/api2/1/private/balances
        """
        return self._private("private/balances")

    def get_deposit_address(self, currency: str) -> ApiResult:
        """
        Deposit address of a currency.

        POST https://api.gateio.io/api2/1/private/depositAddress
        """
        return self._private("private/depositAddress", {"currency": currency.upper()})

    def get_deposits_withdrawals(self, start: int, end: Optional[int] = None) -> ApiResult:
        """
        Deposit and withdrawal history between two epoch timestamps (seconds).

        POST https://api.gateio.io/api2/1/private/depositsWithdrawals

        Args:
            start: Range start
            end: Range end (defaults to now)
        """
        return self._private("private/depositsWithdrawals", {
            "start": start,
            "end": current_timestamp() if end is None else end,
        })

    def withdraw(self, currency: str, amount: str, address: str) -> ApiResult:
        """
        Withdraw funds to an external address.

        POST https://api.gateio.io/api2/1/private/withdraw
        """
        return self._private("private/withdraw", {
            "currency": currency.lower(),
            "amount": amount,
            "address": address.strip(),
        })

    # ============================================
    # Trading (signed)
    # ============================================

    def _place(self, side: str, pair: str, rate: str, amount: str, order_type: str) -> ApiResult:
        return self._private(f"private/{side}", {
            "currencyPair": pair.lower(),
            "rate": rate,
            "amount": amount,
            # only immediate-or-cancel is supported besides the default
            "orderType": "ioc" if order_type == "ioc" else "",
        })

    def buy(self, pair: str, rate: str, amount: str, order_type: str = "") -> ApiResult:
        """
        Place a buy order.

        POST https://api.gateio.io/api2/1/private/buy

        Args:
            pair: Trading pair (e.g., "ltc_btc")
            rate: Price
            amount: Quantity
            order_type: "" (default) or "ioc" (immediate-or-cancel)
        """
        return self._place("buy", pair, rate, amount, order_type)

    def sell(self, pair: str, rate: str, amount: str, order_type: str = "") -> ApiResult:
        """
        Place a sell order.

        POST https://api.gateio.io/api2/1/private/sell
        """
        return self._place("sell", pair, rate, amount, order_type)

    def cancel_order(self, order_number: str, pair: str) -> ApiResult:
        """
        Cancel one order.

        POST https://api.gateio.io/api2/1/private/cancelOrder
        """
        return self._private("private/cancelOrder", {
            "orderNumber": order_number,
            "currencyPair": pair.lower(),
        })

    def cancel_orders(self, orders: Mapping[str, str]) -> ApiResult:
        """
        Cancel several orders at once.

        POST https://api.gateio.io/api2/1/private/cancelOrders

        Args:
            orders: Mapping of order number -> currency pair
        """
        if not isinstance(orders, Mapping):
            return self._reject("orders", orders, ["{order_number: currency_pair}"])

        orders_json = json.dumps(
            [{"orderNumber": number, "currencyPair": pair.lower()} for number, pair in orders.items()],
            separators=(",", ":")
        )
        return self._private("private/cancelOrders", {"orders_json": orders_json})

    def cancel_all_orders(self, pair: str, order_type: int = -1) -> ApiResult:
        """
        Cancel every order of a side (or both sides) on a pair.

        POST https://api.gateio.io/api2/1/private/cancelAllOrders

        Args:
            pair: Trading pair
            order_type: 0 = sell, 1 = buy, -1 = any
        """
        if order_type not in CANCEL_ALL_TYPES or isinstance(order_type, bool):
            return self._reject("order type", order_type, CANCEL_ALL_TYPES)
        return self._private("private/cancelAllOrders", {
            "type": order_type,
            "currencyPair": pair.lower(),
        })

    def get_order(self, order_number: str, pair: str) -> ApiResult:
        """
        Status of one order.

        POST https://api.gateio.io/api2/1/private/getOrder
        """
        return self._private("private/getOrder", {
            "orderNumber": order_number,
            "currencyPair": pair.lower(),
        })

    def open_orders(self, pair: Optional[str] = None) -> ApiResult:
        """
        Currently open orders (all pairs or one pair).

        POST https://api.gateio.io/api2/1/private/openOrders
        """
        return self._private("private/openOrders", {"currencyPair": pair.lower() if pair else None})

    def trade_history(self, pair: str, order_number: str = "") -> ApiResult:
        """
        Fills of the last 24 hours, optionally for a single order.

        POST https://api.gateio.io/api2/1/private/tradeHistory
        """
        return self._private("private/tradeHistory", {
            "currencyPair": pair.lower(),
            "orderNumber": order_number,
        })
