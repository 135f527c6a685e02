"""
Fcoin REST API Client

This module provides a synchronous HTTP client for the Fcoin v2 REST API.
It handles:
- Request signing (HMAC-SHA1, timestamp-bound, see core.signing.FcoinSigner)
- Canonical query strings and JSON request bodies
- Response normalization (`status` == 0 means success)
- Optional CA bundle resolution for TLS verification

API Documentation:
    https://developer.fcoin.com/

Authentication Headers (private endpoints):
    FC-ACCESS-KEY        API key
    FC-ACCESS-SIGNATURE  Request signature
    FC-ACCESS-TIMESTAMP  Milliseconds timestamp (the same value that was signed)
    Content-Type         application/json;charset=UTF-8 (POST only)

Usage:
    client = FcoinAPIClient.instance("my-key", "my-secret")
    result = client.create_order("btcusdt", "buy", "7000.0", "0.01")
    if result:
        order_id = result.data["data"]
    else:
        print(result.error.code, result.error.message)
"""

from typing import Any, Dict, Mapping, Optional

import httpx

from core.canonical import canonicalize, to_json_body
from core.config import settings
from core.errors import FCOIN_ERRORS
from core.schemas import ApiResult, Credential, SignedRequest
from core.signing import FcoinSigner
from core.client import BaseAPIClient
from core.trust import CertificateResolver
from core.utils.time import current_timestamp_ms


JSON_CONTENT_TYPE = "application/json;charset=UTF-8"

ORDER_SIDES = ("buy", "sell")

ORDER_TYPES = ("limit", "market")

ORDER_STATES = (
    "submitted",         # accepted by the matching engine
    "partial_filled",
    "partial_canceled",  # partially filled, remainder canceled
    "filled",
    "canceled",
    "pending_cancel",    # cancel requested, not yet confirmed
)

DEPTH_LEVELS = (
    "L20",   # 20 price levels
    "L100",  # 100 price levels
    "full",  # whole book
)

RESOLUTIONS = (
    "M1", "M3", "M5", "M15", "M30",  # minutes
    "H1", "H4", "H6",                # hours
    "D1", "W1", "MN",                # day, week, month
)


class FcoinAPIClient(BaseAPIClient):
    """
    Synchronous HTTP client for the Fcoin v2 REST API

    Every endpoint method performs one blocking request and returns an ApiResult.
    The decoded JSON body (including the "status" and "data" envelope) is in
    result.data on success.

    Attributes:
        name: Exchange identifier ("fcoin")
        credential: Key, secret, CA bundle path and timeout (default 2 seconds)

    Example:
        >>> client = FcoinAPIClient()
        >>> client.get_server_time().data
        {'status': 0, 'data': 1523690290946}
    """

    name = "fcoin"
    error_catalog = FCOIN_ERRORS

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        cert_pem_path: Optional[str] = None,
        timeout: Optional[float] = None,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        trust_resolver: Optional[CertificateResolver] = None
    ):
        """
        Initialize the Fcoin API client.

        Args:
            key: API key (defaults to FCOIN_API_KEY)
            secret: API secret (defaults to FCOIN_SECRET_KEY)
            cert_pem_path: CA bundle path (defaults to FCOIN_CERT_PEM, else downloaded)
            timeout: Request timeout in seconds (defaults to FCOIN_TIMEOUT, 2s)
            base_url: API base URL (defaults to FCOIN_BASE_URL)
            transport: Custom httpx transport (tests use httpx.MockTransport)
            trust_resolver: Custom CA bundle resolver
        """
        credential = Credential(
            key=key or settings.fcoin_api_key,
            secret=secret or settings.fcoin_secret_key,
            cert_pem_path=cert_pem_path or settings.fcoin_cert_path,
            timeout=timeout or settings.fcoin_timeout
        )
        super().__init__(
            credential=credential,
            base_url=base_url or settings.fcoin_base_url,
            signer=FcoinSigner(credential.secret),
            transport=transport
        )
        self.trust_resolver = trust_resolver or CertificateResolver(cert_path=credential.cert_pem_path)

    def _client_options(self) -> Dict[str, Any]:
        options = super()._client_options()
        # verify only applies to the default transport
        if self._transport is None:
            options["verify"] = self.trust_resolver.resolve()
        return options

    # ============================================
    # Request Building
    # ============================================

    def _prepare(self, method: str, path: str, params: Mapping[str, Any], signed: bool) -> SignedRequest:
        """
        Build the Fcoin wire request.

        GET parameters travel in the query string; POST parameters travel as a
        JSON body but are signed in their canonical form-encoded shape.
        """
        payload = canonicalize(params)
        url = f"{self.base_url}{path}"

        if method == "POST":
            target = path
            content = to_json_body(params)
        else:
            target = f"{path}?{payload}" if payload else path
            content = ""

        headers: Dict[str, str] = {}
        timestamp = signature = None
        if signed:
            timestamp = current_timestamp_ms()
            signature = self.signer.sign(method, url, timestamp, payload)
            headers.update({
                "FC-ACCESS-KEY": self.credential.key,
                "FC-ACCESS-SIGNATURE": signature,
                "FC-ACCESS-TIMESTAMP": str(timestamp),
            })
        if method == "POST":
            headers["Content-Type"] = JSON_CONTENT_TYPE

        return SignedRequest(
            method=method,
            path=path,
            url=url,
            target=target,
            payload=payload,
            content=content,
            timestamp=timestamp,
            signature=signature,
            headers=headers
        )

    def _business_error(self, payload: Any):
        """Fcoin wraps every response in {"status": 0, ...}; a missing status is a failure."""
        if not isinstance(payload, dict) or "status" not in payload:
            return None, "Response has no status field"
        status = payload["status"]
        if status == 0 or status == "0":
            return None
        return status, payload.get("msg", "")

    # ============================================
    # Public Endpoints
    # ============================================

    def get_server_time(self) -> ApiResult:
        """
        Get server time.

        GET https://api.fcoin.com/v2/public/server-time
        """
        return self.request("GET", "public/server-time")

    def get_symbols(self) -> ApiResult:
        """
        Get supported trading pairs.

        GET https://api.fcoin.com/v2/public/symbols
        """
        return self.request("GET", "public/symbols")

    def get_currencies(self) -> ApiResult:
        """
        Get supported currencies.

        GET https://api.fcoin.com/v2/public/currencies
        """
        return self.request("GET", "public/currencies")

    # ============================================
    # Account & Orders (signed)
    # ============================================

    def get_balance(self) -> ApiResult:
        """
        Get account balance.

        GET https://api.fcoin.com/v2/accounts/balance
        """
        return self.request("GET", "accounts/balance", signed=True)

    def create_order(
        self,
        symbol: str,
        side: str,
        price: str,
        amount: str,
        order_type: str = "limit"
    ) -> ApiResult:
        """
        Create an order.

        POST https://api.fcoin.com/v2/orders

        Args:
            symbol: Trading pair (e.g., "btcusdt")
            side: "buy" or "sell"
            price: Limit price
            amount: Order quantity
            order_type: "limit" or "market"

        Returns:
            ApiResult; on success data is {"status": 0, "data": "<order id>"}
        """
        if side not in ORDER_SIDES:
            return self._reject("side", side, ORDER_SIDES)
        if order_type not in ORDER_TYPES:
            return self._reject("order type", order_type, ORDER_TYPES)

        order = {
            "symbol": symbol,
            "side": side,
            "type": order_type,
            "price": price,
            "amount": amount,
        }
        return self.request("POST", "orders", order, signed=True)

    def get_orders_list(
        self,
        symbol: str,
        states: str,
        limit: int = 20,
        before: Optional[str] = None,
        after: Optional[str] = None
    ) -> ApiResult:
        """
        List orders.

        GET https://api.fcoin.com/v2/orders

        Args:
            symbol: Trading pair
            states: One of ORDER_STATES
            limit: Page size (default 20)
            before: Return orders before this page cursor
            after: Return orders after this page cursor
        """
        if states not in ORDER_STATES:
            return self._reject("order state", states, ORDER_STATES)

        criteria: Dict[str, Any] = {
            "symbol": symbol,
            "states": states,
            "limit": int(limit),
        }
        if before:
            criteria["before"] = before
        if after:
            criteria["after"] = after
        return self.request("GET", "orders", criteria, signed=True)

    def get_order(self, order_id: str) -> ApiResult:
        """
        Get a single order.

        GET https://api.fcoin.com/v2/orders/{order_id}
        """
        return self.request("GET", f"orders/{order_id}", signed=True)

    def cancel_order(self, order_id: str) -> ApiResult:
        """
        Request cancellation of an order.

        POST https://api.fcoin.com/v2/orders/{order_id}/submit-cancel
        """
        return self.request("POST", f"orders/{order_id}/submit-cancel", signed=True)

    def get_order_transaction(self, order_id: str) -> ApiResult:
        """
        Get fills (match results) of an order.

        GET https://api.fcoin.com/v2/orders/{order_id}/match-results
        """
        return self.request("GET", f"orders/{order_id}/match-results", signed=True)

    # ============================================
    # Market Data
    # ============================================

    def get_tick_data(self, symbol: str) -> ApiResult:
        """
        Get ticker of a symbol.

        GET https://api.fcoin.com/v2/market/ticker/{symbol}
        """
        return self.request("GET", f"market/ticker/{symbol.lower()}")

    def get_market_depth(self, symbol: str, level: str = "L20") -> ApiResult:
        """
        Get order book depth.

        GET https://api.fcoin.com/v2/market/depth/{level}/{symbol}

        Args:
            symbol: Trading pair
            level: One of DEPTH_LEVELS
        """
        if level not in DEPTH_LEVELS:
            return self._reject("depth level", level, DEPTH_LEVELS)
        return self.request("GET", f"market/depth/{level}/{symbol.lower()}")

    def get_market_transaction(
        self,
        symbol: str,
        before_id: Optional[str] = None,
        limit: int = 20
    ) -> ApiResult:
        """
        Get latest trades.

        GET https://api.fcoin.com/v2/market/trades/{symbol}

        Args:
            symbol: Trading pair
            before_id: Only trades before this trade id
            limit: Number of trades (default 20)
        """
        params = {
            "before_id": before_id,
            "limit": int(limit),
        }
        return self.request("GET", f"market/trades/{symbol}", params)

    def get_candle(
        self,
        symbol: str,
        limit: int = 20,
        resolution: str = "M1",
        before: Optional[str] = None
    ) -> ApiResult:
        """
        Get candles.

        GET https://api.fcoin.com/v2/market/candles/{resolution}/{symbol}

        Args:
            symbol: Trading pair
            limit: Number of candles (default 20)
            resolution: One of RESOLUTIONS
            before: Only candles before this candle id
        """
        if resolution not in RESOLUTIONS:
            return self._reject("resolution", resolution, RESOLUTIONS)

        params = {
            "before_id": before,
            "limit": int(limit),
        }
        return self.request("GET", f"market/candles/{resolution}/{symbol}", params)
