"""
Fcoin Exchange Connector

REST client for the Fcoin v2 API (https://api.fcoin.com/v2/).

Endpoints Used:
    Public:
        - GET public/server-time, public/symbols, public/currencies
        - GET market/ticker/{symbol}, market/depth/{level}/{symbol}
        - GET market/trades/{symbol}, market/candles/{resolution}/{symbol}
    Signed:
        - GET accounts/balance
        - POST orders, GET orders, GET orders/{id}
        - POST orders/{id}/submit-cancel, GET orders/{id}/match-results
"""

from .api_client import (
    DEPTH_LEVELS,
    ORDER_SIDES,
    ORDER_STATES,
    ORDER_TYPES,
    RESOLUTIONS,
    FcoinAPIClient,
)

__all__ = [
    "FcoinAPIClient",
    "ORDER_SIDES",
    "ORDER_TYPES",
    "ORDER_STATES",
    "DEPTH_LEVELS",
    "RESOLUTIONS",
]
