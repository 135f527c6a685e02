"""
Gate.io Exchange Connector

REST client for the Gate.io API2 (https://data.gateio.io/api2/1/).

Public market data is served by unsigned GETs; every account and trading
endpoint under private/ is a signed form-encoded POST.
"""

from .api_client import CANCEL_ALL_TYPES, GateioAPIClient

__all__ = ["GateioAPIClient", "CANCEL_ALL_TYPES"]
