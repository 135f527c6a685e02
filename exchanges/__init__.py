"""
Exchange Connectors Package

This package contains one module per exchange. Each exchange has its own
subfolder with an api_client.py holding the REST client:

- fcoin: FcoinAPIClient (Fcoin v2 API)
- gateio: GateioAPIClient (Gate.io API2)

Both clients inherit the request pipeline from core.client.BaseAPIClient.
"""

from exchanges.fcoin import FcoinAPIClient
from exchanges.gateio import GateioAPIClient

__all__ = ["FcoinAPIClient", "GateioAPIClient"]
