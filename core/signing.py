"""
Request Signers

Each exchange authenticates private calls with a keyed hash over a canonical
representation of the request, but the two schemes share nothing beyond that.
They are kept as separate strategy classes so every byte-assembly rule can be
tested on its own, and a client picks its signer once, at construction time.

Fcoin (FcoinSigner):
    message   = METHOD + URL + ("?" + query if query else "") + TIMESTAMP    (GET)
    message   = METHOD + URL + TIMESTAMP + body                              (POST)
    signature = base64(HMAC-SHA1(secret, base64(message)))

Gate.io (GateioSigner):
    signature = hex(HMAC-SHA512(secret, url_decode(canonical body)))
    No method, URL or timestamp is part of the message.

Example:
    >>> FcoinSigner("secret").build_message(
    ...     "GET", "https://api.fcoin.com/v2/public/server-time", 1000, "")
    'GEThttps://api.fcoin.com/v2/public/server-time1000'
"""

import base64
import hashlib
import hmac
from abc import ABC, abstractmethod
from typing import Optional, Union
from urllib.parse import unquote_plus


READ_METHODS = ("GET",)


class Signer(ABC):
    """
    Base class for exchange request signers.

    Attributes:
        name: Exchange identifier the signer belongs to
    """

    name: str

    def __init__(self, secret: str):
        self._secret = secret.encode("utf-8")

    @abstractmethod
    def build_message(
        self,
        method: str,
        url: str,
        timestamp: Optional[Union[int, str]],
        payload: str
    ) -> str:
        """Assemble the exact string that gets signed."""

    @abstractmethod
    def sign(
        self,
        method: str,
        url: str,
        timestamp: Optional[Union[int, str]],
        payload: str
    ) -> str:
        """Return the signature for one request."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class FcoinSigner(Signer):
    """
    Fcoin v2 signer (timestamp-bound HMAC-SHA1).

    The timestamp passed here must be the exact value sent in the
    FC-ACCESS-TIMESTAMP header, otherwise the server rejects the call.
    """

    name = "fcoin"

    def build_message(self, method, url, timestamp, payload):
        """
        Args:
            method: HTTP method (any case)
            url: Full request URL without query string
            timestamp: Milliseconds since epoch
            payload: Canonical parameter string ("" when there are none)
        """
        method = method.upper()
        if method in READ_METHODS:
            query = f"?{payload}" if payload else ""
            return f"{method}{url}{query}{timestamp}"
        return f"{method}{url}{timestamp}{payload}"

    def sign(self, method, url, timestamp, payload):
        message = self.build_message(method, url, timestamp, payload)
        encoded = base64.b64encode(message.encode("utf-8"))
        digest = hmac.new(self._secret, encoded, hashlib.sha1).digest()
        return base64.b64encode(digest).decode("ascii")


class GateioSigner(Signer):
    """
    Gate.io API2 signer (HMAC-SHA512 over the decoded form body).

    method, url and timestamp are accepted for interface parity and ignored.
    """

    name = "gateio"

    def build_message(self, method, url, timestamp, payload):
        return unquote_plus(payload)

    def sign(self, method, url, timestamp, payload):
        message = self.build_message(method, url, timestamp, payload)
        return hmac.new(self._secret, message.encode("utf-8"), hashlib.sha512).hexdigest()
