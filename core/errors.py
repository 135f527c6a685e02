"""
Error Catalogs

Static maps from exchange error codes to stable, human-readable messages.
They are fixed at build time and never fetched from the exchanges.

Lookup order (ErrorCatalog.lookup):
    1. Message registered for the code
    2. Fallback supplied by the caller (server message or exception text)
    3. Empty string

Codes:
    - HTTP_ERROR_CODES: HTTP statuses both exchanges answer with
    - FCOIN_ERROR_CODES: Fcoin v2 documented error statuses
    - GATEIO_ERROR_CODES: Gate.io API2 numeric `code` values
    - BAD_REQUEST: code used when an argument fails client-side validation
"""

from typing import Dict, Mapping, Optional, Union


Code = Union[int, str, None]

BAD_REQUEST = 400


HTTP_ERROR_CODES: Dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    429: "Too Many Requests",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
}


FCOIN_ERROR_CODES: Dict[int, str] = {
    **HTTP_ERROR_CODES,
    400: "Bad Request: the request format is invalid",
    401: "Unauthorized: invalid API key, signature or timestamp",
    403: "Forbidden: access to the resource is not allowed",
    404: "Not Found: the requested resource does not exist",
    405: "Method Not Allowed: HTTP method not supported by this resource",
    406: "Not Acceptable: the request body is not JSON",
    429: "Too Many Requests: request rate limited, slow down",
    500: "Internal Server Error: please try again later",
    503: "Service Unavailable: please try again later",
}


GATEIO_ERROR_CODES: Dict[int, str] = {
    **HTTP_ERROR_CODES,
    1: "Invalid request",
    2: "Invalid version",
    3: "Invalid request",
    4: "Too many attempts",
    5: "Invalid sign",
    6: "Invalid sign",
    7: "Currency is not supported",
    8: "Currency is not supported",
    9: "Currency is not supported",
    10: "Verified failed",
    11: "Obtaining address failed",
    12: "Empty params",
    13: "Internal error, please report to administrator",
    14: "Invalid user",
    15: "Cancel order too fast, please wait 1 min and try again",
    16: "Invalid order id or order is already closed",
    17: "Invalid orderid",
    18: "Invalid amount",
    19: "Not permitted or trade is disabled",
    20: "Your order size is too small",
    21: "You don't have enough fund",
}


class ErrorCatalog:
    """
    Code -> message table for one exchange.

    Attributes:
        exchange: Exchange identifier (e.g., "fcoin")

    Example:
        >>> catalog = ErrorCatalog("gateio", GATEIO_ERROR_CODES)
        >>> catalog.lookup(21, "server text")
        "You don't have enough fund"
        >>> catalog.lookup(999, "server text")
        'server text'
    """

    def __init__(self, exchange: str, codes: Mapping[int, str]):
        self.exchange = exchange
        self._codes = dict(codes)

    def __contains__(self, code: Code) -> bool:
        return self._normalize(code) in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    @staticmethod
    def _normalize(code: Code) -> Optional[int]:
        # JSON payloads send codes as either 21 or "21"
        if isinstance(code, bool) or code is None:
            return None
        if isinstance(code, int):
            return code
        try:
            return int(str(code).strip())
        except ValueError:
            return None

    def lookup(self, code: Code, fallback: Optional[str] = None) -> str:
        """
        Resolve a code to its message.

        Args:
            code: Exchange or HTTP code (int or numeric string)
            fallback: Message to use when the code is unknown

        Returns:
            Catalog message, else fallback, else ""
        """
        message = self._codes.get(self._normalize(code))
        if message:
            return message
        return fallback or ""


FCOIN_ERRORS = ErrorCatalog("fcoin", FCOIN_ERROR_CODES)
GATEIO_ERRORS = ErrorCatalog("gateio", GATEIO_ERROR_CODES)
