"""
Shared Data Schemas

Pydantic models used by every exchange client.

Models:
    - Credential: API key/secret plus optional TLS bundle path and timeout
    - ApiError: (code, message) pair describing why a call failed
    - ApiResult: Outcome of a single API call, either a decoded payload or an ApiError
    - SignedRequest: A request after canonicalization and signing

ApiResult is falsy when the call failed, so callers can write:

    result = client.get_balance()
    if not result:
        print(result.error.code, result.error.message)
    else:
        print(result.data)
"""

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


# ============================================
# Credentials
# ============================================

class Credential(BaseModel):
    """
    Credential bound to one client instance.

    Immutable once the client is constructed.

    Attributes:
        key: API key sent in the exchange auth header
        secret: API secret used to sign requests (never sent, never logged)
        cert_pem_path: Optional CA bundle path for TLS verification
        timeout: Optional request timeout in seconds (None = transport default)
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(default="", description="Exchange API key")
    secret: str = Field(default="", repr=False, description="Exchange API secret")
    cert_pem_path: Optional[str] = Field(default=None, description="CA bundle path")
    timeout: Optional[float] = Field(default=None, description="Request timeout in seconds")

    @property
    def is_complete(self) -> bool:
        """True if both key and secret are set."""
        return bool(self.key and self.secret)


# ============================================
# Call Outcome
# ============================================

class ApiError(BaseModel):
    """
    Error detail for a failed call.

    Attributes:
        code: Exchange status/code, HTTP status, or the transport exception name
        message: Human-readable message (from the error catalog when known)
    """

    model_config = ConfigDict(frozen=True)

    code: Union[int, str, None] = 0
    message: str = ""


class ApiResult(BaseModel):
    """
    Result of one API call.

    Exactly one of `data` / `error` is meaningful:
    - success: `error` is None and `data` holds the decoded JSON payload
    - failure: `error` holds the ApiError, `data` is None
    """

    model_config = ConfigDict(frozen=True)

    data: Any = None
    error: Optional[ApiError] = None

    @classmethod
    def success(cls, data: Any) -> "ApiResult":
        return cls(data=data)

    @classmethod
    def failure(cls, code: Union[int, str, None], message: str = "") -> "ApiResult":
        return cls(error=ApiError(code=code, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


# ============================================
# Outgoing Request
# ============================================

class SignedRequest(BaseModel):
    """
    Fully prepared request, built per call and discarded after the response.

    Attributes:
        method: Upper-case HTTP method
        path: Endpoint path relative to the base URL (e.g., "orders")
        url: Absolute URL without query string (the URL that gets signed)
        target: What is sent to the HTTP client: path plus canonical query string
        payload: Canonical parameter string ("" when there are no parameters)
        content: Request body ("" for GET)
        timestamp: Milliseconds timestamp when the exchange signs with one
        signature: Request signature (None for public endpoints)
        headers: HTTP headers to attach
    """

    method: str
    path: str
    url: str
    target: str
    payload: str = ""
    content: str = ""
    timestamp: Optional[int] = None
    signature: Optional[str] = Field(default=None, repr=False)
    headers: Dict[str, str] = Field(default_factory=dict, repr=False)
