"""
Base API Client: Shared Request Executor

Every exchange client inherits from BaseAPIClient. The base class owns the
parts of the request pipeline that do not depend on the exchange:

- Lazy creation of one httpx.Client per client instance
- Dispatch of exactly one blocking HTTP round trip per call (no retries)
- Conversion of every outcome into an ApiResult
- The per-instance "last error" slot and its get_error() accessor
- Client-side validation failures (BAD_REQUEST)

Subclasses provide the exchange-specific parts:

- _prepare(): canonicalize parameters, sign, build headers (-> SignedRequest)
- _business_error(): decide whether a decoded payload is a success
- error_catalog: code -> message table for that exchange

Failure Semantics:
    Validation errors, exchange rejections (non-zero status/code) and transport
    faults (HTTP >= 400, timeouts, connection errors, undecodable bodies) all
    end up the same way: a falsy ApiResult carrying ApiError(code, message),
    with the same pair stored as the instance's last error.
"""

import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import httpx

from core.errors import BAD_REQUEST, ErrorCatalog
from core.logging import get_logger, log_api_error, log_api_request, log_api_response
from core.registry import ClientRegistry, get_registry
from core.schemas import ApiError, ApiResult, Credential, SignedRequest
from core.signing import Signer


class BaseAPIClient(ABC):
    """
    Abstract base for synchronous exchange REST clients.

    Class Attributes:
        name: Exchange identifier (lowercase, e.g., "fcoin")
        error_catalog: ErrorCatalog used to translate error codes

    Attributes:
        credential: Credential this client signs with
        base_url: Base URL all endpoint paths are relative to
        signer: Signer strategy chosen for this exchange
    """

    name: str
    error_catalog: ErrorCatalog

    def __init__(
        self,
        credential: Credential,
        base_url: str,
        signer: Signer,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.credential = credential
        self.base_url = base_url
        self.signer = signer
        self.logger = get_logger(self.__class__.__module__)
        self._transport = transport
        self._http: Optional[httpx.Client] = None
        self._http_lock = threading.Lock()
        self._error = ApiError(code=0, message="")
        self._error_lock = threading.Lock()

    # ============================================
    # Construction Helpers
    # ============================================

    @classmethod
    def instance(cls, *args: Any, registry: Optional[ClientRegistry] = None, **kwargs: Any):
        """
        Shared instance for these constructor arguments.

        Args:
            *args, **kwargs: Same arguments the constructor takes
            registry: Registry to use (defaults to the process-wide one)

        Example:
            >>> a = FcoinAPIClient.instance("key", "secret")
            >>> a is FcoinAPIClient.instance("key", "secret")
            True
        """
        return (registry or get_registry()).instance(cls, *args, **kwargs)

    # ============================================
    # HTTP Client Lifecycle
    # ============================================

    def _client_options(self) -> Dict[str, Any]:
        """Keyword arguments for httpx.Client. Subclasses may extend (e.g., verify)."""
        options: Dict[str, Any] = {"base_url": self.base_url}
        if self.credential.timeout is not None:
            options["timeout"] = self.credential.timeout
        if self._transport is not None:
            options["transport"] = self._transport
        return options

    @property
    def http(self) -> httpx.Client:
        """The underlying httpx.Client, created on first use."""
        with self._http_lock:
            if self._http is None:
                self._http = httpx.Client(**self._client_options())
                self.logger.debug(f"{self.__class__.__name__} HTTP client created for {self.base_url}")
            return self._http

    def close(self) -> None:
        """Close the HTTP client (a new one is created if the client is used again)."""
        with self._http_lock:
            if self._http is not None:
                self._http.close()
                self._http = None
                self.logger.debug(f"{self.__class__.__name__} HTTP client closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # ============================================
    # Request Executor
    # ============================================

    @abstractmethod
    def _prepare(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any],
        signed: bool
    ) -> SignedRequest:
        """Build the wire request: canonical payload, signature and headers."""

    @abstractmethod
    def _business_error(self, payload: Any) -> Optional[Tuple[Any, str]]:
        """
        Inspect a decoded payload.

        Returns:
            None on success, otherwise (code, server message)
        """

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        signed: bool = False
    ) -> ApiResult:
        """
        Perform one API call.

        Args:
            method: HTTP method ("GET" or "POST")
            path: Endpoint path relative to base_url (e.g., "orders")
            params: Query (GET) or body (POST) parameters
            signed: Whether the endpoint requires authentication

        Returns:
            ApiResult with the decoded JSON payload, or a failed ApiResult
        """
        method = method.upper()
        params = params or {}
        log_api_request(self.name, method, path, dict(params))

        prepared = self._prepare(method, path, params, signed)

        started = time.monotonic()
        try:
            response = self.http.request(
                prepared.method,
                prepared.target,
                content=prepared.content or None,
                headers=prepared.headers
            )
            log_api_response(self.name, path, response.status_code, time.monotonic() - started)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            return self._transport_fault(path, e.response.status_code, e)
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers undecodable JSON bodies
            return self._transport_fault(path, type(e).__name__, e)

        error = self._business_error(payload)
        if error is None:
            return ApiResult.success(payload)

        code, server_message = error
        message = self.error_catalog.lookup(code, server_message)
        log_api_error(self.name, path, code, message)
        return self._fail(code, message)

    def _transport_fault(self, path: str, code: Union[int, str], exc: Exception) -> ApiResult:
        message = self.error_catalog.lookup(code, str(exc) or type(exc).__name__)
        log_api_error(self.name, path, code, message, transport=True)
        return self._fail(code, message)

    # ============================================
    # Error State
    # ============================================

    def _fail(self, code: Union[int, str, None], message: str = "") -> ApiResult:
        """Record (code, message) as the last error and return it as a failed result."""
        result = ApiResult.failure(code, message)
        with self._error_lock:
            self._error = result.error
        return result

    def _reject(self, argument: str, value: Any, allowed: Iterable[Any]) -> ApiResult:
        """Fail a call before any network I/O because an argument is out of range."""
        allowed = list(allowed)
        self.logger.warning(f"{self.name}: invalid {argument} {value!r}, expected one of {allowed}")
        return self._fail(BAD_REQUEST, self.error_catalog.lookup(BAD_REQUEST))

    @property
    def last_error(self) -> ApiError:
        """Error of the most recent failed call on this instance (code 0 if none yet)."""
        with self._error_lock:
            return self._error

    def get_error(self, only_code: bool = False) -> Union[Dict[str, Any], int, str, None]:
        """
        Last error recorded on this instance.

        Note:
            The slot is shared by everyone using this instance and is overwritten by
            every failing call. Prefer the ApiResult returned by the call itself.

        Args:
            only_code: Return just the code instead of {"code": ..., "msg": ...}

        Example:
            >>> client.get_order_books("nope_pair")
            >>> client.get_error()
            {'code': 404, 'msg': 'Not Found'}
            >>> client.get_error(only_code=True)
            404
        """
        error = self.last_error
        if only_code:
            return error.code
        return {"code": error.code, "msg": error.message}

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(base_url={self.base_url!r}, key={self.credential.key[:4]!r}...)>"
