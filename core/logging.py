"""
Library Logging

Every module logs through the "exchangeapi" logger namespace configured here.
Applications embedding the clients keep full control of the root logger.

Usage:
    from core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Cached CA bundle at ./cacert.pem")

What goes where:
    DEBUG    - request/response traces ("API Request: fcoin GET orders")
    INFO     - one-off events (CA bundle cached, configuration validated)
    WARNING  - exchange rejections, invalid arguments, CA bundle unavailable
    ERROR    - transport faults (HTTP errors, timeouts, undecodable bodies)

The level comes from LOG_LEVEL (default INFO). Secrets and signatures are
never passed to the helpers below.
"""

import logging
import sys
from typing import Any, Optional


NAMESPACE = "exchangeapi"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(message)s"


def setup_logging(log_level: str = "INFO", log_format: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler to the library logger and set its level.

    Calling it again only swaps the format and level; no second handler is added.

    Example:
        >>> setup_logging("DEBUG").debug("Client ready")
        2024-01-01 12:00:00 [DEBUG] exchangeapi Client ready
    """
    library_logger = logging.getLogger(NAMESPACE)
    if not library_logger.handlers:
        library_logger.addHandler(logging.StreamHandler(sys.stdout))

    formatter = logging.Formatter(log_format or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in library_logger.handlers:
        handler.setFormatter(formatter)

    library_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    # Only the exchangeapi namespace is configured; the root logger is left alone
    library_logger.propagate = False
    return library_logger


# ============================================
# Library Logger
# ============================================

def _configured_level() -> str:
    # core.config imports this module only inside validate_configuration()
    from core.config import settings
    return settings.log_level


logger = setup_logging(log_level=_configured_level())


def get_logger(name: str) -> logging.Logger:
    """
    Child logger of the library namespace.

    Example:
        >>> get_logger("exchanges.fcoin.api_client").name
        'exchangeapi.exchanges.fcoin.api_client'
    """
    return logging.getLogger(f"{NAMESPACE}.{name}")


def set_log_level(level: str) -> None:
    """Change the library log level at runtime (e.g., "DEBUG")."""
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


# ============================================
# API Call Helpers
# ============================================

def log_api_request(exchange: str, method: str, endpoint: str, params: Optional[dict] = None) -> None:
    """
    Trace an outgoing call.

    Example:
        >>> log_api_request("fcoin", "GET", "orders", {"symbol": "btcusdt"})
        [DEBUG] API Request: fcoin GET orders | Params: {'symbol': 'btcusdt'}
    """
    suffix = f" | Params: {params}" if params else ""
    logger.debug(f"API Request: {exchange} {method} {endpoint}{suffix}")


def log_api_response(exchange: str, endpoint: str, status: int, elapsed: Optional[float] = None) -> None:
    """
    Trace a received response with its HTTP status and round-trip time.

    Example:
        >>> log_api_response("fcoin", "public/server-time", 200, 0.342)
        [DEBUG] API Response: fcoin public/server-time | Status: 200 | Time: 0.342s
    """
    suffix = f" | Time: {elapsed:.3f}s" if elapsed is not None else ""
    logger.debug(f"API Response: {exchange} {endpoint} | Status: {status}{suffix}")


def log_api_error(exchange: str, endpoint: str, code: Any, message: str, transport: bool = False) -> None:
    """
    Report a failed call. Transport faults go to ERROR, exchange rejections to WARNING.

    Example:
        >>> log_api_error("gateio", "private/buy", 21, "You don't have enough fund")
        [WARNING] API Error: gateio private/buy | Code: 21 | You don't have enough fund
    """
    level = logging.ERROR if transport else logging.WARNING
    logger.log(level, f"API Error: {exchange} {endpoint} | Code: {code} | {message}")
