"""
Configuration Management Module

This module handles loading, validating, and providing access to library configuration
from environment variables (.env file).

Uses Pydantic Settings for automatic validation and type conversion.

Key Features:
- Loads exchange credentials and endpoints from .env file
- Provides the defaults used when a client is built without explicit credentials
- Controls the optional CA bundle download used for Fcoin TLS verification
- Validates settings on demand via validate_configuration()

Usage:
    from core.config import settings

    # Access configuration values
    print(settings.fcoin_base_url)
    print(settings.fcoin_timeout)  # seconds
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Library Settings

    This class defines all configuration parameters for the exchange clients.
    Values are automatically loaded from environment variables or .env file.

    Attributes:
        fcoin_base_url: Base URL for the Fcoin v2 REST API
        fcoin_api_key: Fcoin API key (only needed for private endpoints)
        fcoin_secret_key: Fcoin API secret (only needed for private endpoints)
        fcoin_cert_pem: Path to a CA bundle used to verify the Fcoin TLS certificate
        fcoin_timeout: Timeout for Fcoin HTTP requests in seconds
        gateio_base_url: Base URL for the Gate.io API2 REST API
        gateio_api_key: Gate.io API key (only needed for private endpoints)
        gateio_secret_key: Gate.io API secret (only needed for private endpoints)
        ca_bundle_url: Where to download a public CA bundle from
        ca_bundle_filename: File name the downloaded bundle is cached under
        fetch_ca_bundle: Download the CA bundle when no fcoin_cert_pem is configured
        environment: Current environment (development, production)
        debug: Enable debug mode with verbose logging
        log_level: Logging level
    """

    # ============================================
    # Fcoin API Configuration
    # ============================================

    fcoin_base_url: str = Field(
        default="https://api.fcoin.com/v2/",
        description="Fcoin v2 REST API base URL (trailing slash required)"
    )

    fcoin_api_key: str = Field(
        default="",
        description="Fcoin API key (optional for public endpoints)"
    )

    fcoin_secret_key: str = Field(
        default="",
        description="Fcoin secret key (optional for public endpoints)"
    )

    fcoin_cert_pem: str = Field(
        default="",
        description="Path to a CA bundle for Fcoin TLS verification (empty = download one)"
    )

    fcoin_timeout: float = Field(
        default=2.0,
        description="Fcoin HTTP request timeout in seconds"
    )

    # ============================================
    # Gate.io API Configuration
    # ============================================

    gateio_base_url: str = Field(
        default="https://data.gateio.io/api2/1/",
        description="Gate.io API2 REST base URL (trailing slash required)"
    )

    gateio_api_key: str = Field(
        default="",
        description="Gate.io API key (optional for public endpoints)"
    )

    gateio_secret_key: str = Field(
        default="",
        description="Gate.io secret key (optional for public endpoints)"
    )

    # ============================================
    # TLS Trust Material
    # ============================================

    ca_bundle_url: str = Field(
        default="https://curl.haxx.se/ca/cacert.pem",
        description="Public CA bundle downloaded when no Fcoin cert is configured"
    )

    ca_bundle_filename: str = Field(
        default="cacert.pem",
        description="File name (in the working directory) for the downloaded CA bundle"
    )

    fetch_ca_bundle: bool = Field(
        default=True,
        description="Download and cache a CA bundle when fcoin_cert_pem is empty"
    )

    # ============================================
    # Application Configuration
    # ============================================

    environment: str = Field(
        default="development",
        description="Application environment (development, production)"
    )

    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # ============================================
    # Pydantic Settings Configuration
    # ============================================

    model_config = SettingsConfigDict(
        # Look for .env file in the project root
        env_file=".env",
        # Ignore extra fields in .env that aren't defined here
        extra="ignore",
        # Case-insensitive environment variable matching
        case_sensitive=False
    )

    # ============================================
    # Convenience Properties
    # ============================================

    @property
    def fcoin_cert_path(self) -> Optional[str]:
        """
        Configured Fcoin CA bundle path, or None when not set.

        Example:
            >>> settings.fcoin_cert_path is None
            True
        """
        return self.fcoin_cert_pem or None

    @property
    def has_fcoin_credentials(self) -> bool:
        """True if both Fcoin key and secret are configured."""
        return bool(self.fcoin_api_key and self.fcoin_secret_key)

    @property
    def has_gateio_credentials(self) -> bool:
        """True if both Gate.io key and secret are configured."""
        return bool(self.gateio_api_key and self.gateio_secret_key)


# ============================================
# Global Settings Instance
# ============================================

settings = Settings()


# ============================================
# Configuration Validation
# ============================================

def validate_configuration(config: Optional[Settings] = None) -> None:
    """
    Validate critical configuration settings.

    Args:
        config: Settings to validate (defaults to the global settings)

    Raises:
        ValueError: If required configuration is missing or invalid
    """
    # core.logging reads settings at import time
    from core.logging import logger

    config = config or settings

    # Base URLs are joined with relative endpoint paths
    for name in ("fcoin_base_url", "gateio_base_url"):
        url = getattr(config, name)
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"{name.upper()} must be an http(s) URL, got '{url}'")
        if not url.endswith("/"):
            raise ValueError(f"{name.upper()} must end with '/', got '{url}'")

    if config.fcoin_timeout <= 0:
        raise ValueError(f"Invalid FCOIN_TIMEOUT: {config.fcoin_timeout}. Must be positive")

    # Validate log level
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.log_level.upper() not in valid_log_levels:
        raise ValueError(
            f"Invalid LOG_LEVEL: '{config.log_level}'. "
            f"Must be one of: {', '.join(valid_log_levels)}"
        )

    # Log successful validation
    logger.info("Configuration validated successfully")
    logger.info(f"Fcoin API: {config.fcoin_base_url} (timeout {config.fcoin_timeout}s)")
    logger.info(f"Gate.io API: {config.gateio_base_url}")
    logger.info(f"Fcoin credentials: {'configured' if config.has_fcoin_credentials else 'not set'}")
    logger.info(f"Gate.io credentials: {'configured' if config.has_gateio_credentials else 'not set'}")
    logger.info(f"Log level: {config.log_level.upper()}")
