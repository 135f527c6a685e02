"""
TLS Trust Material

Fcoin clients can verify the server certificate against an explicit CA bundle.
When none is configured, a public bundle is downloaded once, written to the
working directory and reused for every later client.

Failure to download or write the bundle is never fatal: the resolver logs a
warning and the HTTP client falls back to its default certificate store.

Usage:
    resolver = CertificateResolver(cert_path=None)
    verify = resolver.resolve()   # ssl.SSLContext or True
    client = httpx.Client(verify=verify)
"""

import os
import ssl
import threading
from typing import Optional, Union

import httpx

from core.config import settings
from core.logging import get_logger


logger = get_logger(__name__)


class CertificateResolver:
    """
    Resolve the `verify` argument for an httpx client.

    Attributes:
        cert_path: Explicit CA bundle path (used as-is when the file exists)
        bundle_url: Public CA bundle to download when cert_path is unusable
        cache_dir: Directory the downloaded bundle is written to (default: cwd)
        fetch: Whether downloading is allowed at all

    Example:
        >>> resolver = CertificateResolver(cert_path="/etc/ssl/certs/ca.pem")
        >>> resolver.resolve()
        <ssl.SSLContext object at 0x...>
    """

    def __init__(
        self,
        cert_path: Optional[str] = None,
        bundle_url: Optional[str] = None,
        cache_dir: Optional[str] = None,
        fetch: Optional[bool] = None,
        filename: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.cert_path = cert_path
        self.bundle_url = bundle_url or settings.ca_bundle_url
        self.cache_dir = cache_dir
        self.fetch = settings.fetch_ca_bundle if fetch is None else fetch
        self.filename = filename or settings.ca_bundle_filename
        self._transport = transport
        self._lock = threading.Lock()

    @property
    def cache_path(self) -> str:
        """Where a downloaded bundle is (or would be) cached."""
        return os.path.join(self.cache_dir or os.getcwd(), self.filename)

    def resolve(self) -> Union[ssl.SSLContext, bool]:
        """
        Return an SSLContext built from the bundle, or True for default verification.
        """
        with self._lock:
            if not (self.cert_path and os.path.isfile(self.cert_path)) and self.fetch:
                if os.path.isfile(self.cache_path):
                    self.cert_path = self.cache_path
                else:
                    self.cert_path = self._download() or self.cert_path

            if self.cert_path and os.path.isfile(self.cert_path):
                try:
                    return ssl.create_default_context(cafile=self.cert_path)
                except (OSError, ssl.SSLError) as e:
                    logger.warning(f"Unusable CA bundle {self.cert_path}: {e}")
            return True

    def _download(self) -> Optional[str]:
        """Fetch the public bundle and cache it on disk. Returns the path or None."""
        try:
            with httpx.Client(transport=self._transport, timeout=10.0) as client:
                response = client.get(self.bundle_url)
                response.raise_for_status()
                content = response.text
        except httpx.HTTPError as e:
            logger.warning(f"Could not download CA bundle from {self.bundle_url}: {e}")
            return None

        if not content:
            logger.warning(f"Empty CA bundle received from {self.bundle_url}")
            return None

        path = self.cache_path
        try:
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(content)
        except OSError as e:
            logger.warning(f"Could not write CA bundle to {path}: {e}")
            return None

        logger.info(f"Cached CA bundle at {path}")
        return path
