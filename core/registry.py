"""
Client Registry: One Client per Credential Set

Building an exchange client creates an HTTP transport, so callers that ask for
"the Fcoin client for key K" repeatedly should get the same object back.

The registry fingerprints the constructor arguments (md5 of the arguments
joined with ":") and caches one instance per (client class, fingerprint).
Entries are never evicted.

Example:
    registry = ClientRegistry()
    a = registry.instance(FcoinAPIClient, "k1", "s1")
    b = registry.instance(FcoinAPIClient, "k1", "s1")
    c = registry.instance(FcoinAPIClient, "k1", "s1", None, 5)
    assert a is b and a is not c
"""

import hashlib
import threading
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from core.logging import logger


T = TypeVar("T")


def fingerprint(*args: Any, **kwargs: Any) -> str:
    """
    Stable fingerprint of a constructor argument list.

    None is rendered as an empty string; keyword arguments are appended
    as "name=value" in name order.

    Example:
        >>> fingerprint("k1", "s1") == fingerprint("k1", "s1")
        True
        >>> fingerprint("k1", "s1") == fingerprint("k1", "s1", None, 5)
        False
    """
    parts = ["" if arg is None else str(arg) for arg in args]
    parts.extend(f"{name}={'' if value is None else value}" for name, value in sorted(kwargs.items()))
    return hashlib.md5(":".join(parts).encode("utf-8")).hexdigest()


class ClientRegistry:
    """
    Thread-safe cache of client instances keyed by constructor fingerprint.

    Attributes:
        clients: Mapping of (class name, fingerprint) -> client instance
    """

    def __init__(self):
        self.clients: Dict[Tuple[str, str], Any] = {}
        self._lock = threading.Lock()

    def instance(self, client_cls: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Return the cached client for these arguments, creating it on first use.

        Args:
            client_cls: Client class to build (e.g., FcoinAPIClient)
            *args, **kwargs: Constructor arguments

        Returns:
            The shared client instance
        """
        key = (client_cls.__qualname__, fingerprint(*args, **kwargs))

        with self._lock:
            client = self.clients.get(key)
            if client is None:
                client = client_cls(*args, **kwargs)
                self.clients[key] = client
                logger.debug(f"Registered new {client_cls.__name__} ({key[1][:8]})")
            return client

    def list_clients(self) -> List[Any]:
        """All cached client instances."""
        with self._lock:
            return list(self.clients.values())

    def __len__(self) -> int:
        return len(self.clients)

    def __repr__(self) -> str:
        return f"<ClientRegistry(clients={len(self.clients)})>"


# ============================================
# Default Registry Instance
# ============================================

# Used by BaseAPIClient.instance() when no registry is passed in
_registry: Optional[ClientRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> ClientRegistry:
    """
    Get the process-wide default ClientRegistry (created on first call).

    Notes:
        - Prefer creating a ClientRegistry and passing it around explicitly
        - This default exists for BaseAPIClient.instance() convenience calls
    """
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = ClientRegistry()
            logger.debug("Created default ClientRegistry instance")
        return _registry
