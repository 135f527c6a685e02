"""
Canonical Parameter Encoding

Both exchanges authenticate a request by signing a serialized copy of its
parameters, and the server recomputes the signature from what it received.
The serialization therefore has to be deterministic:

- Keys are sorted by code point (case-sensitive, not locale-aware)
- None values are dropped
- Booleans become 1 / 0
- Nested mappings and lists use the bracket convention: a[b]=1, a[0]=1
- Values are percent-encoded with standard form encoding (space -> "+")
- An empty mapping encodes to "" (never "?" and never "{}")

Example:
    >>> canonicalize({"symbol": "btcusdt", "limit": 20, "before": None})
    'limit=20&symbol=btcusdt'
"""

import json
from typing import Any, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlencode


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _flatten(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key in sorted(value, key=str):
            yield from _flatten(f"{prefix}[{key}]", value[key])
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _flatten(f"{prefix}[{index}]", item)
    else:
        yield prefix, _scalar(value)


def canonical_pairs(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Flatten a parameter mapping into sorted (key, value) string pairs.

    Args:
        params: Parameter mapping (may be None or empty)

    Returns:
        List of (key, value) tuples in canonical order
    """
    if not params:
        return []
    pairs: List[Tuple[str, str]] = []
    for key in sorted(params, key=str):
        pairs.extend(_flatten(str(key), params[key]))
    return pairs


def canonicalize(params: Optional[Mapping[str, Any]]) -> str:
    """
    Serialize parameters into the canonical form-encoded string.

    This string is both signed and transmitted (query string for GET,
    form body for Gate.io POST).

    Args:
        params: Parameter mapping (may be None or empty)

    Returns:
        Canonical "key=value&key=value" string, "" for no parameters

    Example:
        >>> canonicalize({"b": "x y", "a": 1})
        'a=1&b=x+y'
    """
    return urlencode(canonical_pairs(params))


def to_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """
    Canonical query string with its leading "?", or "" when there is nothing to send.

    Example:
        >>> to_query_string({"limit": 20})
        '?limit=20'
        >>> to_query_string({})
        ''
    """
    query = canonicalize(params)
    return f"?{query}" if query else ""


def to_json_body(params: Optional[Mapping[str, Any]]) -> str:
    """
    Compact JSON body with sorted keys (Fcoin POST requests).

    None values are dropped like in canonicalize(), and an empty
    mapping gives "" so no body is sent at all. Values JSON cannot
    represent natively (Decimal, for instance) are sent as their str(),
    the same text canonicalize() signs.

    Example:
        >>> to_json_body({"side": "buy", "amount": "1"})
        '{"amount":"1","side":"buy"}'
    """
    if not params:
        return ""
    cleaned = {key: value for key, value in params.items() if value is not None}
    if not cleaned:
        return ""
    return json.dumps(cleaned, sort_keys=True, separators=(",", ":"), default=str)
