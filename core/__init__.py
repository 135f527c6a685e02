"""
Core Package

Contains the exchange-agnostic request pipeline:
- Canonical parameter encoding (canonical.py)
- Request signers for each exchange (signing.py)
- Error catalogs (errors.py)
- BaseAPIClient: shared request executor and error state (client.py)
- ClientRegistry: one client instance per credential set (registry.py)
- CertificateResolver: optional CA bundle fetch-and-cache (trust.py)
- Schemas: Credential, ApiResult, ApiError, SignedRequest (schemas.py)

Exchange-specific endpoint methods live in the exchanges package.
"""
