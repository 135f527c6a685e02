"""
Test Suite

Contains unit tests for the exchange client library.

Structure:
- tests/unit/: Tests for individual components (canonicalization, signing, clients, config)

Uses pytest; HTTP traffic is served by httpx.MockTransport, so no test touches the network.
"""
