"""
Core Utilities Package

This package contains utility functions and helpers used throughout the library.

Modules:
    - time: Epoch timestamp helpers (milliseconds for Fcoin, seconds for Gate.io)
"""

from core.utils.time import current_timestamp, current_timestamp_ms, to_utc_datetime

__all__ = ["current_timestamp", "current_timestamp_ms", "to_utc_datetime"]
