"""
Utilities module - Common utility functions.
"""

from retail_search_harness.utils.logging import setup_logging
from retail_search_harness.utils.retry import retry_async, RetryConfig
from retail_search_harness.utils.price import Price, parse_price

__all__ = [
    "setup_logging",
    "retry_async",
    "RetryConfig",
    "Price",
    "parse_price",
]
