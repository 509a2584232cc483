"""
Retry utilities for async steps.

Two kinds of failure are retried: an exception of one of the configured
types, which pauses before the next attempt, and a result the caller marks
as unsatisfactory, which retries at once and is returned as-is after the
last attempt.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_attempts: Maximum number of attempts
        initial_delay_ms: Pause before the first retry after an exception
        max_delay_ms: Maximum pause between retries
        backoff_multiplier: Multiplier applied to the pause (1.0 for a fixed pause)
        retry_on: Exception types to retry on
        retry_if_result: Returns True for a result that should be retried
    """
    max_attempts: int = 3
    initial_delay_ms: int = 1000
    max_delay_ms: int = 30000
    backoff_multiplier: float = 2.0
    retry_on: Tuple[Type[Exception], ...] = (Exception,)
    retry_if_result: Optional[Callable[[Any], bool]] = None


async def retry_async(
    func: Callable[..., T],
    config: RetryConfig,
    *args: Any,
    **kwargs: Any,
) -> T:
    """
    Execute a function with retry logic.

    Args:
        func: Async function to execute
        config: Retry configuration
        *args: Function arguments
        **kwargs: Function keyword arguments

    Returns:
        The first acceptable result, or the last result when every attempt
        produced one that retry_if_result rejected

    Raises:
        The last exception if the final attempt raised
    """
    delay_ms = config.initial_delay_ms

    for attempt in range(1, config.max_attempts + 1):
        last = attempt == config.max_attempts
        try:
            result = await func(*args, **kwargs)
        except config.retry_on as e:
            if last:
                raise

            logger.warning(
                f"Attempt {attempt}/{config.max_attempts} failed: {e}. "
                f"Retrying in {delay_ms}ms..."
            )
            await asyncio.sleep(delay_ms / 1000)
            delay_ms = int(min(delay_ms * config.backoff_multiplier, config.max_delay_ms))
            continue

        if config.retry_if_result is None or not config.retry_if_result(result) or last:
            return result
        logger.info(f"Attempt {attempt}/{config.max_attempts} gave an unusable result, retrying")

    raise ValueError("max_attempts must be at least 1")
