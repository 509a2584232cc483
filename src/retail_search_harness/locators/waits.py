"""
Bounded, best-effort waits.

Expected timeouts are reported as a WaitOutcome instead of an exception so
the resolver can log them and carry on.
"""

import logging
from enum import Enum
from typing import Any, Awaitable

logger = logging.getLogger(__name__)


class WaitOutcome(Enum):
    """Result of a best-effort wait."""
    SUCCEEDED = "succeeded"
    TIMED_OUT = "timed_out"
    ERRORED = "errored"

    @property
    def ok(self) -> bool:
        return self is WaitOutcome.SUCCEEDED


def _is_timeout(error: BaseException) -> bool:
    # Playwright's TimeoutError is not a subclass of the builtin one
    if isinstance(error, TimeoutError):
        return True
    return type(error).__name__ == "TimeoutError"


async def bounded_wait(awaitable: Awaitable[Any], label: str) -> WaitOutcome:
    """
    Await a wait that carries its own timeout, never raising.
    
    Args:
        awaitable: The wait to perform (e.g. page.wait_for_load_state(...))
        label: Name used in log lines
        
    Returns:
        WaitOutcome describing how the wait ended
    """
    try:
        await awaitable
    except Exception as e:
        if _is_timeout(e):
            logger.info(f"Wait for {label} timed out, continuing")
            return WaitOutcome.TIMED_OUT
        logger.info(f"Wait for {label} failed ({e}), continuing")
        return WaitOutcome.ERRORED
    return WaitOutcome.SUCCEEDED
