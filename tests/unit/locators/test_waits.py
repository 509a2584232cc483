"""
Tests for bounded_wait and WaitOutcome.
"""

import asyncio

import pytest

from retail_search_harness.locators import WaitOutcome, bounded_wait


class TimeoutError(Exception):
    """Stands in for playwright.async_api.TimeoutError, which is not a builtin subclass."""


async def _ok():
    return "done"


async def _raise(error):
    raise error


class TestBoundedWait:
    """Test the tri-state outcome of bounded_wait."""
    
    @pytest.mark.asyncio
    async def test_success(self):
        assert await bounded_wait(_ok(), "ok") is WaitOutcome.SUCCEEDED
    
    @pytest.mark.asyncio
    async def test_builtin_timeout(self):
        outcome = await bounded_wait(_raise(asyncio.TimeoutError()), "load")
        assert outcome is WaitOutcome.TIMED_OUT
    
    @pytest.mark.asyncio
    async def test_engine_timeout_by_name(self):
        outcome = await bounded_wait(_raise(TimeoutError("Timeout 10000ms exceeded")), "networkidle")
        assert outcome is WaitOutcome.TIMED_OUT
    
    @pytest.mark.asyncio
    async def test_other_error(self):
        outcome = await bounded_wait(_raise(RuntimeError("Target closed")), "load")
        assert outcome is WaitOutcome.ERRORED
    
    def test_ok_property(self):
        assert WaitOutcome.SUCCEEDED.ok is True
        assert WaitOutcome.TIMED_OUT.ok is False
        assert WaitOutcome.ERRORED.ok is False
