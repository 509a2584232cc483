"""
Tests for retry utilities.
"""

import logging

import pytest

from retail_search_harness.utils import RetryConfig, retry_async


class Flaky:
    """Fails a fixed number of times, then succeeds."""
    
    def __init__(self, failures: int, error: type = RuntimeError):
        self.failures = failures
        self.error = error
        self.calls = 0
    
    async def __call__(self, value: str = "ok") -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error(f"failure {self.calls}")
        return value


class Results:
    """Returns queued results in order."""
    
    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0
    
    async def __call__(self):
        self.calls += 1
        return self.results.pop(0)


class TestRetryAsync:
    """Test retry_async."""
    
    @pytest.mark.asyncio
    async def test_succeeds_after_failures(self):
        func = Flaky(failures=2)
        result = await retry_async(func, RetryConfig(max_attempts=3, initial_delay_ms=0), "done")
        assert result == "done"
        assert func.calls == 3
    
    @pytest.mark.asyncio
    async def test_raises_last_error_when_exhausted(self):
        func = Flaky(failures=5)
        with pytest.raises(RuntimeError, match="failure 3"):
            await retry_async(func, RetryConfig(max_attempts=3, initial_delay_ms=0))
        assert func.calls == 3
    
    @pytest.mark.asyncio
    async def test_does_not_retry_other_errors(self):
        func = Flaky(failures=1, error=KeyError)
        config = RetryConfig(max_attempts=3, initial_delay_ms=0, retry_on=(RuntimeError,))
        with pytest.raises(KeyError):
            await retry_async(func, config)
        assert func.calls == 1
    
    @pytest.mark.asyncio
    async def test_fixed_delay_is_logged_in_whole_milliseconds(self, caplog):
        config = RetryConfig(max_attempts=3, initial_delay_ms=1, backoff_multiplier=1.0)
        with caplog.at_level(logging.WARNING, logger="retail_search_harness.utils.retry"):
            await retry_async(Flaky(failures=2), config)
        
        messages = [r.getMessage() for r in caplog.records if "Retrying in" in r.getMessage()]
        assert len(messages) == 2
        assert all(m.endswith("Retrying in 1ms...") for m in messages)


class TestRetryIfResult:
    """Test retrying on unusable results."""
    
    @pytest.mark.asyncio
    async def test_retries_until_result_is_usable(self):
        func = Results(False, False, True)
        config = RetryConfig(max_attempts=3, initial_delay_ms=0, retry_if_result=lambda ok: not ok)
        assert await retry_async(func, config) is True
        assert func.calls == 3
    
    @pytest.mark.asyncio
    async def test_returns_last_result_when_exhausted(self):
        func = Results(False, False, False, True)
        config = RetryConfig(max_attempts=3, initial_delay_ms=0, retry_if_result=lambda ok: not ok)
        assert await retry_async(func, config) is False
        assert func.calls == 3
    
    @pytest.mark.asyncio
    async def test_unusable_result_does_not_pause(self, monkeypatch):
        slept = []
        
        async def fake_sleep(seconds):
            slept.append(seconds)
        
        monkeypatch.setattr("retail_search_harness.utils.retry.asyncio.sleep", fake_sleep)
        config = RetryConfig(max_attempts=3, initial_delay_ms=5000, retry_if_result=lambda ok: not ok)
        
        await retry_async(Results(False, False, True), config)
        
        assert slept == []
