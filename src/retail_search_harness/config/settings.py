"""
Settings - Pydantic models for type-safe configuration.

This module defines all configuration settings as Pydantic models,
providing validation, type hints, and automatic environment variable loading.

Example:
    >>> from retail_search_harness.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.locators.catalog_path)
    'locators/amazon-locators.json'
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BrowserSettings(BaseModel):
    """
    Browser automation settings.
    
    Attributes:
        browser_type: Playwright browser to launch
        headless: Run browser in headless mode
        timeout_ms: Default timeout for browser operations
        viewport_width: Browser viewport width in pixels
        viewport_height: Browser viewport height in pixels
        ignore_https_errors: Accept invalid TLS certificates
        slow_mo: Slow down operations by this amount (ms) - useful for debugging
    """
    browser_type: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    timeout_ms: int = Field(default=30000, ge=1000, le=300000)
    viewport_width: int = Field(default=1280, ge=320, le=3840)
    viewport_height: int = Field(default=720, ge=240, le=2160)
    ignore_https_errors: bool = True
    slow_mo: int = Field(default=0, ge=0, le=5000)


class LocatorSettings(BaseModel):
    """
    Element locator resolution settings.
    
    Attributes:
        catalog_path: JSON file holding the persisted selector catalog
        settle_timeout_ms: Upper bound for each load-state wait before probing
        quiescence_ms: Fixed delay absorbing asynchronous rendering
        discovery_visible_timeout_ms: Best-effort visibility wait after discovery
        screenshot_dir: Directory for diagnostic screenshots
    """
    catalog_path: str = "locators/amazon-locators.json"
    settle_timeout_ms: int = Field(default=10000, ge=0, le=120000)
    quiescence_ms: int = Field(default=2000, ge=0, le=60000)
    discovery_visible_timeout_ms: int = Field(default=5000, ge=0, le=60000)
    screenshot_dir: str = "."


class SearchSettings(BaseModel):
    """
    Search flow settings.
    
    Attributes:
        base_url: Storefront homepage
        expected_title: Text the homepage title must contain
        max_attempts: Attempts for the search interaction
        retry_delay_ms: Pause between search attempts
        navigation_timeout_ms: Timeout for homepage and post-search navigation
        results_timeout_ms: Timeout for the results container to appear
        indicator_timeout_ms: Timeout for any result indicator after a search
        visible_timeout_ms: Timeout for a resolved element to become visible
        currency_symbol: Symbol every displayed price must start with
    """
    base_url: str = "https://www.amazon.com/"
    expected_title: str = "Amazon.com"
    max_attempts: int = Field(default=3, ge=1, le=10)
    retry_delay_ms: int = Field(default=1000, ge=0, le=30000)
    navigation_timeout_ms: int = Field(default=30000, ge=1000, le=300000)
    results_timeout_ms: int = Field(default=20000, ge=1000, le=300000)
    indicator_timeout_ms: int = Field(default=10000, ge=1000, le=300000)
    visible_timeout_ms: int = Field(default=5000, ge=0, le=60000)
    currency_symbol: str = "$"


class LoggingSettings(BaseModel):
    """
    Logging configuration.
    
    Attributes:
        level: Log level
        format: Log format string
        file: Log file path (None for console only)
        json_format: Use JSON format for logs
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    json_format: bool = False


class Settings(BaseSettings):
    """
    Root settings container - single source of truth for all configuration.
    
    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor
    2. Environment variables (prefixed with RETAIL_SEARCH_HARNESS__)
    3. Config file (YAML)
    4. Default values
    
    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(browser=BrowserSettings(headless=False))  # Override
    """
    
    model_config = SettingsConfigDict(
        env_prefix="RETAIL_SEARCH_HARNESS__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )
    
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    locators: LocatorSettings = Field(default_factory=LocatorSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    
    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.
        
        Args:
            overrides: Dictionary of values to override
            
        Returns:
            New Settings instance with overrides applied
        """
        current = self.model_dump()
        
        def deep_merge(base: dict, updates: dict) -> dict:
            for key, value in updates.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    deep_merge(base[key], value)
                else:
                    base[key] = value
            return base
        
        merged = deep_merge(current, overrides)
        return Settings(**merged)
