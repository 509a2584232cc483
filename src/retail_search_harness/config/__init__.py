"""
Configuration module - Centralized settings management.

This module provides type-safe configuration management using Pydantic,
supporting environment variables, YAML files, and CLI arguments.

Usage:
    from retail_search_harness.config import load_config
    
    settings = load_config()
    
    # Or with overrides
    settings = load_config(browser={"headless": False})

Environment Variables:
    RETAIL_SEARCH_HARNESS__BROWSER__HEADLESS=false
    RETAIL_SEARCH_HARNESS__LOCATORS__CATALOG_PATH=locators/amazon-locators.json
    RETAIL_SEARCH_HARNESS__SEARCH__BASE_URL=https://www.amazon.com/
"""

from retail_search_harness.config.settings import (
    Settings,
    BrowserSettings,
    LocatorSettings,
    SearchSettings,
    LoggingSettings,
)
from retail_search_harness.config.loader import ConfigLoader, load_config

__all__ = [
    "Settings",
    "BrowserSettings",
    "LocatorSettings",
    "SearchSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
]
