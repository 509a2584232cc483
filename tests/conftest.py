"""
Pytest configuration and fixtures.
"""

import json

import pytest


SAMPLE_CATALOG = {
    "searchBar": ["#twotabsearchtextbox", "input[name=field-keywords]"],
    "searchButton": ["#nav-search-submit-button"],
    "productTitle": [],
    "firstProductPrice": [".a-price .a-offscreen"],
}


@pytest.fixture
def settings():
    """Provide test settings."""
    from retail_search_harness.config import Settings, BrowserSettings, LocatorSettings
    
    return Settings(
        browser=BrowserSettings(headless=True),
        locators=LocatorSettings(settle_timeout_ms=0, quiescence_ms=0),
    )


@pytest.fixture
def locator_settings(tmp_path):
    """Locator settings with no settle delay and screenshots under tmp_path."""
    from retail_search_harness.config import LocatorSettings
    
    return LocatorSettings(
        catalog_path=str(tmp_path / "locators.json"),
        settle_timeout_ms=0,
        quiescence_ms=0,
        discovery_visible_timeout_ms=0,
        screenshot_dir=str(tmp_path / "screenshots"),
    )


@pytest.fixture
def catalog_file(tmp_path):
    """Write the sample catalog and return its path."""
    path = tmp_path / "locators.json"
    path.write_text(json.dumps(SAMPLE_CATALOG, indent=2) + "\n")
    return path


@pytest.fixture
def catalog(catalog_file):
    """A loaded SelectorCatalog backed by catalog_file."""
    from retail_search_harness.locators import SelectorCatalog
    
    return SelectorCatalog.from_path(catalog_file)
