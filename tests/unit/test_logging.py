"""
Tests for logging setup.
"""

import logging

import pytest

from retail_search_harness.utils import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test setup_logging."""
    
    def test_console_only(self, restore_root_logger):
        setup_logging(level="WARNING")
        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
    
    def test_file_uses_configured_format(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "harness.log"
        setup_logging(level="INFO", log_file=str(log_file), log_format="%(levelname)s|%(message)s")
        
        logging.getLogger("retail_search_harness.test").info("[searchBar] trying selector: #a")
        for handler in restore_root_logger.handlers:
            handler.flush()
        
        assert log_file.read_text() == "INFO|[searchBar] trying selector: #a\n"
    
    def test_json_file_format(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "harness.log"
        setup_logging(log_file=str(log_file), json_format=True, log_format="%(message)s")
        
        logging.getLogger("retail_search_harness.test").warning("slow page")
        for handler in restore_root_logger.handlers:
            handler.flush()
        
        assert '"level": "WARNING"' in log_file.read_text()
