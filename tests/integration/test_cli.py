"""
Integration tests for the CLI commands.
"""

import json

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


class TestCLISearch:
    """Test the 'search' CLI command."""
    
    def test_search_help(self, runner):
        """Test help for search command."""
        from retail_search_harness.main import app
        result = runner.invoke(app, ["search", "--help"])
        assert result.exit_code == 0
        assert "Run the search flow" in result.stdout
    
    def test_search_options(self, runner):
        from retail_search_harness.main import app
        result = runner.invoke(app, ["search", "--help"])
        assert "--visible" in result.stdout
        assert "--catalog" in result.stdout
    
    def test_search_missing_catalog(self, runner, tmp_path):
        """A missing catalog stops the run before a browser is launched."""
        from retail_search_harness.main import app
        result = runner.invoke(app, ["search", "laptop", "--catalog", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.stdout
    
    def test_search_missing_config(self, runner, tmp_path):
        from retail_search_harness.main import app
        result = runner.invoke(app, ["search", "laptop", "--config", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1


class TestCLICatalog:
    """Test the 'catalog' CLI commands."""
    
    def test_catalog_show(self, runner, catalog_file):
        from retail_search_harness.main import app
        result = runner.invoke(app, ["catalog", "show", "--catalog", str(catalog_file)])
        assert result.exit_code == 0
        assert "searchBar" in result.stdout
        assert "#twotabsearchtextbox" in result.stdout
        assert "(empty)" in result.stdout
    
    def test_catalog_show_malformed(self, runner, tmp_path):
        from retail_search_harness.main import app
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]")
        result = runner.invoke(app, ["catalog", "show", "--catalog", str(path)])
        assert result.exit_code == 1
    
    def test_catalog_promote(self, runner, catalog_file):
        from retail_search_harness.main import app
        result = runner.invoke(
            app,
            ["catalog", "promote", "searchBar", 'input[type="search"]', "--catalog", str(catalog_file)],
        )
        assert result.exit_code == 0
        data = json.loads(catalog_file.read_text())
        assert data["searchBar"][0] == 'input[type="search"]'
        assert data["searchBar"][1:] == ["#twotabsearchtextbox", "input[name=field-keywords]"]


class TestCLIHeuristics:
    """Test the 'heuristics' CLI command."""
    
    def test_heuristics_lists_table(self, runner):
        from retail_search_harness.main import app
        result = runner.invoke(app, ["heuristics"])
        assert result.exit_code == 0
        assert "searchButton" in result.stdout
