"""
Retail Search Harness - CLI Entry Point.

Configuration Priority:
    1. CLI arguments (--visible, --catalog, etc.)
    2. Environment variables (RETAIL_SEARCH_HARNESS__SEARCH__BASE_URL, etc.)
    3. Config file (harness.yaml)

Usage:
    retail-search-harness search "laptop"
    retail-search-harness search "coffee grinder" --visible
    retail-search-harness catalog show
    retail-search-harness catalog promote searchBar "input[type='search']"
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from retail_search_harness.browsers.playwright_browser import BrowserType, PlaywrightBrowser
from retail_search_harness.config import Settings, load_config
from retail_search_harness.exceptions import ElementNotFoundError, HarnessError
from retail_search_harness.flows.search import SearchFlow, SearchOutcome
from retail_search_harness.locators import HEURISTIC_SELECTORS, LocatorResolver, SelectorCatalog
from retail_search_harness.utils.logging import setup_logging

app = typer.Typer(
    name="retail-search-harness",
    help="Browser acceptance tests for a storefront search flow",
    add_completion=False,
)

catalog_app = typer.Typer(help="Inspect and edit the selector catalog")
app.add_typer(catalog_app, name="catalog")

console = Console()


def _load_settings(config: Optional[str], catalog: Optional[str]) -> Settings:
    try:
        settings = load_config(config_path=config)
    except HarnessError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    if catalog:
        settings = settings.merge_with({"locators": {"catalog_path": catalog}})
    return settings


def _load_catalog(path: str) -> SelectorCatalog:
    try:
        return SelectorCatalog.from_path(path)
    except HarnessError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def search(
    term: str = typer.Argument(..., help="Search term to submit"),
    visible: bool = typer.Option(False, "--visible", "-v", help="Run with visible browser"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to harness YAML config"),
    catalog: Optional[str] = typer.Option(None, "--catalog", help="Selector catalog file (default: from config)"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose output"),
):
    """
    Run the search flow for a term and verify titles and price.

    Examples:
        retail-search-harness search "laptop"
        retail-search-harness search "laptop" --visible --catalog my-locators.json
    """
    settings = _load_settings(config, catalog)
    setup_logging(
        level="DEBUG" if verbose else settings.logging.level,
        log_file=settings.logging.file,
        json_format=settings.logging.json_format,
        log_format=settings.logging.format,
    )
    selector_catalog = _load_catalog(settings.locators.catalog_path)

    console.print(Panel.fit(
        f"[bold blue]Retail Search Harness[/bold blue]\n"
        f"[dim]Site:[/dim] {settings.search.base_url}\n"
        f"[dim]Term:[/dim] {escape(term)}\n"
        f"[dim]Catalog:[/dim] {settings.locators.catalog_path}",
        border_style="blue",
    ))

    try:
        outcome = asyncio.run(_search_async(term, settings, selector_catalog, headless=not visible))
    except ElementNotFoundError as e:
        console.print(f"\n[red]✗ Element not found:[/red] {e.description} ({e.key})")
        if e.screenshot_path:
            console.print(f"  Screenshot: {e.screenshot_path}")
        raise typer.Exit(1)
    except HarnessError as e:
        console.print(f"\n[red]✗ Failed:[/red] {e}")
        raise typer.Exit(1)

    console.print("\n[green]✓ Success![/green]")
    console.print(f"  URL: {outcome.url}")
    console.print(f"  Title: {outcome.title}")
    console.print(f"  Price: {outcome.price.text} ({outcome.price.amount})")


async def _search_async(
    term: str,
    settings: Settings,
    catalog: SelectorCatalog,
    headless: bool,
) -> SearchOutcome:
    """Run the flow in a fresh browser and always close it."""
    browser = PlaywrightBrowser()
    try:
        await browser.launch(
            headless=headless and settings.browser.headless,
            browser_type=BrowserType(settings.browser.browser_type),
            slow_mo=settings.browser.slow_mo,
        )
        page = await browser.new_page(
            default_timeout_ms=settings.browser.timeout_ms,
            viewport={
                "width": settings.browser.viewport_width,
                "height": settings.browser.viewport_height,
            },
            ignore_https_errors=settings.browser.ignore_https_errors,
        )
        resolver = LocatorResolver(catalog, settings.locators)
        flow = SearchFlow(page, resolver, settings.search)
        return await flow.run(term)
    finally:
        await browser.close()


@catalog_app.command("show")
def catalog_show(
    catalog: Optional[str] = typer.Option(None, "--catalog", help="Selector catalog file (default: from config)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to harness YAML config"),
):
    """Show every element key and its selectors in priority order."""
    settings = _load_settings(config, catalog)
    selector_catalog = _load_catalog(settings.locators.catalog_path)

    table = Table(title=f"Selector catalog: {selector_catalog.path}")
    table.add_column("Key", style="cyan")
    table.add_column("#", justify="right")
    table.add_column("Selector")

    for key in selector_catalog.keys():
        selectors = selector_catalog.get(key) or []
        if not selectors:
            table.add_row(key, "-", "[dim](empty)[/dim]")
        for index, selector in enumerate(selectors):
            table.add_row(key if index == 0 else "", str(index), escape(selector))

    console.print(table)


@catalog_app.command("promote")
def catalog_promote(
    key: str = typer.Argument(..., help="Element key"),
    selector: str = typer.Argument(..., help="Selector to put first"),
    catalog: Optional[str] = typer.Option(None, "--catalog", help="Selector catalog file (default: from config)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to harness YAML config"),
):
    """Put a selector at the front of a key's list."""
    settings = _load_settings(config, catalog)
    selector_catalog = _load_catalog(settings.locators.catalog_path)
    try:
        selector_catalog.promote(key, selector)
    except HarnessError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {key}: {escape(selector)}")


@app.command("heuristics")
def heuristics():
    """List the built-in heuristic selectors."""
    table = Table(title="Heuristic selectors")
    table.add_column("Key", style="cyan")
    table.add_column("Selector")
    for key, selectors in HEURISTIC_SELECTORS.items():
        for index, selector in enumerate(selectors):
            table.add_row(key if index == 0 else "", escape(selector))
    console.print(table)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
