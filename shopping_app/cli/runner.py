# shopping_app/cli/runner.py

"""Headless catalog listing, printed with Rich."""

import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from shopping_app.models.product import Product
from shopping_app.services.catalog_loader import CatalogError, CatalogLoader
from shopping_app.ui.widgets import rating_line

logger = logging.getLogger("shopping_app.cli")

# Stderr console for status messages so stdout only carries the table
_err = Console(stderr=True)


def build_table(products: list[Product]) -> Table:
    """Render the catalog as a Rich table in source order."""
    table = Table(
        title="Product Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Image", style="magenta")

    for p in products:
        table.add_row(
            str(p.id),
            p.title[:60],
            f"${p.price:,.2f}",
            rating_line(p.rating),
            p.image or "—",
        )
    return table


def list_catalog(path: Path | None = None) -> int:
    """Print the decoded catalog and return an exit code (0=ok, 1=fail)."""
    loader = CatalogLoader(path)
    try:
        products = loader.load()
    except CatalogError as exc:
        logger.error("Catalog listing failed: %s", exc)
        _err.print(f"[red]Could not load catalog: {exc}[/red]")
        return 1

    if not products:
        _err.print("[yellow]Catalog is empty.[/yellow]")
        return 0

    Console().print(build_table(products))
    _err.print(f"[green]✓ {len(products)} products[/green]")
    return 0
