# main.py

"""Entry point for the Product Store (TUI or headless catalog listing)."""

import argparse
import logging
import sys
from pathlib import Path

from shopping_app.config.logging_config import setup_logging

logger = logging.getLogger("shopping_app.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="shopping_app",
        description="Browse a product catalog, mark favourites, fill a cart.",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        type=Path,
        help="Path to a products JSON file (default: bundled catalog).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_catalog",
        help="Print the catalog as a table and exit.",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        type=Path,
        dest="log_dir",
        help="Directory for the per-run log file (default: logs/).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Echo INFO records to stderr (headless listing only).",
    )
    return parser


def _run_tui(catalog: Path | None) -> None:
    """Launch the interactive Textual TUI."""
    from shopping_app.services.catalog_loader import CatalogLoader
    from shopping_app.ui.app import ShoppingApp

    try:
        app = ShoppingApp(loader=CatalogLoader(catalog))
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("Product Store TUI shutting down")


def _run_list(catalog: Path | None) -> None:
    """Print the catalog and exit."""
    from shopping_app.cli.runner import list_catalog

    sys.exit(list_catalog(catalog))


def main() -> None:
    """Route to the TUI (default) or the headless listing."""
    args = _build_parser().parse_args()

    # Console stays at WARNING while the TUI is drawing
    console_level = (
        logging.INFO
        if args.verbose and args.list_catalog
        else logging.WARNING
    )
    log_file = setup_logging(args.log_dir, console_level)
    logger.info("Product Store starting, log file: %s", log_file)

    if args.list_catalog:
        _run_list(args.catalog)
    else:
        _run_tui(args.catalog)


if __name__ == "__main__":
    main()
