# shopping_app/config/settings.py

"""Central configuration for the Product Store application."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the Product Store application."""

    # --- Presentation ---
    APP_TITLE: str = "Product Store"
    CART_TITLE: str = "Your Cart"
    DETAIL_TITLE: str = "Product Preview"
    CURRENCY_SYMBOL: str = "$"
    GRID_COLUMNS: int = 2               # Product cards per grid row
    RATING_STARS: int = 5               # Stars drawn per rating line
    TITLE_MAX_LENGTH: int = 60          # Card titles are cut after this

    # --- Messages ---
    LOADING_MESSAGE: str = "Loading Products..."
    EMPTY_CART_MESSAGE: str = "Your Cart is Empty!"
    CHECKOUT_TITLE: str = "Thank You"
    CHECKOUT_MESSAGE: str = "Your order has been placed successfully!"

    # --- Paths ---
    PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = PACKAGE_DIR / "data"
    CATALOG_PATH: Path = Path(
        os.getenv("SHOPPING_APP_CATALOG", str(DATA_DIR / "products.json"))
    )
    # Resolved against the working directory unless SHOPPING_APP_LOGS is set
    LOGS_DIR: Path = Path(os.getenv("SHOPPING_APP_LOGS", "logs"))
