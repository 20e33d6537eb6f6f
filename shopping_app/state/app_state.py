# shopping_app/state/app_state.py

"""Application state shared by the grid, detail and cart screens."""

import logging
from dataclasses import dataclass
from enum import Enum

from shopping_app.config.settings import Settings
from shopping_app.models.product import Favourite, Product
from shopping_app.services.catalog_loader import CatalogResult
from shopping_app.state.cart import Cart
from shopping_app.state.favorites import FavoritesMap

logger = logging.getLogger("shopping_app.state")


class LoadStatus(Enum):
    """What the product grid should currently render."""

    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


@dataclass(frozen=True)
class CheckoutAcknowledgement:
    """The one-time confirmation shown after pressing Check Out."""

    title: str
    message: str


class AppState:
    """Catalog, favourites and cart for one session.

    A single instance is created by the app and handed to every screen;
    screens mutate cart and favourites only through the methods below.

    The two mutation paths are asymmetric:

    * :meth:`toggle_favorite` (grid heart) couples the flag to cart
      membership.  Favouriting appends one copy, un-favouriting removes
      every copy with that id.
    * :meth:`add_to_cart_from_detail` appends only when the id is absent
      and always forces the flag on.
    """

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.status: LoadStatus = LoadStatus.LOADING
        self.error: str | None = None
        self.favorites = FavoritesMap()
        self.cart = Cart()

    # ── Catalog ──────────────────────────────────────────

    def publish_catalog(self, result: CatalogResult) -> None:
        """Install the outcome of the catalog load."""
        if result.ok:
            self.products = list(result.products)
            self.status = LoadStatus.LOADED
            self.error = None
            logger.info("Catalog published: %d products", len(self.products))
        else:
            self.products = []
            self.status = LoadStatus.ERROR
            self.error = result.error
            logger.warning("Catalog unavailable: %s", result.error)

    def product_by_id(self, product_id: int) -> Product | None:
        """Look up a catalog product by id."""
        return next(
            (p for p in self.products if p.id == product_id), None
        )

    # ── Cart / favourite protocol ────────────────────────

    def toggle_favorite(self, product: Product) -> bool:
        """Flip the favourite flag and sync the cart; returns the new flag."""
        favourite = self.favorites.get(product.id)
        favourite.is_favorite = not favourite.is_favorite
        self.favorites.set(product.id, favourite)

        if favourite.is_favorite:
            self.cart.append(product)
        else:
            self.cart.remove_all(product.id)

        logger.info(
            "Toggled favourite for %d -> %s (cart=%d)",
            product.id,
            favourite.is_favorite,
            self.cart.count(),
        )
        return favourite.is_favorite

    def add_to_cart_from_detail(self, product: Product) -> bool:
        """Add ``product`` once and mark it favourite.

        Returns True when an entry was appended, False when the cart
        already held the id.
        """
        added = False
        if not self.cart.contains(product.id):
            self.cart.append(product)
            added = True

        self.favorites.set(product.id, Favourite(is_favorite=True))
        logger.info(
            "Detail add-to-cart for %d (added=%s, cart=%d)",
            product.id,
            added,
            self.cart.count(),
        )
        return added

    def badge_count(self) -> int:
        """Value for the cart badge."""
        return self.cart.count()

    def badge_visible(self) -> bool:
        """The badge is hidden while the cart is empty."""
        return self.cart.count() > 0

    def checkout(self) -> CheckoutAcknowledgement:
        """Acknowledge a checkout; the cart is left as is."""
        logger.info(
            "Checkout acknowledged for %d items (%.2f)",
            self.cart.count(),
            self.cart.total(),
        )
        return CheckoutAcknowledgement(
            title=Settings.CHECKOUT_TITLE,
            message=Settings.CHECKOUT_MESSAGE,
        )
