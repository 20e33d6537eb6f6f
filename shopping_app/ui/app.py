# shopping_app/ui/app.py

"""Terminal UI for the Product Store."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Grid, Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, LoadingIndicator, Static

from shopping_app.config.settings import Settings
from shopping_app.services.catalog_loader import CatalogLoader
from shopping_app.state.app_state import AppState, LoadStatus
from shopping_app.ui.screens import CartScreen, ProductDetailScreen
from shopping_app.ui.widgets import ProductCard, cart_label

logger = logging.getLogger("shopping_app.ui")


class ShoppingApp(App[object]):
    """Product grid with favourites, a cart and product details."""

    CSS_PATH = "styles.css"
    TITLE = Settings.APP_TITLE

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("c", "open_cart", "Cart"),
    ]

    def __init__(self, loader: CatalogLoader | None = None) -> None:
        super().__init__()
        self.state = AppState()
        self.loader = loader if loader is not None else CatalogLoader()

    def compose(self) -> ComposeResult:
        """Build the widget tree for the main screen."""
        yield Header()
        yield Container(
            Horizontal(
                Static(Settings.LOADING_MESSAGE, id="status"),
                Button(cart_label(0), id="cart_btn"),
                id="top_bar",
            ),
            LoadingIndicator(id="loader"),
            VerticalScroll(Grid(id="product_grid"), id="grid_scroll"),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Size the grid and start the one-shot catalog load."""
        grid = self.query_one("#product_grid", Grid)
        grid.styles.grid_size_columns = Settings.GRID_COLUMNS
        self.run_worker(
            self.load_catalog(), name="catalog_load", exclusive=True
        )

    # ── Catalog ──────────────────────────────────────────

    async def load_catalog(self) -> None:
        """Fetch the catalog once and render whatever came back."""
        result = await self.loader.fetch()
        self.state.publish_catalog(result)
        await self.render_catalog()

    async def render_catalog(self) -> None:
        """Show loading, error or the product grid per the load status."""
        status = self.query_one("#status", Static)
        loader = self.query_one("#loader", LoadingIndicator)
        grid = self.query_one("#product_grid", Grid)

        loader.display = self.state.status is LoadStatus.LOADING
        await grid.remove_children()

        if self.state.status is LoadStatus.LOADING:
            status.update(Settings.LOADING_MESSAGE)
        elif self.state.status is LoadStatus.ERROR:
            status.update(f"❌ Could not load products: {self.state.error}")
            self.notify(
                "Product catalog unavailable", severity="error"
            )
        else:
            status.update(f"{len(self.state.products)} products")
            await grid.mount_all(
                [
                    ProductCard(
                        product,
                        self.state.favorites.is_favorite(product.id),
                    )
                    for product in self.state.products
                ]
            )

    # ── Events ───────────────────────────────────────────

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dispatch cart, heart and details buttons."""
        button_id = event.button.id or ""
        if button_id == "cart_btn":
            self.action_open_cart()
        elif button_id.startswith("heart_"):
            self.toggle_favorite(int(button_id.removeprefix("heart_")))
        elif button_id.startswith("details_"):
            self.open_details(int(button_id.removeprefix("details_")))

    def toggle_favorite(self, product_id: int) -> None:
        """Grid heart: flip the favourite flag and sync the cart."""
        product = self.state.product_by_id(product_id)
        if product is None:
            logger.warning("Toggle for unknown product id %d", product_id)
            return
        self.state.toggle_favorite(product)
        self.refresh_product(product_id)

    def open_details(self, product_id: int) -> None:
        """Push the detail screen for ``product_id``."""
        product = self.state.product_by_id(product_id)
        if product is None:
            logger.warning("Details for unknown product id %d", product_id)
            return
        self.push_screen(
            ProductDetailScreen(product, self.state),
            callback=self._on_detail_closed,
        )

    def _on_detail_closed(self, product_id: int | None) -> None:
        """Refresh the grid after the detail screen is dismissed."""
        if product_id is not None:
            self.refresh_product(product_id)

    def action_open_cart(self) -> None:
        """Push the cart summary screen."""
        self.push_screen(CartScreen(self.state))

    # ── View sync ────────────────────────────────────────

    def refresh_product(self, product_id: int) -> None:
        """Update one card's heart and the cart badge."""
        cards = self.query(f"#card_{product_id}")
        if cards:
            cards.first(ProductCard).set_favorite(
                self.state.favorites.is_favorite(product_id)
            )
        self.refresh_badge()

    def refresh_badge(self) -> None:
        """Update the cart button to the live cart length."""
        cart_btn = self.query_one("#cart_btn", Button)
        cart_btn.label = cart_label(self.state.badge_count())
