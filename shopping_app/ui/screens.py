# shopping_app/ui/screens.py

"""Pushed screens: product detail and cart summary."""

import logging
from typing import cast

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, DataTable, Footer, Header, Static

from shopping_app.config.settings import Settings
from shopping_app.models.product import Product
from shopping_app.state.app_state import AppState
from shopping_app.ui.widgets import format_price, rating_line

logger = logging.getLogger("shopping_app.ui")


class ProductDetailScreen(Screen[int | None]):
    """Full description of one product with an "Add to Cart" action.

    Dismisses with the product id after adding to the cart, or with
    ``None`` when closed without adding.
    """

    TITLE = Settings.DETAIL_TITLE

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    def __init__(self, product: Product, state: AppState) -> None:
        super().__init__()
        self.product = product
        self.state = state

    def compose(self) -> ComposeResult:
        """Build the detail layout."""
        yield Header()
        yield VerticalScroll(
            Static(self.product.title, id="detail_title"),
            Static(rating_line(self.product.rating), id="detail_rating"),
            Static(format_price(self.product.price), id="detail_price"),
            Static(self.product.description, id="detail_description"),
            Horizontal(
                Button(
                    "Add to Cart", variant="success", id="add_to_cart_btn"
                ),
                Button("Close", variant="error", id="close_btn"),
                id="detail_actions",
            ),
            id="detail_container",
        )
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle Add to Cart / Close."""
        event.stop()
        if event.button.id == "add_to_cart_btn":
            self.action_add_to_cart()
        elif event.button.id == "close_btn":
            self.action_close()

    def action_add_to_cart(self) -> None:
        """Add the product (once), mark it favourite and leave."""
        self.state.add_to_cart_from_detail(self.product)
        self.dismiss(self.product.id)

    def action_close(self) -> None:
        """Leave without touching the cart."""
        self.dismiss(None)


class CartScreen(Screen[None]):
    """Lists the cart contents and offers a cosmetic checkout."""

    TITLE = Settings.CART_TITLE

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
    ]

    def __init__(self, state: AppState) -> None:
        super().__init__()
        self.state = state

    def compose(self) -> ComposeResult:
        """Build either the empty message or the cart table."""
        yield Header()
        if not self.state.cart.count():
            yield Static(Settings.EMPTY_CART_MESSAGE, id="empty_cart")
        else:
            yield VerticalScroll(
                DataTable(
                    id="cart_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
                Static(
                    f"Total: {Settings.CURRENCY_SYMBOL}"
                    f"{self.state.cart.total():.2f}",
                    id="cart_total",
                ),
                Button("Check Out", variant="primary", id="checkout_btn"),
                id="cart_container",
            )
        yield Footer()

    def on_mount(self) -> None:
        """Fill the cart table, if there is one."""
        tables = self.query("#cart_table")
        if not tables:
            return
        table = cast(DataTable[str], tables.first(DataTable))
        table.add_columns("Title", "Price")
        for product in self.state.cart:
            table.add_row(
                product.title[: Settings.TITLE_MAX_LENGTH],
                format_price(product.price),
            )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle the Check Out button."""
        event.stop()
        if event.button.id == "checkout_btn":
            self.action_checkout()

    def action_checkout(self) -> None:
        """Show the one-time thank-you acknowledgement."""
        ack = self.state.checkout()
        self.notify(ack.message, title=ack.title)
