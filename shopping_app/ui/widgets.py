# shopping_app/ui/widgets.py

"""Reusable widgets and text helpers for the Product Store screens."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from shopping_app.config.settings import Settings
from shopping_app.models.product import Product, Rating

HEART_FILLED = "♥"
HEART_EMPTY = "♡"
STAR_FILLED = "★"
STAR_EMPTY = "☆"


def format_price(price: float) -> str:
    """Render a price the way every screen shows it."""
    return f"Price: {Settings.CURRENCY_SYMBOL}{price:.2f}"


def rating_line(rating: Rating) -> str:
    """Five stars, filled up to the whole part of the rate, plus count."""
    filled = min(int(rating.rate), Settings.RATING_STARS)
    stars = STAR_FILLED * filled + STAR_EMPTY * (
        Settings.RATING_STARS - filled
    )
    return f"{stars} ({rating.count})"


def heart_label(is_favorite: bool) -> str:
    return HEART_FILLED if is_favorite else HEART_EMPTY


def cart_label(count: int) -> str:
    """Cart button text; the badge is omitted for an empty cart."""
    if count > 0:
        return f"🛒 Cart ({count})"
    return "🛒 Cart"


class ProductCard(Vertical):
    """Grid tile for one product with a favourite toggle."""

    def __init__(self, product: Product, is_favorite: bool = False) -> None:
        super().__init__(id=f"card_{product.id}", classes="product_card")
        self.product = product
        self.is_favorite = is_favorite

    def compose(self) -> ComposeResult:
        """Build the card contents."""
        title = self.product.title[: Settings.TITLE_MAX_LENGTH]
        yield Static(title, classes="card_title")
        yield Static(format_price(self.product.price), classes="card_price")
        yield Static(rating_line(self.product.rating), classes="card_rating")
        yield Horizontal(
            Button(
                heart_label(self.is_favorite),
                id=f"heart_{self.product.id}",
                classes="heart_btn",
            ),
            Button(
                "Details",
                id=f"details_{self.product.id}",
                classes="details_btn",
            ),
            classes="card_actions",
        )

    def set_favorite(self, is_favorite: bool) -> None:
        """Sync the heart icon with the favourite flag."""
        self.is_favorite = is_favorite
        heart = self.query_one(f"#heart_{self.product.id}", Button)
        heart.label = heart_label(is_favorite)
