# tests/test_app_state.py

"""Tests for the shared application state and its cart protocol."""

import unittest

from shopping_app.models.product import Favourite, Product, Rating
from shopping_app.services.catalog_loader import CatalogResult
from shopping_app.state.app_state import AppState, LoadStatus


def _p(product_id: int, title: str = "Item", price: float = 10.0) -> Product:
    """Create a minimal Product for testing."""
    return Product(
        id=product_id,
        title=title,
        description="",
        price=price,
        rating=Rating(rate=4.0, count=10),
        image="",
    )


class TestCatalogPublishing(unittest.TestCase):
    """Load status transitions."""

    def setUp(self) -> None:
        self.state = AppState()

    def test_initial_status_is_loading(self) -> None:
        """Nothing is shown until the catalog arrives."""
        self.assertIs(self.state.status, LoadStatus.LOADING)
        self.assertEqual(self.state.products, [])
        self.assertIsNone(self.state.error)

    def test_publish_success(self) -> None:
        """A successful result becomes the catalog."""
        products = [_p(1), _p(2)]
        self.state.publish_catalog(CatalogResult(products=products))
        self.assertIs(self.state.status, LoadStatus.LOADED)
        self.assertEqual(self.state.products, products)

    def test_publish_failure(self) -> None:
        """A failed result leaves no products and an explicit error."""
        self.state.publish_catalog(CatalogResult(error="catalog not found"))
        self.assertIs(self.state.status, LoadStatus.ERROR)
        self.assertEqual(self.state.products, [])
        self.assertEqual(self.state.error, "catalog not found")

    def test_product_by_id(self) -> None:
        """Lookup by id returns the product or None."""
        self.state.publish_catalog(CatalogResult(products=[_p(1), _p(2)]))
        product = self.state.product_by_id(2)
        self.assertIsNotNone(product)
        assert product is not None
        self.assertEqual(product.id, 2)
        self.assertIsNone(self.state.product_by_id(3))


class TestToggleFavorite(unittest.TestCase):
    """Grid heart toggle couples the flag with cart membership."""

    def setUp(self) -> None:
        self.state = AppState()
        self.product = _p(1)

    def test_first_toggle_favourites_and_adds_once(self) -> None:
        """Toggle on: flag true, exactly one copy in the cart."""
        self.assertTrue(self.state.toggle_favorite(self.product))
        self.assertTrue(self.state.favorites.is_favorite(1))
        self.assertEqual(self.state.cart.items(), [self.product])

    def test_second_toggle_unfavourites_and_removes(self) -> None:
        """Toggle off: flag false, no copies left."""
        self.state.toggle_favorite(self.product)
        self.assertFalse(self.state.toggle_favorite(self.product))
        self.assertFalse(self.state.favorites.is_favorite(1))
        self.assertFalse(self.state.cart.contains(1))

    def test_toggle_off_removes_every_copy(self) -> None:
        """Copies added through other paths are removed too."""
        self.state.cart.append(self.product)
        self.state.cart.append(self.product)
        self.state.toggle_favorite(self.product)  # on, third copy
        self.assertEqual(self.state.cart.count(), 3)
        self.state.toggle_favorite(self.product)  # off
        self.assertEqual(self.state.cart.count(), 0)

    def test_toggle_off_leaves_other_products(self) -> None:
        """Only the toggled product leaves the cart."""
        other = _p(2)
        self.state.toggle_favorite(other)
        self.state.toggle_favorite(self.product)
        self.state.toggle_favorite(self.product)
        self.assertEqual(self.state.cart.items(), [other])

    def test_toggle_after_detail_add_turns_off(self) -> None:
        """A detail add forces the flag on, so the next toggle is off."""
        self.state.add_to_cart_from_detail(self.product)
        self.assertFalse(self.state.toggle_favorite(self.product))
        self.assertEqual(self.state.cart.count(), 0)


class TestAddToCartFromDetail(unittest.TestCase):
    """Detail add-to-cart is duplicate guarded and forces the flag."""

    def setUp(self) -> None:
        self.state = AppState()
        self.product = _p(1)

    def test_adds_when_absent(self) -> None:
        """An absent product is appended and favourited."""
        self.assertTrue(self.state.add_to_cart_from_detail(self.product))
        self.assertEqual(self.state.cart.count(), 1)
        self.assertTrue(self.state.favorites.is_favorite(1))

    def test_present_product_not_duplicated(self) -> None:
        """Cart length stays the same; the flag is still forced on."""
        self.state.cart.append(self.product)
        self.assertTrue(1 not in self.state.favorites)
        self.assertFalse(self.state.add_to_cart_from_detail(self.product))
        self.assertEqual(self.state.cart.count(), 1)
        self.assertTrue(self.state.favorites.is_favorite(1))

    def test_never_turns_flag_off(self) -> None:
        """Repeated detail adds keep the flag on."""
        self.state.favorites.set(1, Favourite(is_favorite=True))
        self.state.add_to_cart_from_detail(self.product)
        self.state.add_to_cart_from_detail(self.product)
        self.assertTrue(self.state.favorites.is_favorite(1))
        self.assertEqual(self.state.cart.count(), 1)


class TestBadgeAndCheckout(unittest.TestCase):
    """Badge mirrors the cart; checkout is cosmetic."""

    def setUp(self) -> None:
        self.state = AppState()

    def test_badge_tracks_cart_length(self) -> None:
        """Badge count equals the live cart length."""
        self.assertEqual(self.state.badge_count(), 0)
        self.assertFalse(self.state.badge_visible())
        self.state.toggle_favorite(_p(1))
        self.state.toggle_favorite(_p(2))
        self.assertEqual(self.state.badge_count(), 2)
        self.assertTrue(self.state.badge_visible())

    def test_removing_last_product_hides_badge(self) -> None:
        """Un-favouriting the only product drops the badge to zero."""
        product = _p(1)
        self.state.toggle_favorite(product)
        self.state.toggle_favorite(product)
        self.assertEqual(self.state.badge_count(), 0)
        self.assertFalse(self.state.badge_visible())

    def test_checkout_acknowledges_without_clearing(self) -> None:
        """Checkout returns the thank-you text and keeps the cart."""
        self.state.toggle_favorite(_p(1))
        ack = self.state.checkout()
        self.assertEqual(ack.title, "Thank You")
        self.assertEqual(
            ack.message, "Your order has been placed successfully!"
        )
        self.assertEqual(self.state.cart.count(), 1)


class TestShirtScenario(unittest.TestCase):
    """End-to-end: toggle in the grid, then add from the detail view."""

    def test_grid_toggle_then_detail_add(self) -> None:
        """The detail add after a grid toggle is duplicate guarded."""
        shirt = Product(
            id=1,
            title="Shirt",
            description="",
            price=19.99,
            rating=Rating(rate=4.0, count=10),
            image="",
        )
        state = AppState()
        state.publish_catalog(CatalogResult(products=[shirt]))

        state.toggle_favorite(shirt)
        self.assertEqual(state.cart.items(), [shirt])
        self.assertTrue(state.favorites.is_favorite(1))

        state.add_to_cart_from_detail(shirt)
        self.assertEqual(state.cart.count(), 1)
        self.assertTrue(state.favorites.is_favorite(1))


if __name__ == "__main__":
    unittest.main()
