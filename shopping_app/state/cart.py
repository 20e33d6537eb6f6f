# shopping_app/state/cart.py

"""Ordered, in-memory shopping cart."""

import logging
from collections.abc import Iterator

from shopping_app.models.product import Product

logger = logging.getLogger("shopping_app.state")


class Cart:
    """Insertion-ordered list of products; duplicates are allowed."""

    def __init__(self) -> None:
        self._items: list[Product] = []

    def append(self, product: Product) -> None:
        """Add ``product`` to the end of the cart unconditionally."""
        self._items.append(product)
        logger.debug(
            "Cart += %d (%s), size=%d",
            product.id,
            product.title,
            len(self._items),
        )

    def remove_all(self, product_id: int) -> int:
        """Drop every entry whose id is ``product_id``.

        Returns the number of entries removed.
        """
        kept = [p for p in self._items if p.id != product_id]
        removed = len(self._items) - len(kept)
        self._items = kept
        if removed:
            logger.debug(
                "Cart -= %d (%d entries), size=%d",
                product_id,
                removed,
                len(self._items),
            )
        return removed

    def contains(self, product_id: int) -> bool:
        """True if at least one entry has id ``product_id``."""
        return any(p.id == product_id for p in self._items)

    def count(self) -> int:
        """Number of entries, duplicates included."""
        return len(self._items)

    def total(self) -> float:
        """Sum of the prices of every entry."""
        return sum(p.price for p in self._items)

    def items(self) -> list[Product]:
        """Snapshot copy of the entries in insertion order."""
        return list(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
