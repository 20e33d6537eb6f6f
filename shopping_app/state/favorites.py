# shopping_app/state/favorites.py

"""Favourite flags keyed by product id."""

import logging

from shopping_app.models.product import Favourite

logger = logging.getLogger("shopping_app.state")


class FavoritesMap:
    """Mapping of product id to :class:`Favourite`.

    Reads never materialise entries: ``get`` on an unknown id returns a
    fresh default flag and leaves the map untouched.  Only ``set`` writes.
    There is no removal; un-favouriting stores ``False``.
    """

    def __init__(self) -> None:
        self._flags: dict[int, Favourite] = {}

    def get(self, product_id: int) -> Favourite:
        """Return the stored flag, or a default (not favourite) one."""
        stored = self._flags.get(product_id)
        if stored is None:
            return Favourite()
        return Favourite(is_favorite=stored.is_favorite)

    def set(self, product_id: int, favourite: Favourite) -> None:
        """Insert or overwrite the flag for ``product_id``."""
        self._flags[product_id] = Favourite(
            is_favorite=favourite.is_favorite
        )
        logger.debug(
            "Favourite[%d] = %s", product_id, favourite.is_favorite
        )

    def is_favorite(self, product_id: int) -> bool:
        """Shortcut for ``get(product_id).is_favorite``."""
        return self.get(product_id).is_favorite

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._flags

    def __len__(self) -> int:
        return len(self._flags)
