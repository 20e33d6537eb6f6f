# shopping_app/services/catalog_loader.py

"""Loads the bundled JSON product catalog into :class:`Product` records."""

import asyncio
import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shopping_app.config.settings import Settings
from shopping_app.models.product import Product, Rating

logger = logging.getLogger("shopping_app.catalog")

_REQUIRED_FIELDS = ("id", "title", "description", "price", "rating", "image")


class CatalogError(Exception):
    """Base class for catalog loading failures."""


class CatalogNotFoundError(CatalogError):
    """The catalog resource does not exist."""


class CatalogDecodeError(CatalogError):
    """The catalog exists but is not a valid product document."""


@dataclass
class CatalogResult:
    """Outcome of a one-shot asynchronous catalog load."""

    products: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the catalog decoded successfully."""
        return self.error is None


# ── Field decoding ───────────────────────────────────────


def _require_int(value: Any, name: str, index: int) -> int:
    # bool is an int subclass but never a valid JSON integer here
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogDecodeError(
            f"record {index}: '{name}' must be an integer, "
            f"got {type(value).__name__}"
        )
    return value


def _require_number(value: Any, name: str, index: int) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogDecodeError(
            f"record {index}: '{name}' must be a number, "
            f"got {type(value).__name__}"
        )
    try:
        number = float(value)
    except OverflowError as exc:
        raise CatalogDecodeError(
            f"record {index}: '{name}' is too large"
        ) from exc
    if not math.isfinite(number):
        raise CatalogDecodeError(
            f"record {index}: '{name}' must be finite"
        )
    return number


def _require_str(value: Any, name: str, index: int) -> str:
    if not isinstance(value, str):
        raise CatalogDecodeError(
            f"record {index}: '{name}' must be a string, "
            f"got {type(value).__name__}"
        )
    return value


def _decode_rating(raw: Any, index: int) -> Rating:
    """Decode the nested ``rating`` object of one record."""
    if not isinstance(raw, dict):
        raise CatalogDecodeError(
            f"record {index}: 'rating' must be an object"
        )
    for key in ("rate", "count"):
        if key not in raw:
            raise CatalogDecodeError(
                f"record {index}: 'rating' is missing '{key}'"
            )

    rate = _require_number(raw["rate"], "rating.rate", index)
    count = _require_int(raw["count"], "rating.count", index)
    if not 0 <= rate <= 5:
        raise CatalogDecodeError(
            f"record {index}: 'rating.rate' {rate} outside 0..5"
        )
    if count < 0:
        raise CatalogDecodeError(
            f"record {index}: 'rating.count' must not be negative"
        )
    return Rating(rate=rate, count=count)


def decode_product(raw: Any, index: int = 0) -> Product:
    """Decode a single catalog record.

    All fields are required and strictly typed; unknown keys are ignored.
    Raises :class:`CatalogDecodeError` on the first problem found.
    """
    if not isinstance(raw, dict):
        raise CatalogDecodeError(f"record {index}: expected an object")

    missing = [name for name in _REQUIRED_FIELDS if name not in raw]
    if missing:
        raise CatalogDecodeError(
            f"record {index}: missing field(s) {', '.join(missing)}"
        )

    price = _require_number(raw["price"], "price", index)
    if price < 0:
        raise CatalogDecodeError(
            f"record {index}: 'price' must not be negative"
        )

    return Product(
        id=_require_int(raw["id"], "id", index),
        title=_require_str(raw["title"], "title", index),
        description=_require_str(raw["description"], "description", index),
        price=price,
        rating=_decode_rating(raw["rating"], index),
        image=_require_str(raw["image"], "image", index),
    )


# ── Loader ───────────────────────────────────────────────


class CatalogLoader:
    """Reads and decodes the product catalog.

    ``load`` is synchronous and raises :class:`CatalogError` subclasses;
    ``fetch`` is the one-shot asynchronous entry point used by the UI and
    reports failures through a :class:`CatalogResult` instead.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path if path is not None else Settings.CATALOG_PATH

    def parse(self, raw: str | bytes) -> list[Product]:
        """Decode a catalog document that is already in memory."""
        # ValueError covers JSONDecodeError, bad UTF-8 and the int digit limit
        try:
            document: Any = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise CatalogDecodeError(f"invalid JSON: {exc}") from exc

        if not isinstance(document, list):
            raise CatalogDecodeError(
                "catalog root must be an array of products"
            )

        products: list[Product] = []
        seen_ids: set[int] = set()
        for index, record in enumerate(document):
            product = decode_product(record, index)
            if product.id in seen_ids:
                raise CatalogDecodeError(
                    f"record {index}: duplicate product id {product.id}"
                )
            seen_ids.add(product.id)
            products.append(product)
        return products

    def load(self) -> list[Product]:
        """Read the catalog file and decode every record."""
        if not self.path.is_file():
            raise CatalogNotFoundError(f"catalog not found: {self.path}")

        try:
            data = self.path.read_bytes()
        except OSError as exc:
            raise CatalogNotFoundError(
                f"catalog unreadable: {self.path} ({exc})"
            ) from exc

        products = self.parse(data)
        logger.info(
            "Loaded %d products from %s", len(products), self.path
        )
        self._log_products(products)
        return products

    async def fetch(self) -> CatalogResult:
        """Load the catalog in a worker thread; never raises for bad data."""
        try:
            products = await asyncio.to_thread(self.load)
        except CatalogNotFoundError as exc:
            logger.error("Catalog file not found: %s", exc)
            return CatalogResult(error=str(exc))
        except CatalogDecodeError as exc:
            logger.error("Error loading catalog JSON: %s", exc)
            return CatalogResult(error=str(exc))
        return CatalogResult(products=products)

    @staticmethod
    def _log_products(products: list[Product]) -> None:
        """Dump the decoded catalog to the debug log."""
        for p in products:
            logger.debug(
                "ID: %d, Title: %s, Price: %.2f, Rating: %.1f/5 (%d), "
                "Image: %s, Description: %s",
                p.id,
                p.title,
                p.price,
                p.rating.rate,
                p.rating.count,
                p.image,
                p.description,
            )
