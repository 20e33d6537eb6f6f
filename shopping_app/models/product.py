# shopping_app/models/product.py

"""Catalog data model shared by the loader, the state and the views."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rating:
    """Average review score (0 to 5) and the number of reviews."""

    rate: float
    count: int


@dataclass(frozen=True)
class Product:
    """A single catalog entry, immutable once decoded."""

    id: int
    title: str
    description: str
    price: float
    rating: Rating
    image: str


@dataclass
class Favourite:
    """Per-product favourite flag."""

    is_favorite: bool = False
