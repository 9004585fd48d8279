# src/services/selection.py

"""Target selection policies for new rounds.

A selector is any callable taking the catalog and returning one product.
"""

import random
from collections.abc import Callable, Sequence

from src.models.product import Product

Selector = Callable[[Sequence[Product]], Product]


def uniform_random(products: Sequence[Product]) -> Product:
    """Pick a product with equal probability."""
    return random.choice(products)


def seeded_random(seed: int) -> Selector:
    """Return a uniform selector driven by its own seeded generator."""
    rng = random.Random(seed)

    def _select(products: Sequence[Product]) -> Product:
        return rng.choice(products)

    return _select


def fixed_index(index: int) -> Selector:
    """Always pick the product at *index* (wraps around the catalog)."""

    def _select(products: Sequence[Product]) -> Product:
        return products[index % len(products)]

    return _select
