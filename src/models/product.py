# src/models/product.py

"""Product data model for the price catalog."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from src.config.settings import Settings


def to_cents(value: Decimal) -> Decimal:
    """Round *value* half away from zero to two decimal places."""
    return value.quantize(Settings.PRICE_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Product:
    """A catalog item whose price the player has to guess."""

    id: str
    name: str
    price: Decimal
    image_ref: str = ""
