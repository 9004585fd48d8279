# src/filters/product_validator.py

"""Catalog checks run after loading, before any round can start."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from src.models.product import Product

logger = logging.getLogger("price_guesser.filters")


class DropReason(Enum):
    """Why a product was left out of the playable catalog."""

    BLANK_NAME = "blank name"
    NEGATIVE_PRICE = "negative price"
    DUPLICATE_ID = "duplicate id"


@dataclass
class CatalogReport:
    """Playable products plus every product that was set aside."""

    valid: list[Product] = field(default_factory=list)
    dropped: list[tuple[Product, DropReason]] = field(default_factory=list)

    def count(self, reason: DropReason) -> int:
        return sum(1 for _, r in self.dropped if r is reason)


def _problem(product: Product) -> DropReason | None:
    if not product.name.strip():
        return DropReason.BLANK_NAME
    if product.price < 0:
        return DropReason.NEGATIVE_PRICE
    return None


class ProductValidator:
    """Splits a loaded catalog into playable and rejected products."""

    @staticmethod
    def validate(products: list[Product]) -> CatalogReport:
        """Check each product; the first product with a given id wins.

        Free products (price 0.00) are playable.
        """
        report = CatalogReport()
        seen_ids: set[str] = set()

        for product in products:
            reason = _problem(product)
            if reason is None and product.id in seen_ids:
                reason = DropReason.DUPLICATE_ID
            if reason is not None:
                report.dropped.append((product, reason))
                continue
            seen_ids.add(product.id)
            report.valid.append(product)

        if report.dropped:
            summary = Counter(r.value for _, r in report.dropped)
            logger.info(
                "Catalog: kept %d, dropped %d (%s)",
                len(report.valid),
                len(report.dropped),
                ", ".join(f"{n} {why}" for why, n in sorted(summary.items())),
            )
            for product, reason in report.dropped:
                logger.debug("Dropped id=%s %r: %s",
                             product.id, product.name, reason.value)

        return report
