# src/storage/catalog_loader.py

"""Loads the product catalog from a JSON file."""

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.models.product import Product, to_cents
from src.services.errors import CatalogLoadError

logger = logging.getLogger("price_guesser.catalog")


class CatalogLoader:
    """Reads ``[{id, name, image, price}, ...]`` records into Products."""

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path if path is not None else Settings.CATALOG_PATH
        logger.debug("CatalogLoader initialised: path=%s", self.path)

    def load(self) -> list[Product]:
        """Read, parse and validate the catalog file.

        Raises:
            CatalogLoadError: the file is missing, unreadable, not JSON, or
                its top level is not a list.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                # Decimal keeps 12.5 exact instead of a binary float
                data = json.load(f, parse_float=Decimal)
        except OSError as exc:
            logger.error("Cannot read catalog %s: %s", self.path, exc)
            raise CatalogLoadError(
                f"Cannot read catalog {self.path}: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            logger.error("Catalog %s is not valid JSON: %s", self.path, exc)
            raise CatalogLoadError(
                f"Catalog {self.path} is not valid JSON: {exc}"
            ) from exc

        if not isinstance(data, list):
            raise CatalogLoadError(
                f"Catalog {self.path} must contain a JSON list, "
                f"got {type(data).__name__}"
            )

        products: list[Product] = []
        for position, record in enumerate(data, 1):
            product = self._parse_record(record, position)
            if product is not None:
                products.append(product)

        report = ProductValidator.validate(products)
        logger.info(
            "Loaded %d products from %s", len(report.valid), self.path
        )
        return report.valid

    def _parse_record(
        self, record: Any, position: int
    ) -> Product | None:
        """Map one JSON record to a Product, or ``None`` if unusable."""
        if not isinstance(record, dict):
            logger.warning(
                "Skipping catalog entry %d: not an object", position
            )
            return None
        if "name" not in record or "price" not in record:
            logger.warning(
                "Skipping catalog entry %d: missing name or price",
                position,
            )
            return None

        price = self._parse_price(record["price"])
        if price is None:
            logger.warning(
                "Skipping catalog entry %d: non-numeric price %r",
                position,
                record["price"],
            )
            return None

        return Product(
            id=str(record.get("id", position)),
            name=str(record["name"]),
            price=price,
            image_ref=str(record.get("image") or ""),
        )

    @staticmethod
    def _parse_price(raw: Any) -> Decimal | None:
        if isinstance(raw, bool) or not isinstance(raw, (int, str, Decimal)):
            return None
        try:
            price = Decimal(str(raw).strip())
            if not price.is_finite():
                return None
            return to_cents(price)
        except InvalidOperation:
            return None
