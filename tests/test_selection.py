# tests/test_selection.py

"""Tests for round target selectors."""

import unittest
from decimal import Decimal
from unittest.mock import patch

from src.models.product import Product
from src.services.selection import fixed_index, seeded_random, uniform_random


def _catalog() -> list[Product]:
    return [
        Product(id=str(i), name=f"Item {i}", price=Decimal(i))
        for i in range(1, 6)
    ]


class TestSelection(unittest.TestCase):
    """Selector behaviour."""

    def test_uniform_random_picks_from_catalog(self) -> None:
        """The pick is always a catalog member."""
        catalog = _catalog()
        for _ in range(20):
            self.assertIn(uniform_random(catalog), catalog)

    def test_uniform_random_uses_random_choice(self) -> None:
        """Selection delegates to random.choice."""
        catalog = _catalog()
        with patch(
            "src.services.selection.random.choice",
            return_value=catalog[3],
        ) as mock_choice:
            self.assertIs(uniform_random(catalog), catalog[3])
        mock_choice.assert_called_once_with(catalog)

    def test_seeded_random_is_repeatable(self) -> None:
        """Equal seeds give equal sequences."""
        catalog = _catalog()
        first, second = seeded_random(42), seeded_random(42)
        picks_a = [first(catalog).id for _ in range(10)]
        picks_b = [second(catalog).id for _ in range(10)]
        self.assertEqual(picks_a, picks_b)

    def test_fixed_index_wraps(self) -> None:
        """Indexes beyond the catalog wrap around."""
        catalog = _catalog()
        self.assertIs(fixed_index(0)(catalog), catalog[0])
        self.assertIs(fixed_index(7)(catalog), catalog[2])


if __name__ == "__main__":
    unittest.main()
