# src/config/settings.py

"""Central configuration for the price_guesser game."""

import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the price_guesser game."""

    # --- Rules ---
    ATTEMPT_LIMIT: int = 5              # Guesses allowed per round
    PRICE_QUANTUM: Decimal = Decimal("0.01")

    # --- Display ---
    CURRENCY_SYMBOL: str = "€"
    PRICE_PLACEHOLDER: str = "€0.00"
    INPUT_PLACEHOLDER: str = "Enter price (€)"
    IMAGE_PLACEHOLDER: str = "Image not available"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    CATALOG_PATH: Path = Path(
        os.getenv(
            "PRICE_GUESSER_CATALOG",
            str(BASE_DIR / "src" / "config" / "products.json"),
        )
    )
    LOGS_DIR: Path = BASE_DIR / "logs"
