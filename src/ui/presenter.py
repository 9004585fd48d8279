# src/ui/presenter.py

"""Display state for a game, independent of any UI toolkit.

The presenter calls the engine and keeps the texts and style names a
front-end needs to draw the product, the guess rows and the status line.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from src.config.settings import Settings
from src.models.round import Feedback, Outcome, SubmitResult
from src.services.errors import (
    CatalogLoadError,
    EmptyCatalogError,
    GuessValidationError,
)
from src.services.guess_engine import GuessEngine
from src.services.selection import Selector, uniform_random
from src.storage.catalog_loader import CatalogLoader

logger = logging.getLogger("price_guesser.ui")

INVALID_GUESS_MESSAGE = (
    f"Please enter a valid price ({Settings.PRICE_PLACEHOLDER} or higher)"
)
LOAD_FAILED_MESSAGE = "Failed to load products. Please restart the game."
START_TEXT = "Start guessing!"

_FEEDBACK_TEXT = {
    Feedback.HIGHER: "Higher",
    Feedback.LOWER: "Lower",
    Feedback.CORRECT: "Correct!",
}


def format_price(value: Decimal) -> str:
    """Render an amount as ``€12.50``."""
    return f"{Settings.CURRENCY_SYMBOL}{value:.2f}"


def is_url(ref: str) -> bool:
    return ref.startswith(("http://", "https://"))


def resolve_image_label(ref: str, base_dir: Path | None = None) -> str:
    """Return *ref* if it can be shown, else the placeholder text.

    URLs are passed through untouched; local paths must exist relative
    to *base_dir*.
    """
    if not ref:
        return Settings.IMAGE_PLACEHOLDER
    if is_url(ref):
        return ref
    root = base_dir if base_dir is not None else Settings.BASE_DIR
    if (root / ref).is_file():
        return ref
    logger.debug("Image reference %r not found under %s", ref, root)
    return Settings.IMAGE_PLACEHOLDER


@dataclass
class GuessRow:
    """One attempt slot on the board."""

    price_text: str = Settings.PRICE_PLACEHOLDER
    feedback_text: str = ""
    feedback_style: str = ""    # start | higher | lower | correct
    row_style: str = ""         # incorrect | correct


class GamePresenter:
    """Drives a :class:`GuessEngine` and exposes what to draw."""

    def __init__(
        self,
        engine: GuessEngine | None,
        image_base_dir: Path | None = None,
    ) -> None:
        self.engine = engine
        self.image_base_dir = image_base_dir
        limit = (
            engine.attempt_limit
            if engine is not None
            else Settings.ATTEMPT_LIMIT
        )
        self.rows: list[GuessRow] = [GuessRow() for _ in range(limit)]
        self.message: str = ""
        self.message_type: str = ""
        self.input_enabled: bool = False
        self.product_label: str = ""
        self.image_label: str = Settings.IMAGE_PLACEHOLDER
        self.image_ref: str = ""

        if engine is None:
            self._show_message(LOAD_FAILED_MESSAGE, "error")

    @classmethod
    def from_catalog(
        cls,
        catalog_path: Path | None = None,
        selector: Selector = uniform_random,
    ) -> "GamePresenter":
        """Load the catalog and build a presenter around a fresh engine.

        A catalog that cannot be loaded leaves the presenter in an error
        state with input disabled instead of raising.
        """
        loader = CatalogLoader(catalog_path)
        try:
            products = loader.load()
        except CatalogLoadError:
            logger.error("Error loading products", exc_info=True)
            return cls(None)
        return cls(
            GuessEngine(products, selector=selector),
            image_base_dir=loader.path.parent,
        )

    # ── Game events ─────────────────────────────────────

    def new_game(self) -> None:
        """Start a new round and reset the board."""
        if self.engine is None:
            return
        try:
            round_ = self.engine.start_round()
        except EmptyCatalogError:
            logger.error("Cannot start a round: catalog is empty")
            self._show_message(LOAD_FAILED_MESSAGE, "error")
            self.input_enabled = False
            return

        product = round_.target
        self.product_label = product.name
        self.image_ref = product.image_ref
        self.image_label = resolve_image_label(
            product.image_ref, self.image_base_dir
        )
        self.rows = [GuessRow() for _ in range(round_.attempt_limit)]
        self.rows[0].feedback_text = START_TEXT
        self.rows[0].feedback_style = "start"
        self.message = ""
        self.message_type = ""
        self.input_enabled = True

    def submit(self, raw: str) -> SubmitResult | None:
        """Validate and score one guess.

        Returns ``None`` when the guess was rejected or no round is live.
        """
        if self.engine is None or not self.input_enabled:
            return None

        try:
            amount = self.engine.validate_guess(raw)
        except GuessValidationError:
            self._show_message(INVALID_GUESS_MESSAGE, "error")
            return None

        index = self.engine.current_attempt
        result = self.engine.submit_guess(amount)
        self._update_row(index, result)

        price = format_price(self.engine.round.target.price)
        if result.outcome is Outcome.WON:
            self._show_message(
                f"🎉 Correct! The price is {price}. You won!", "win"
            )
        elif result.outcome is Outcome.LOST:
            self._show_message(
                f"Game Over! The correct price was {price}.", "lose"
            )
        else:
            self.message = ""
            self.message_type = ""

        if result.outcome.is_terminal:
            self.input_enabled = False
        return result

    # ── Read helpers ────────────────────────────────────

    @property
    def game_over(self) -> bool:
        if self.engine is None or not self.engine.has_round:
            return False
        return self.engine.outcome.is_terminal

    @property
    def attempts_label(self) -> str:
        if self.engine is None or not self.engine.has_round:
            return ""
        return (
            f"Guesses {self.engine.current_attempt}"
            f"/{self.engine.attempt_limit}"
        )

    def _update_row(self, index: int, result: SubmitResult) -> None:
        row = self.rows[index]
        row.price_text = format_price(result.guess.value)
        row.feedback_text = _FEEDBACK_TEXT[result.feedback]
        row.feedback_style = result.feedback.value
        if result.feedback is Feedback.CORRECT:
            row.row_style = "correct"
        else:
            row.row_style = "incorrect"

    def _show_message(self, message: str, message_type: str) -> None:
        self.message = message
        self.message_type = message_type
