# src/services/guess_engine.py

"""Round state engine: guess validation, feedback and win/lose rules."""

import logging
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from src.config.settings import Settings
from src.models.product import Product, to_cents
from src.models.round import Feedback, Guess, Outcome, Round, SubmitResult
from src.services.errors import (
    EmptyCatalogError,
    GuessValidationError,
    NegativeGuessError,
    NotANumberError,
    RoundFinishedError,
    RoundNotStartedError,
)
from src.services.selection import Selector, uniform_random

logger = logging.getLogger("price_guesser.engine")


def validate_guess(raw: str) -> Decimal:
    """Parse raw guess text into a cent-rounded amount.

    Raises:
        NotANumberError: *raw* is not a finite decimal number.
        NegativeGuessError: the parsed value is below zero.
    """
    text = raw.strip()
    # Decimal() also takes "1_000"; a price field should not
    if "_" in text:
        raise NotANumberError(f"Not a number: {raw!r}", raw=raw)
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise NotANumberError(f"Not a number: {raw!r}", raw=raw) from None
    if not value.is_finite():
        raise NotANumberError(f"Not a number: {raw!r}", raw=raw)
    if value < 0:
        raise NegativeGuessError(f"Negative guess: {raw!r}", raw=raw)
    try:
        # abs() folds "-0" into 0.00
        return to_cents(abs(value))
    except InvalidOperation:
        # Too many digits to hold at cent precision
        raise NotANumberError(f"Not a number: {raw!r}", raw=raw) from None


def apply_guess(round_: Round, amount: Decimal) -> SubmitResult:
    """Score *amount* against the round's target and update it in place.

    A correct guess always wins, even on the last attempt; the round is
    only lost when the limit is reached without a match.
    """
    if round_.outcome.is_terminal:
        raise RoundFinishedError(
            f"Round already {round_.outcome.value}"
        )

    amount = to_cents(amount)
    price = round_.target.price

    if amount == price:
        feedback = Feedback.CORRECT
        round_.outcome = Outcome.WON
    elif amount < price:
        feedback = Feedback.HIGHER
    else:
        feedback = Feedback.LOWER

    guess = Guess(value=amount, feedback=feedback)
    round_.attempts.append(guess)

    if (
        round_.outcome is Outcome.IN_PROGRESS
        and len(round_.attempts) >= round_.attempt_limit
    ):
        round_.outcome = Outcome.LOST

    return SubmitResult(
        guess=guess,
        outcome=round_.outcome,
        remaining_attempts=round_.remaining_attempts,
    )


class GuessEngine:
    """Owns the live round and applies the game rules to it."""

    def __init__(
        self,
        catalog: Sequence[Product] = (),
        selector: Selector = uniform_random,
        attempt_limit: int = Settings.ATTEMPT_LIMIT,
    ) -> None:
        if attempt_limit < 1:
            raise ValueError(
                f"attempt_limit must be at least 1, got {attempt_limit}"
            )
        self.catalog: list[Product] = list(catalog)
        self.selector = selector
        self._attempt_limit = attempt_limit
        self._round: Round | None = None

    # ── Round lifecycle ─────────────────────────────────

    def start_round(self, product: Product | None = None) -> Round:
        """Discard any live round and start a fresh one.

        When *product* is omitted the selector picks one from the catalog.
        """
        if product is None:
            if not self.catalog:
                raise EmptyCatalogError("Catalog has no products")
            product = self.selector(self.catalog)

        self._round = Round(
            target=product, attempt_limit=self._attempt_limit
        )
        logger.info(
            "Round started: product id=%s (%s)", product.id, product.name
        )
        return self._round

    def validate_guess(self, raw: str) -> Decimal:
        """Parse raw input; see :func:`validate_guess`."""
        try:
            return validate_guess(raw)
        except GuessValidationError as exc:
            logger.debug("Rejected guess %r: %s", raw, exc.kind.value)
            raise

    def submit_guess(self, amount: Decimal) -> SubmitResult:
        """Score a validated amount against the live round."""
        round_ = self.round
        try:
            result = apply_guess(round_, amount)
        except RoundFinishedError:
            logger.warning(
                "Guess %s submitted after round ended (%s)",
                amount,
                round_.outcome.value,
            )
            raise

        logger.debug(
            "Attempt %d/%d: %s -> %s",
            len(round_.attempts),
            round_.attempt_limit,
            result.guess.value,
            result.feedback.value,
        )
        if result.outcome.is_terminal:
            logger.info(
                "Round %s after %d attempt(s), price was %s",
                result.outcome.value,
                len(round_.attempts),
                round_.target.price,
            )
        return result

    # ── Read-only accessors ─────────────────────────────

    @property
    def round(self) -> Round:
        if self._round is None:
            raise RoundNotStartedError("No round has been started")
        return self._round

    @property
    def has_round(self) -> bool:
        return self._round is not None

    @property
    def current_attempt(self) -> int:
        """Number of guesses made in the live round."""
        return len(self.round.attempts)

    @property
    def attempt_limit(self) -> int:
        return self._attempt_limit

    @property
    def remaining_attempts(self) -> int:
        return self.round.remaining_attempts

    @property
    def outcome(self) -> Outcome:
        return self.round.outcome
