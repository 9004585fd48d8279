# src/models/round.py

"""Round state models: guesses, feedback and outcome."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from src.config.settings import Settings
from src.models.product import Product


class Feedback(Enum):
    """Hint given for a single guess."""

    HIGHER = "higher"
    LOWER = "lower"
    CORRECT = "correct"


class Outcome(Enum):
    """Resolution state of a round."""

    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        """True once the round accepts no further guesses."""
        return self is not Outcome.IN_PROGRESS


@dataclass(frozen=True)
class Guess:
    """One submitted price and the feedback it earned."""

    value: Decimal
    feedback: Feedback


@dataclass
class Round:
    """A single play-through against one target product."""

    target: Product
    attempts: list[Guess] = field(default_factory=list)
    attempt_limit: int = Settings.ATTEMPT_LIMIT
    outcome: Outcome = Outcome.IN_PROGRESS

    @property
    def remaining_attempts(self) -> int:
        return self.attempt_limit - len(self.attempts)


@dataclass(frozen=True)
class SubmitResult:
    """What the presenter needs after a guess has been scored."""

    guess: Guess
    outcome: Outcome
    remaining_attempts: int

    @property
    def feedback(self) -> Feedback:
        return self.guess.feedback
