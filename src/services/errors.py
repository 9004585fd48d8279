# src/services/errors.py

"""Exceptions raised by the guess engine and the catalog loader."""

from enum import Enum


class ValidationErrorKind(Enum):
    """Why a guess was rejected."""

    NOT_A_NUMBER = "not_a_number"
    NEGATIVE = "negative"
    ROUND_FINISHED = "round_finished"


class GuessEngineError(Exception):
    """Base class for every recoverable game error."""


class GuessValidationError(GuessEngineError, ValueError):
    """A guess that cannot be accepted. Never mutates the round."""

    kind: ValidationErrorKind

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class NotANumberError(GuessValidationError):
    kind = ValidationErrorKind.NOT_A_NUMBER


class NegativeGuessError(GuessValidationError):
    kind = ValidationErrorKind.NEGATIVE


class RoundFinishedError(GuessValidationError):
    kind = ValidationErrorKind.ROUND_FINISHED


class RoundNotStartedError(GuessEngineError):
    """The engine was queried before ``start_round`` was called."""


class EmptyCatalogError(GuessEngineError):
    """No product is available to start a round with."""


class CatalogLoadError(GuessEngineError):
    """The product catalog file could not be read or parsed."""
