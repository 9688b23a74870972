"""Input validators for the shift game.

Validators check raw console input before it reaches the RoundController.
Each validator returns a ValidationResult with the parsed value in context.
"""

from shiftgame.engine.validators.guess import GuessValidator
from shiftgame.engine.validators.word import MINIMUM_WORD_LENGTH, WordValidator

__all__ = ["GuessValidator", "MINIMUM_WORD_LENGTH", "WordValidator"]
