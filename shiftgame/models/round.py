"""
Round models for the shift game.

These models hold the per-round statistics owned by the RoundController
and the snapshot handed to the console for display.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RoundState(str, Enum):
    """Whether the current round still accepts guesses."""

    ACTIVE = "active"
    FINISHED = "finished"


class FeedbackKind(str, Enum):
    """Per-guess feedback reported to the player."""

    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"
    CORRECT = "correct"

    @property
    def message(self) -> str:
        """Default player-facing text for this feedback."""
        return FEEDBACK_MESSAGES[self]


FEEDBACK_MESSAGES: dict[FeedbackKind, str] = {
    FeedbackKind.TOO_HIGH: "Your guess is too high!",
    FeedbackKind.TOO_LOW: "Your guess is too low!",
    FeedbackKind.CORRECT: "Your guess is right!",
}


class RoundStats(BaseModel):
    """Statistics for a single round.

    All fields are reset together whenever a new word is encrypted or
    the round is reset.

    Attributes:
        guess_count: Number of guesses submitted this round
        high_guess_count: Guesses that were above the shift
        low_guess_count: Guesses that were below the shift
        guess_value_sum: Sum of every guess submitted, including the correct one
        guesses: Every guess submitted, in order
        state: ACTIVE while the round accepts guesses
    """

    guess_count: int = Field(default=0, ge=0)
    high_guess_count: int = Field(default=0, ge=0)
    low_guess_count: int = Field(default=0, ge=0)
    guess_value_sum: int = 0
    guesses: list[int] = Field(default_factory=list)
    state: RoundState = RoundState.ACTIVE

    model_config = {"validate_assignment": True}


class RoundSummary(BaseModel):
    """Statistics snapshot shown at the end of a round.

    Attributes:
        guess_count: Number of guesses made
        high_guess_count: Number of guesses above the shift
        low_guess_count: Number of guesses below the shift
        average_guess: Average guess value, truncated toward zero
    """

    guess_count: int
    high_guess_count: int
    low_guess_count: int
    average_guess: int
