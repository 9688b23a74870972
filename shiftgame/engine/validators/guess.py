"""
Guess validator for the shift game.

Parses and range-checks a shift guess typed by the player before it is
submitted to the RoundController.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from shiftgame.engine.cipher import SHIFT_LOWER_BOUND, SHIFT_UPPER_BOUND
from shiftgame.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)

if TYPE_CHECKING:
    from shiftgame.engine.round import RoundController

# Optional sign and ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class GuessValidator:
    """Validates shift guesses.

    Checks:
        1. The round (if a controller is given) still accepts guesses
        2. Input is an optional sign followed by ASCII digits
        3. The integer lies in [1, 25]

    Example:
        >>> validator = GuessValidator()
        >>> validator.validate(" 7 ").context["guess"]
        7
        >>> validator.validate("26").rejection_code
        <RejectionCode.GUESS_OUT_OF_RANGE: 'guess_out_of_range'>
    """

    def validate(
        self,
        raw_input: str,
        controller: "RoundController | None" = None,
    ) -> ValidationResult:
        """Validate a guess typed by the player.

        Args:
            raw_input: The text the player entered
            controller: Optional controller whose round must still be active

        Returns:
            ValidationResult with the parsed guess in context if valid
        """
        if controller is not None and controller.is_round_over():
            return invalid_result(
                code=RejectionCode.ROUND_OVER,
                reason="The shift has already been found!",
                hint="Start a new word or reset the round to keep playing.",
            )

        text = raw_input.strip()
        if not INTEGER_PATTERN.fullmatch(text):
            return invalid_result(
                code=RejectionCode.NOT_A_NUMBER,
                reason="Please Enter a valid numerical value!",
                raw_input=raw_input,
            )
        guess = int(text)

        if guess < SHIFT_LOWER_BOUND or guess > SHIFT_UPPER_BOUND:
            return invalid_result(
                code=RejectionCode.GUESS_OUT_OF_RANGE,
                reason=(
                    "Your guess can only be in the range of "
                    f"{SHIFT_LOWER_BOUND} to {SHIFT_UPPER_BOUND} inclusive"
                ),
                guess=guess,
            )

        return valid_result(guess=guess)
