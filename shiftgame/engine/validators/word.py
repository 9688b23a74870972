"""
Word validator for the shift game.

Checks a word typed by the player before it is handed to the
RoundController. The engine only handles lowercase a-z, so anything
else is rejected here.
"""

from __future__ import annotations

from shiftgame.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)

MINIMUM_WORD_LENGTH = 4

WORD_TOO_SHORT_REASON = f"The word must contain at least {MINIMUM_WORD_LENGTH} characters!"
INVALID_CHARACTERS_REASON = (
    "Please enter only lowercase letters from the english alphabet! "
    "No numbers or special characters allowed!"
)


class WordValidator:
    """Validates words offered for encryption.

    Checks:
        1. Input is not empty
        2. Word has at least MINIMUM_WORD_LENGTH characters
        3. Every character is a lowercase English letter

    Both length and character problems are reported together in
    ``context["problems"]``; the rejection code names the first one.

    Example:
        >>> validator = WordValidator()
        >>> validator.validate("majorlazer").context["word"]
        'majorlazer'
        >>> validator.validate("ABC").rejection_code
        <RejectionCode.WORD_TOO_SHORT: 'word_too_short'>
    """

    def __init__(self, minimum_length: int = MINIMUM_WORD_LENGTH):
        self.minimum_length = minimum_length

    def validate(self, raw_input: str) -> ValidationResult:
        """Validate a word typed by the player.

        Input is not stripped: surrounding spaces are invalid characters.

        Args:
            raw_input: The text the player entered

        Returns:
            ValidationResult with the word in context if valid
        """
        if raw_input == "":
            return invalid_result(
                code=RejectionCode.EMPTY_INPUT,
                reason="Please enter a word to encrypt!",
            )

        problems: list[RejectionCode] = []
        if len(raw_input) < self.minimum_length:
            problems.append(RejectionCode.WORD_TOO_SHORT)
        if not all("a" <= char <= "z" for char in raw_input):
            problems.append(RejectionCode.INVALID_CHARACTERS)

        if not problems:
            return valid_result(word=raw_input)

        reasons = {
            RejectionCode.WORD_TOO_SHORT: WORD_TOO_SHORT_REASON,
            RejectionCode.INVALID_CHARACTERS: INVALID_CHARACTERS_REASON,
        }
        return invalid_result(
            code=problems[0],
            reason="\n".join(reasons[code] for code in problems),
            word=raw_input,
            problems=problems,
        )
