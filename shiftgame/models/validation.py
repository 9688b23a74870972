"""
Validation models for player input.

ValidationResult represents the outcome of checking raw console input
(a word to encrypt, or a shift guess) before it reaches the game core.
It indicates whether the input is usable and, if not, why.

Example:
    >>> # Successful validation
    >>> result = ValidationResult(valid=True, context={"guess": 7})

    >>> # Failed validation
    >>> result = ValidationResult(
    ...     valid=False,
    ...     rejection_code=RejectionCode.GUESS_OUT_OF_RANGE,
    ...     rejection_reason="Your guess can only be in the range of 1 to 25 inclusive",
    ...     context={"guess": 26},
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class RejectionCode(str, Enum):
    """Codes for rejected player input."""

    # Words
    EMPTY_INPUT = "empty_input"
    WORD_TOO_SHORT = "word_too_short"
    INVALID_CHARACTERS = "invalid_characters"  # Not a-z only

    # Guesses
    NOT_A_NUMBER = "not_a_number"
    GUESS_OUT_OF_RANGE = "guess_out_of_range"
    ROUND_OVER = "round_over"  # Shift already found


class ValidationResult(BaseModel):
    """Result of validating raw player input.

    Attributes:
        valid: Whether the input may be passed to the game
        rejection_code: Code indicating why validation failed (if invalid)
        rejection_reason: Human-readable reason for failure (if invalid)
        context: Parsed value and extra details ("word", "guess", "problems")
        hint: Optional hint for the player
    """

    valid: bool

    # Rejection details (required if valid=False)
    rejection_code: RejectionCode | None = None
    rejection_reason: str | None = None

    context: dict[str, object] = Field(default_factory=dict)

    hint: str | None = None

    @model_validator(mode="after")
    def check_rejection_fields(self) -> "ValidationResult":
        """Ensure rejection fields are present when valid=False."""
        if not self.valid:
            if self.rejection_code is None:
                raise ValueError("rejection_code is required when valid=False")
            if self.rejection_reason is None:
                raise ValueError("rejection_reason is required when valid=False")
        return self

    def to_message(self) -> str:
        """Render the rejection as console text.

        Raises:
            ValueError: If called on a valid result
        """
        if self.valid:
            raise ValueError("Cannot render a message for a valid result")

        assert self.rejection_reason is not None

        if self.hint:
            return f"Error: {self.rejection_reason}\n{self.hint}"
        return f"Error: {self.rejection_reason}"


# Convenience factory functions


def valid_result(**context: object) -> ValidationResult:
    """Create a successful ValidationResult.

    Example:
        >>> result = valid_result(guess=12)
        >>> assert result.valid
    """
    return ValidationResult(valid=True, context=dict(context))


def invalid_result(
    code: RejectionCode,
    reason: str,
    hint: str | None = None,
    **context: object,
) -> ValidationResult:
    """Create a failed ValidationResult.

    Args:
        code: The rejection code
        reason: Human-readable reason for rejection
        hint: Optional hint for the player
        **context: Additional context to include

    Returns:
        ValidationResult with valid=False
    """
    return ValidationResult(
        valid=False,
        rejection_code=code,
        rejection_reason=reason,
        hint=hint,
        context=dict(context),
    )
