"""Pydantic models and enums for the shift game"""

from shiftgame.models.cipher import CipherState, ShiftComparison
from shiftgame.models.round import (
    FEEDBACK_MESSAGES,
    FeedbackKind,
    RoundState,
    RoundStats,
    RoundSummary,
)
from shiftgame.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)

__all__ = [
    # Cipher models
    "CipherState",
    "ShiftComparison",
    # Round models
    "FEEDBACK_MESSAGES",
    "FeedbackKind",
    "RoundState",
    "RoundStats",
    "RoundSummary",
    # Validation models
    "RejectionCode",
    "ValidationResult",
    "invalid_result",
    "valid_result",
]
