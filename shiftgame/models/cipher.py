"""
Cipher models for the shift game.

CipherState tracks whether the encrypted word's shift has been found.
ShiftComparison is the closed result of comparing a guess against the
secret shift.

Example:
    >>> engine = EncryptionEngine(shift_source=lambda low, high: 5)
    >>> engine.compare_guess(10)
    <ShiftComparison.TOO_HIGH: 'too_high'>
    >>> engine.state
    <CipherState.ENCRYPTED: 'encrypted'>
"""

from __future__ import annotations

from enum import Enum


class CipherState(str, Enum):
    """Encryption state of the engine's word.

    ENCRYPTED: the shift is still hidden (the engine's 'on' state)
    REVEALED: the shift has been guessed correctly
    """

    ENCRYPTED = "encrypted"
    REVEALED = "revealed"


class ShiftComparison(str, Enum):
    """Result of comparing a guess to the secret shift."""

    TOO_HIGH = "too_high"  # guess > shift
    TOO_LOW = "too_low"  # guess < shift
    EQUAL = "equal"
