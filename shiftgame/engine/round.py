"""
Round controller for the shift game.

The controller runs one round at a time: it owns an EncryptionEngine,
turns the engine's comparisons into player feedback, and keeps the
round statistics.
"""

from __future__ import annotations

import logging
from shiftgame.engine.cipher import EncryptionEngine
from shiftgame.models.cipher import ShiftComparison
from shiftgame.models.round import (
    FeedbackKind,
    RoundState,
    RoundStats,
    RoundSummary,
)

logger = logging.getLogger(__name__)


class RoundController:
    """Orchestrates a guessing round and tracks its statistics.

    The round state is derived only from the results this controller has
    seen; it never reads the engine's CipherState.

    Attributes:
        engine: The EncryptionEngine owned by this controller
        reset_from_plaintext: Whether reset_round re-encrypts the original
            word instead of the current ciphertext

    Example:
        >>> controller = RoundController()
        >>> controller.start_new_word("hello")
        >>> controller.submit_guess(12)
        <FeedbackKind.TOO_HIGH: 'too_high'>
        >>> controller.summary().guess_count
        1
    """

    def __init__(
        self,
        engine: EncryptionEngine | None = None,
        reset_from_plaintext: bool = False,
    ):
        """Initialize the controller.

        Args:
            engine: Engine to own; a default-word engine is created if None
            reset_from_plaintext: See reset_round()
        """
        self.engine = engine or EncryptionEngine()
        self.reset_from_plaintext = reset_from_plaintext
        self._stats = RoundStats()

    @property
    def stats(self) -> RoundStats:
        """Current round statistics."""
        return self._stats

    def start_new_word(self, word: str) -> None:
        """Start a round on a new word.

        Args:
            word: Lowercase a-z word of at least four letters
        """
        self._reset_stats()
        self.engine.set_word(word)
        logger.info(f"New round started on a {len(word)}-letter word")

    def start_default_word(self) -> None:
        """Start a round on the engine's default word."""
        self._reset_stats()
        self.engine.reset_default()
        logger.info("New round started on the default word")

    def submit_guess(self, guess: int) -> FeedbackKind:
        """Submit a shift guess.

        Every call counts toward the statistics, including calls made after
        the round is over.

        Args:
            guess: The player's guess, expected in [1, 25]

        Returns:
            Feedback for the guess
        """
        if self.is_round_over():
            logger.warning(f"Guess {guess} submitted after the round ended")

        stats = self._stats
        stats.guess_count += 1
        stats.guess_value_sum += guess
        stats.guesses.append(guess)

        comparison = self.engine.compare_guess(guess)
        logger.debug(f"Guess {guess}: {comparison.value}")

        if comparison == ShiftComparison.EQUAL:
            stats.state = RoundState.FINISHED
            logger.info(f"Round finished after {stats.guess_count} guess(es)")
            return FeedbackKind.CORRECT
        elif comparison == ShiftComparison.TOO_HIGH:
            stats.high_guess_count += 1
            return FeedbackKind.TOO_HIGH
        else:
            stats.low_guess_count += 1
            return FeedbackKind.TOO_LOW

    def reset_round(self) -> None:
        """Keep the word, pick a new shift and clear the statistics."""
        self._reset_stats()
        self.engine.reshift(restore_plaintext=self.reset_from_plaintext)
        logger.info("Round reset with a new shift")

    def average_guess(self) -> int:
        """Average guess value, truncated toward zero; 0 with no guesses."""
        if self._stats.guess_count == 0:
            return 0
        total = self._stats.guess_value_sum
        quotient = abs(total) // self._stats.guess_count
        return quotient if total >= 0 else -quotient

    def is_round_over(self) -> bool:
        return self._stats.state == RoundState.FINISHED

    def summary(self) -> RoundSummary:
        """Statistics snapshot for display."""
        return RoundSummary(
            guess_count=self._stats.guess_count,
            high_guess_count=self._stats.high_guess_count,
            low_guess_count=self._stats.low_guess_count,
            average_guess=self.average_guess(),
        )

    def current_word(self) -> str:
        return self.engine.current_word()

    def current_shift(self) -> int:
        return self.engine.current_shift()

    def _reset_stats(self) -> None:
        self._stats = RoundStats()
