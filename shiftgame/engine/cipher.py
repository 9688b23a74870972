"""
Encryption engine for the shift game.

The engine holds one word and a secret shift. Each letter of the word is
advanced through the alphabet by the shift, wrapping past 'z' back to 'a'.
For example, with a shift of 3 the word 'abcz' becomes 'defc'.

The engine starts ENCRYPTED. A correct guess moves it to REVEALED; a new
word or a reshift moves it back to ENCRYPTED. Nothing here validates input:
words must be lowercase a-z and guesses should lie in [1, 25].
"""

from __future__ import annotations

import logging
import random

from shiftgame.engine.protocols import ShiftSource
from shiftgame.models.cipher import CipherState, ShiftComparison

logger = logging.getLogger(__name__)

DEFAULT_WORD = "catt"

SHIFT_LOWER_BOUND = 1
SHIFT_UPPER_BOUND = 25

# One below 'a', so that wrapping 'z' + 1 lands on 'a'
LETTER_LOWER_BOUND = ord("a") - 1
LETTER_UPPER_BOUND = ord("z")


def shift_character(char: str, shift: int) -> str:
    """Advance a lowercase letter by ``shift``, wrapping past 'z'.

    Example:
        >>> shift_character("z", 1)
        'a'
        >>> shift_character("y", 3)
        'b'
    """
    code = ord(char) + shift
    if code > LETTER_UPPER_BOUND:
        code = LETTER_LOWER_BOUND + (code - LETTER_UPPER_BOUND)
    return chr(code)


def unshift_character(char: str, shift: int) -> str:
    """Inverse of shift_character for lowercase letters."""
    code = ord(char) - shift
    if code <= LETTER_LOWER_BOUND:
        code = LETTER_UPPER_BOUND - (LETTER_LOWER_BOUND - code)
    return chr(code)


def shift_word(word: str, shift: int) -> str:
    """Shift every letter of ``word``."""
    return "".join(shift_character(char, shift) for char in word)


def unshift_word(word: str, shift: int) -> str:
    """Undo shift_word for the same shift."""
    return "".join(unshift_character(char, shift) for char in word)


class EncryptionEngine:
    """Holds a word and its secret shift, and answers shift guesses.

    Attributes:
        state: ENCRYPTED until the shift is guessed, then REVEALED

    Example:
        >>> engine = EncryptionEngine(shift_source=lambda low, high: 3)
        >>> engine.set_word("abcz")
        >>> engine.current_word()
        'defc'
        >>> engine.compare_guess(3)
        <ShiftComparison.EQUAL: 'equal'>
        >>> engine.is_revealed()
        True
    """

    shift_character = staticmethod(shift_character)
    unshift_character = staticmethod(unshift_character)

    def __init__(
        self,
        word: str = DEFAULT_WORD,
        shift_source: ShiftSource | None = None,
    ):
        """Create an engine and encrypt the starting word.

        Args:
            word: Starting word (lowercase a-z)
            shift_source: Callable returning a shift in [low, high];
                defaults to random.randint
        """
        self._shift_source: ShiftSource = shift_source or random.Random().randint
        self._word = ""
        self._plaintext = ""
        self._shift = SHIFT_LOWER_BOUND
        self.state = CipherState.ENCRYPTED

        self.initialize(word)

    def initialize(self, default_word: str) -> None:
        """Set the word, pick a shift and encrypt."""
        self._plaintext = default_word
        self._word = default_word
        self._generate_shift()
        self._encrypt()

    def set_word(self, new_word: str) -> None:
        """Encrypt a new word with a freshly picked shift.

        The caller must pass a valid word; a repeated word still gets a
        new shift.
        """
        self._plaintext = new_word
        self._word = new_word
        self._generate_shift()
        self._encrypt()

    def reshift(self, restore_plaintext: bool = False) -> None:
        """Pick a new shift and re-encrypt.

        By default the *current* word is re-encrypted in place, so the
        already shifted text is shifted again. With ``restore_plaintext``
        the last plaintext word is encrypted instead.

        Args:
            restore_plaintext: Re-encrypt the original word rather than
                the current ciphertext
        """
        if restore_plaintext:
            self._word = self._plaintext
        self._generate_shift()
        self._encrypt()

    def reset_default(self) -> None:
        """Go back to the default word with a new shift."""
        self.set_word(DEFAULT_WORD)

    def compare_guess(self, guess: int) -> ShiftComparison:
        """Compare a guess with the secret shift.

        A match moves the engine to REVEALED. The guess range is not checked.

        Args:
            guess: The player's shift guess

        Returns:
            EQUAL on a match, TOO_HIGH if guess > shift, TOO_LOW if guess < shift
        """
        if guess == self._shift:
            self.state = CipherState.REVEALED
            return ShiftComparison.EQUAL
        if guess > self._shift:
            return ShiftComparison.TOO_HIGH
        return ShiftComparison.TOO_LOW

    def current_word(self) -> str:
        return self._word

    def current_shift(self) -> int:
        """Secret shift, for diagnostics only."""
        return self._shift

    def is_revealed(self) -> bool:
        return self.state == CipherState.REVEALED

    def reveal_plaintext(self) -> str:
        """The word the player is decoding, before any shifting."""
        return self._plaintext

    def _generate_shift(self) -> None:
        self._shift = self._shift_source(SHIFT_LOWER_BOUND, SHIFT_UPPER_BOUND)
        logger.debug(f"Generated shift: {self._shift}")

    def _encrypt(self) -> None:
        self._word = shift_word(self._word, self._shift)
        self.state = CipherState.ENCRYPTED
