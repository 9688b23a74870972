"""Unit tests for EncryptionEngine and the letter-shift functions.

Tests cover:
- Wrap-around of shift_character
- Round trip of shift/unshift over every shift
- Word encryption with a known shift
- compare_guess direction and state transition
- set_word / reshift / reset_default behavior
- Shift sampling bounds
"""

import random
import string

import pytest

from shiftgame.engine.cipher import (
    DEFAULT_WORD,
    SHIFT_LOWER_BOUND,
    SHIFT_UPPER_BOUND,
    EncryptionEngine,
    shift_character,
    shift_word,
    unshift_character,
    unshift_word,
)
from shiftgame.models.cipher import CipherState, ShiftComparison


class TestShiftCharacter:
    """Tests for the letter-shift functions."""

    def test_z_wraps_to_a(self) -> None:
        """'z' shifted by one becomes 'a'."""
        assert shift_character("z", 1) == "a"

    def test_y_wraps_to_b(self) -> None:
        """'y' shifted by three becomes 'b'."""
        assert shift_character("y", 3) == "b"

    def test_no_wrap_inside_alphabet(self) -> None:
        """Letters that stay below 'z' are simply advanced."""
        assert shift_character("a", 1) == "b"
        assert shift_character("a", 25) == "z"

    @pytest.mark.parametrize("shift", range(SHIFT_LOWER_BOUND, SHIFT_UPPER_BOUND + 1))
    def test_result_stays_lowercase(self, shift: int) -> None:
        """Every letter and shift lands back inside a-z."""
        for char in string.ascii_lowercase:
            assert shift_character(char, shift) in string.ascii_lowercase

    @pytest.mark.parametrize("shift", range(SHIFT_LOWER_BOUND, SHIFT_UPPER_BOUND + 1))
    def test_shift_never_maps_letter_to_itself(self, shift: int) -> None:
        """Shifts 1-25 always change each letter."""
        for char in string.ascii_lowercase:
            assert shift_character(char, shift) != char

    def test_unshift_wraps_back_past_a(self) -> None:
        """Unshifting 'a' by one gives 'z'."""
        assert unshift_character("a", 1) == "z"
        assert unshift_character("b", 3) == "y"

    def test_exposed_on_engine_class(self) -> None:
        """The letter function is also reachable from the engine."""
        assert EncryptionEngine.shift_character("z", 1) == "a"


class TestShiftWord:
    """Tests for whole-word shifting."""

    def test_abcz_with_shift_three(self) -> None:
        """'abcz' shifted by 3 is 'defc'."""
        assert shift_word("abcz", 3) == "defc"

    def test_round_trip_random_words(self) -> None:
        """Unshifting by the same shift recovers the word."""
        rng = random.Random(1234)
        for _ in range(50):
            length = rng.randint(4, 12)
            word = "".join(rng.choice(string.ascii_lowercase) for _ in range(length))
            for shift in range(SHIFT_LOWER_BOUND, SHIFT_UPPER_BOUND + 1):
                assert unshift_word(shift_word(word, shift), shift) == word

    def test_non_letters_are_not_rejected(self) -> None:
        """Out-of-contract characters produce garbage rather than errors."""
        result = shift_word("ab1d", 2)
        assert len(result) == 4
        assert result[2] == "3"


class TestEncryptionEngine:
    """Tests for EncryptionEngine state and operations."""

    def test_default_word_encrypted_on_construction(self, fixed_shift) -> None:
        """A new engine encrypts the default word."""
        engine = EncryptionEngine(shift_source=fixed_shift(3))

        assert engine.current_word() == shift_word(DEFAULT_WORD, 3)
        assert engine.current_word() == "fdww"
        assert engine.current_shift() == 3
        assert engine.state == CipherState.ENCRYPTED

    def test_set_word_encrypts_with_shift(self, fixed_shift) -> None:
        """set_word stores and shifts the new word."""
        engine = EncryptionEngine(shift_source=fixed_shift(3))
        engine.set_word("abcz")

        assert engine.current_word() == "defc"

    def test_shift_source_gets_inclusive_bounds(self, fixed_shift) -> None:
        """The shift is drawn from [1, 25]."""
        source = fixed_shift(4)
        EncryptionEngine(shift_source=source)

        assert source.calls == [(1, 25)]

    def test_default_source_stays_in_range(self) -> None:
        """The default random source only yields shifts 1-25."""
        engine = EncryptionEngine()
        seen = set()
        for _ in range(300):
            engine.reshift(restore_plaintext=True)
            seen.add(engine.current_shift())

        assert seen <= set(range(1, 26))
        assert len(seen) > 1

    def test_seeded_source_is_reproducible(self) -> None:
        """Two engines with the same seed pick the same shifts."""
        first = EncryptionEngine("hello", shift_source=random.Random(7).randint)
        second = EncryptionEngine("hello", shift_source=random.Random(7).randint)

        assert first.current_shift() == second.current_shift()
        assert first.current_word() == second.current_word()

    def test_set_word_resamples_for_repeated_word(self, sequence_shift) -> None:
        """Setting the same word again still draws a new shift."""
        source = sequence_shift([3, 3, 8])
        engine = EncryptionEngine("word", shift_source=source)
        engine.set_word("word")
        engine.set_word("word")

        assert source.call_count == 3
        assert engine.current_shift() == 8
        assert engine.current_word() == shift_word("word", 8)


class TestCompareGuess:
    """Tests for compare_guess."""

    @pytest.fixture
    def engine(self, fixed_shift) -> EncryptionEngine:
        return EncryptionEngine("hello", shift_source=fixed_shift(5))

    def test_guess_above_shift_is_too_high(self, engine) -> None:
        """A guess greater than the shift is TOO_HIGH."""
        assert engine.compare_guess(10) == ShiftComparison.TOO_HIGH
        assert engine.state == CipherState.ENCRYPTED

    def test_guess_below_shift_is_too_low(self, engine) -> None:
        """A guess less than the shift is TOO_LOW."""
        assert engine.compare_guess(1) == ShiftComparison.TOO_LOW
        assert engine.state == CipherState.ENCRYPTED

    def test_exact_guess_reveals(self, engine) -> None:
        """A matching guess returns EQUAL and reveals the word."""
        assert engine.compare_guess(5) == ShiftComparison.EQUAL
        assert engine.state == CipherState.REVEALED
        assert engine.is_revealed() is True

    def test_range_is_not_enforced(self, engine) -> None:
        """Out-of-range guesses are still compared."""
        assert engine.compare_guess(100) == ShiftComparison.TOO_HIGH
        assert engine.compare_guess(-3) == ShiftComparison.TOO_LOW

    def test_calls_allowed_after_reveal(self, engine) -> None:
        """The engine does not block guesses once revealed."""
        engine.compare_guess(5)

        assert engine.compare_guess(9) == ShiftComparison.TOO_HIGH
        assert engine.state == CipherState.REVEALED

    def test_reveal_plaintext(self, engine) -> None:
        """reveal_plaintext returns the word before shifting."""
        assert engine.current_word() == "mjqqt"
        assert engine.reveal_plaintext() == "hello"


class TestReshift:
    """Tests for reshift and reset_default."""

    def test_reshift_double_shifts_current_word(self, sequence_shift) -> None:
        """By default reshift re-encrypts the already shifted word."""
        engine = EncryptionEngine("abcz", shift_source=sequence_shift([3, 2]))
        assert engine.current_word() == "defc"

        engine.reshift()

        assert engine.current_shift() == 2
        assert engine.current_word() == "fghe"
        assert engine.current_word() == shift_word(shift_word("abcz", 3), 2)
        assert engine.reveal_plaintext() == "abcz"

    def test_reshift_from_plaintext(self, sequence_shift) -> None:
        """With restore_plaintext the original word is re-encrypted."""
        engine = EncryptionEngine("abcz", shift_source=sequence_shift([3, 2]))

        engine.reshift(restore_plaintext=True)

        assert engine.current_word() == "cdeb"
        assert engine.reveal_plaintext() == "abcz"

    def test_reshift_always_resamples(self, sequence_shift) -> None:
        """reshift draws a shift even if it equals the previous one."""
        source = sequence_shift([4, 4])
        engine = EncryptionEngine("abcz", shift_source=source)

        engine.reshift()

        assert source.call_count == 2
        assert engine.current_shift() == 4

    def test_reshift_returns_to_encrypted(self, fixed_shift) -> None:
        """A revealed engine is ENCRYPTED again after reshift."""
        engine = EncryptionEngine("abcz", shift_source=fixed_shift(3))
        engine.compare_guess(3)
        assert engine.state == CipherState.REVEALED

        engine.reshift()

        assert engine.state == CipherState.ENCRYPTED

    def test_set_word_returns_to_encrypted(self, fixed_shift) -> None:
        """A revealed engine is ENCRYPTED again after set_word."""
        engine = EncryptionEngine("abcz", shift_source=fixed_shift(3))
        engine.compare_guess(3)

        engine.set_word("hello")

        assert engine.state == CipherState.ENCRYPTED

    def test_reset_default(self, sequence_shift) -> None:
        """reset_default goes back to the default word."""
        engine = EncryptionEngine("hello", shift_source=sequence_shift([1, 3]))

        engine.reset_default()

        assert engine.current_word() == shift_word(DEFAULT_WORD, 3)
        assert engine.reveal_plaintext() == DEFAULT_WORD
