"""
Console sessions for the shift game.

ConsoleSession plays the game interactively: it reads words and guesses,
validates them, and drives a RoundController. ScriptedSession replays a
fixed list of words and guesses through the same code path to demonstrate
every rejection and a full round without a player.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from shiftgame.engine.round import RoundController
from shiftgame.engine.validators import GuessValidator, WordValidator
from shiftgame.models.round import FeedbackKind, RoundSummary

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

RULE = "-------------------------------------"


def format_summary(summary: RoundSummary, text: dict[str, Any]) -> str:
    """Render the statistics block shown after a round."""
    labels = text["statistics"]
    return "\n".join(
        [
            f"{labels['guess_count']}{summary.guess_count}",
            f"{labels['high_guess_count']}{summary.high_guess_count}",
            f"{labels['low_guess_count']}{summary.low_guess_count}",
            f"{labels['average_guess']}{summary.average_guess}",
        ]
    )


class ConsoleSession:
    """Interactive game session.

    Attributes:
        controller: The RoundController owned by this session
        text: Player-facing text (see text/game.yaml)
        show_shift: Print the secret shift next to the word (debugging)

    Example:
        >>> session = ConsoleSession(RoundController(), get_loader().game_text())
        >>> session.run()
    """

    def __init__(
        self,
        controller: RoundController,
        text: dict[str, Any],
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        show_shift: bool = False,
    ):
        self.controller = controller
        self.text = text
        self.show_shift = show_shift
        self._input = input_fn
        self._output = output_fn
        self._word_validator = WordValidator()
        self._guess_validator = GuessValidator()

    def say(self, message: str = "") -> None:
        self._output(message)

    def greet(self) -> None:
        """Print the welcome message and rules."""
        self.say(self.text["welcome"])
        self.say(self.text["rules"])

    def ask_word(self) -> str:
        """Prompt until the player enters a valid word."""
        self.say(self.text["input_rules"])
        while True:
            raw = self._input(self.text["prompts"]["word"])
            result = self._word_validator.validate(raw)
            if result.valid:
                return result.context["word"]
            logger.debug(f"Rejected word: {result.rejection_code.value}")
            self.say(result.to_message())
            self.say()

    def ask_guess(self) -> int:
        """Prompt until the player enters a valid guess."""
        while True:
            raw = self._input(self.text["prompts"]["guess"])
            result = self._guess_validator.validate(raw, self.controller)
            if result.valid:
                return result.context["guess"]
            logger.debug(f"Rejected guess: {result.rejection_code.value}")
            self.say(result.to_message())
            self.say()

    def show_word(self, label: str = "encrypted_word") -> None:
        self.say(f"{self.text['labels'][label]}{self.controller.current_word()}")
        if self.show_shift:
            self.say(f"{self.text['labels']['shift']}{self.controller.current_shift()}")

    def play_round(self) -> RoundSummary:
        """Read guesses until the shift is found, then print statistics."""
        while not self.controller.is_round_over():
            guess = self.ask_guess()
            feedback = self.controller.submit_guess(guess)
            self.say(feedback.message)
            self.say()
            if feedback == FeedbackKind.CORRECT:
                self.say(
                    f"{self.text['labels']['plaintext']}"
                    f"{self.controller.engine.reveal_plaintext()}"
                )
        return self.show_summary()

    def show_summary(self) -> RoundSummary:
        summary = self.controller.summary()
        self.say(format_summary(summary, self.text))
        self.say()
        return summary

    def run(self, word: str | None = None) -> None:
        """Play rounds until the player quits.

        Args:
            word: Starting word; the player is asked for one if None
        """
        self.greet()
        self.controller.start_new_word(word if word is not None else self.ask_word())
        self.show_word()

        while True:
            self.play_round()
            choice = self._input(self.text["prompts"]["next_round"]).strip().lower()
            if choice.startswith("n"):
                self.controller.start_new_word(self.ask_word())
                self.show_word()
            elif choice.startswith("r"):
                self.controller.reset_round()
                self.show_word("reset_word")
            else:
                self.say(self.text["labels"]["goodbye"])
                return


class ScriptExhausted(Exception):
    """Raised when scripted input runs out."""


class ScriptedSession(ConsoleSession):
    """Replays scripted words and guesses.

    Each round starts again from the first scripted guess. If the guesses
    run out before the shift is found the round is abandoned with a warning.
    """

    def __init__(
        self,
        controller: RoundController,
        text: dict[str, Any],
        script: dict[str, Any],
        output_fn: OutputFn = print,
        show_shift: bool = True,
    ):
        super().__init__(
            controller,
            text,
            input_fn=self._read_scripted,
            output_fn=output_fn,
            show_shift=show_shift,
        )
        self.guesses: list[str] = [str(g) for g in script.get("guesses", [])]
        self.words: list[str] = [str(w) for w in script.get("words", [])]
        self._guess_iter: Iterator[str] = iter(self.guesses)
        self._word_iter: Iterator[str] = iter(self.words)

    def _read_scripted(self, prompt: str) -> str:
        source = (
            self._word_iter
            if prompt == self.text["prompts"]["word"]
            else self._guess_iter
        )
        try:
            value = next(source)
        except StopIteration:
            raise ScriptExhausted(prompt.strip()) from None
        self.say(f"{prompt}{value}")
        return value

    def section(self, title: str) -> None:
        self.say(RULE)
        self.say(title)
        self.say(RULE)
        self.say()

    def play_round(self) -> RoundSummary:
        self._guess_iter = iter(self.guesses)
        try:
            return super().play_round()
        except ScriptExhausted:
            logger.warning(
                f"Scripted guesses ran out after {self.controller.stats.guess_count} "
                "valid guess(es); abandoning round"
            )
            return self.show_summary()

    def run(self, word: str | None = None) -> None:
        """Run the demonstration: default word, new word, reset."""
        self.greet()

        self.section("Testing Default State")
        self.controller.start_default_word()
        self.show_word()

        self.section("Testing for Valid Guesses of Shift #")
        self.play_round()

        self.section("Testing for Valid Words for Encryption")
        try:
            new_word = word if word is not None else self.ask_word()
        except ScriptExhausted:
            logger.warning("Scripted words ran out before a valid word was found")
            return
        self.say(f"Current word: {new_word}")
        self.controller.start_new_word(new_word)
        self.show_word()
        self.play_round()

        self.section("Testing Reset Function")
        self.controller.reset_round()
        self.show_word("reset_word")
        self.say("Statistics are reset:")
        self.show_summary()

        self.section("END OF TESTS")
