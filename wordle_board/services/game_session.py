"""
Game Session

Single-player state machine: validates submissions, records guesses and
tracks whether the game is in progress, won or lost.
"""

import logging
import re
import warnings
from typing import Callable, Dict, List, Optional, Tuple

from ..config.game_settings import DEFEAT_MESSAGE, MAX_GUESSES_COUNT, VICTORY_MESSAGE, WORD_SIZE
from ..models.game import (
    GameState, GameStatus, Guess, InvalidTargetWordWarning,
    LetterFeedback, Rejection, SubmitResult
)
from ..utils.helpers import normalize_word
from .guess_evaluator import evaluate, merge_letter_hints

logger = logging.getLogger('wordle_game.session')

_UPPERCASE_WORD = re.compile(r'[A-Z]+')


class GameSession:
    """
    One game from the first guess to a win or a loss.

    The target word is fixed at construction. Guesses are only ever appended
    through ``submit``; a rejected submission leaves the session untouched.
    Not thread-safe: callers serialize access to a session themselves.
    """

    def __init__(self,
                 target_word: str,
                 is_valid_word: Callable[[str], bool],
                 word_size: int = WORD_SIZE,
                 max_guesses: int = MAX_GUESSES_COUNT):
        self._target = target_word
        self._is_valid_word = is_valid_word
        self.word_size = word_size
        self.max_guesses = max_guesses
        self._guesses: List[Guess] = []
        self._status = GameStatus.IN_PROGRESS

        self._check_target()

    def _check_target(self) -> None:
        """
        Reports a non-conforming target; the session starts regardless.

        Every construction logs one WARNING record on ``wordle_game.session``.
        The ``InvalidTargetWordWarning`` goes through the ``warnings`` filters,
        so the default filter shows it once per call site; use an "always"
        filter to see it on every construction.
        """
        problems = []
        if len(self._target) != self.word_size:
            problems.append(f"must have {self.word_size} characters")
        if not _UPPERCASE_WORD.fullmatch(self._target):
            problems.append("must be all in uppercase letters")
        if not self._is_valid_word(self._target):
            problems.append("must be a recognized word")

        if problems:
            message = f"Invalid target word '{self._target}': " + ", ".join(problems)
            logger.warning(message)
            warnings.warn(message, InvalidTargetWordWarning, stacklevel=3)

    @property
    def target(self) -> str:
        return self._target

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def remaining_guesses(self) -> int:
        return self.max_guesses - len(self._guesses)

    def submit(self, raw_input: Optional[str]) -> SubmitResult:
        """
        Processes a guess and updates game state.

        Args:
            raw_input: The player's guess; non-letters are dropped and the
                rest uppercased before validation

        Returns:
            SubmitResult with the recorded guess, or with the rejection reason
            when the guess was refused
        """
        if self.is_over:
            return self._reject(Rejection.GAME_ALREADY_OVER, "Game is already over")

        word = normalize_word(raw_input)

        if len(word) != self.word_size:
            return self._reject(Rejection.INVALID_LENGTH, f"Guess must be exactly {self.word_size} letters")

        if not self._is_valid_word(word):
            return self._reject(Rejection.UNKNOWN_WORD, "Word not in word list")

        guess = Guess(word=word, feedback=tuple(evaluate(self._target, word)))
        self._guesses.append(guess)

        if word == self._target:
            self._status = GameStatus.WON
        elif len(self._guesses) >= self.max_guesses:
            self._status = GameStatus.LOST

        return SubmitResult(status=self._status, guess=guess)

    def _reject(self, rejection: Rejection, message: str) -> SubmitResult:
        logger.info("Guess rejected (%s): %s", rejection.value, message)
        return SubmitResult(status=self._status, rejection=rejection, message=message)

    def letter_hints(self) -> Dict[str, LetterFeedback]:
        """Best feedback seen so far for every guessed letter."""
        hints: Dict[str, LetterFeedback] = {}
        for guess in self._guesses:
            merge_letter_hints(hints, guess.word, guess.feedback)
        return hints

    def end_message(self) -> Optional[str]:
        if self._status is GameStatus.WON:
            return VICTORY_MESSAGE
        if self._status is GameStatus.LOST:
            return DEFEAT_MESSAGE
        return None

    def to_state(self, game_id: Optional[str] = None) -> GameState:
        """Snapshot for the presentation layer; the answer stays hidden until the game is over."""
        return GameState(
            game_id=game_id,
            status=self._status.value,
            is_over=self.is_over,
            won=self._status is GameStatus.WON,
            word_size=self.word_size,
            max_guesses=self.max_guesses,
            remaining_guesses=self.remaining_guesses,
            guesses=[guess.to_dict() for guess in self._guesses],
            letter_hints={letter: status.value for letter, status in sorted(self.letter_hints().items())},
            message=self.end_message(),
            answer=self._target if self.is_over else None,
        )
