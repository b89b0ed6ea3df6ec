"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterFeedback(Enum):
    """Per-letter classification of a guess relative to the target."""
    CORRECT = "correct"
    ALMOST = "almost"
    INCORRECT = "incorrect"


class GameStatus(Enum):
    """Session status. WON and LOST are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class Rejection(Enum):
    """Reasons a submission is refused without touching the session."""
    INVALID_LENGTH = "invalid_length"
    UNKNOWN_WORD = "unknown_word"
    GAME_ALREADY_OVER = "game_already_over"


class InvalidTargetWordWarning(UserWarning):
    """Emitted once when a session is created with a non-conforming target word."""


@dataclass(frozen=True)
class Guess:
    """One submitted word and its feedback, fixed at submission time."""
    word: str
    feedback: Tuple[LetterFeedback, ...]

    def to_dict(self) -> Dict:
        return {
            'word': self.word,
            'feedback': [status.value for status in self.feedback],
        }


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of a single submit call."""
    status: GameStatus
    guess: Optional[Guess] = None
    rejection: Optional[Rejection] = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.rejection is None


@dataclass
class GameState:
    """Serializable view of a session for the presentation layer."""
    game_id: Optional[str]
    status: str
    is_over: bool
    won: bool
    word_size: int
    max_guesses: int
    remaining_guesses: int
    guesses: List[Dict] = field(default_factory=list)
    letter_hints: Dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None  # Victory/defeat text once the game is over
    answer: Optional[str] = None  # Only included when game is over
