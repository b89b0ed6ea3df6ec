"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm and keyboard hint tracking.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..models.game import LetterFeedback

# Higher rank wins when merging hints for the same letter
_HINT_PRIORITY = {
    LetterFeedback.INCORRECT: 0,
    LetterFeedback.ALMOST: 1,
    LetterFeedback.CORRECT: 2,
}


def evaluate(target: str, guess: str) -> List[LetterFeedback]:
    """
    Classifies every letter of ``guess`` against ``target``.

    Exact matches are marked first and consume their letter from the target.
    Remaining letters are then marked ALMOST from left to right while the
    target still has unclaimed occurrences of that letter, so a single target
    occurrence never yields two positive signals.

    Both words must have the same length.
    """
    available = Counter(target)
    result: List[Optional[LetterFeedback]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (expected, letter) in enumerate(zip(target, guess)):
        if letter == expected:
            result[i] = LetterFeedback.CORRECT
            available[letter] -= 1

    # Second pass: misplaced letters, leftmost claims first
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if available[letter] > 0:
            result[i] = LetterFeedback.ALMOST
            available[letter] -= 1
        else:
            result[i] = LetterFeedback.INCORRECT

    return result  # type: ignore[return-value]


def merge_letter_hints(letter_hints: Dict[str, LetterFeedback],
                       word: str,
                       feedback: Sequence[LetterFeedback]) -> None:
    """
    Updates keyboard hints in place; a letter's hint can only improve.
    """
    for letter, new_status in zip(word, feedback):
        current_status = letter_hints.get(letter)
        if current_status is None or _HINT_PRIORITY[new_status] > _HINT_PRIORITY[current_status]:
            letter_hints[letter] = new_status
