"""
Word Dictionary

Default dictionary collaborator backed by a word list.
"""

import random
from typing import Iterable, Optional

from ..config.game_settings import WORD_LIST, WORD_SIZE, load_word_list


class WordDictionary:
    """
    Set-backed word lookup.

    Entries are stored uppercase; ``is_valid_word`` expects an already
    normalized word, so lowercase input is not recognized.
    """

    def __init__(self, words: Iterable[str]):
        self.word_list = [word.upper() for word in words]
        self._words = frozenset(self.word_list)

    @classmethod
    def from_json(cls, json_file_path: Optional[str] = None, word_size: Optional[int] = None) -> "WordDictionary":
        """Builds a dictionary from a JSON array of words."""
        return cls(load_word_list(json_file_path, word_size or WORD_SIZE))

    def is_valid_word(self, word: str) -> bool:
        return word in self._words

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        """Selects a target word (server keeps this secret)."""
        return (rng or random).choice(self.word_list)

    def __contains__(self, word: str) -> bool:
        return self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)


def default_dictionary() -> WordDictionary:
    """Dictionary over the configured word list."""
    return WordDictionary(WORD_LIST)
