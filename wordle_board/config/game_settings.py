"""
Game Configuration Constants Module

Game rules shared by the evaluator, the session state machine and the
presentation adapters. The word list is loaded from ``words.json`` (or the
file named by ``WORD_LIST_PATH``) when the module is imported.
"""

import json
import os
from typing import Final, List, Optional

from .app_config import Config

WORD_SIZE: Final[int] = Config.WORD_SIZE
"""Number of letters in every target word and guess."""

MAX_GUESSES_COUNT: Final[int] = Config.MAX_GUESSES_COUNT
"""Maximum number of guesses allowed per game."""

VICTORY_MESSAGE: Final[str] = "You won!"
DEFEAT_MESSAGE: Final[str] = "Better luck next time!"

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(json_file_path: Optional[str] = None, word_size: int = WORD_SIZE) -> List[str]:
    """
    Load the word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words (defaults to the bundled list)
        word_size: Required length of every word

    Returns:
        List[str]: List of uppercase words

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    json_file_path = json_file_path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [str(word).upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != word_size:
            raise ValueError(f"Word '{word}' is not {word_size} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


WORD_LIST: Final[List[str]] = load_word_list(Config.WORD_LIST_PATH)


def validate_word_list_integrity(word_list: Optional[List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of a word list.

    Checks length, alphabetic characters, uppercase format and uniqueness.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = WORD_LIST if word_list is None else word_list

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_SIZE:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_SIZE} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


if __name__ == "__main__":
    try:
        validate_word_list_integrity()
        print(f" Word list validation passed ({len(WORD_LIST)} words)")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        raise SystemExit(1)
