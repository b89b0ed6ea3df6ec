"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import WordDictionary, default_dictionary
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .guess_evaluator import evaluate, merge_letter_hints

__all__ = [
    'WordDictionary', 'default_dictionary',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession',
    'evaluate', 'merge_letter_hints'
]
