"""
Game Service

Keeps the in-memory game sessions served by the HTTP and WebSocket layers.
"""

import logging
import uuid
from typing import Dict, Optional

from ..config.game_settings import MAX_GUESSES_COUNT, WORD_SIZE
from ..models.game import GameState, GameStatus, SubmitResult
from .dictionary import WordDictionary, default_dictionary
from .game_session import GameSession

logger = logging.getLogger('wordle_game.service')


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secure answer storage
    - Forwarding guesses to the owning session
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self,
                 dictionary: Optional[WordDictionary] = None,
                 word_size: int = WORD_SIZE,
                 max_guesses: int = MAX_GUESSES_COUNT):
        self.dictionary = dictionary or default_dictionary()
        self.word_size = word_size
        self.max_guesses = max_guesses
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id

    def create_new_game(self, target_word: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            target_word: Word to guess; a random dictionary word when omitted

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        if target_word is None:
            target_word = self.dictionary.random_word()

        self.games[game_id] = GameSession(
            target_word,
            self.dictionary.is_valid_word,
            word_size=self.word_size,
            max_guesses=self.max_guesses,
        )
        logger.info("Game %s created", game_id)
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.to_state(game_id)

    def make_guess(self, game_id: str, guess: str) -> Optional[SubmitResult]:
        """
        Submits a guess to a game session.

        Args:
            game_id: Unique game identifier
            guess: The player's word

        Returns:
            SubmitResult (accepted or rejected) or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        result = session.submit(guess)

        if result.accepted and session.is_over:
            event = 'game_won' if result.status is GameStatus.WON else 'game_lost'
            logger.info("Game %s finished: %s after %d guess(es)", game_id, event, len(session.guesses))

        return result

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[WordDictionary] = None, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, **kwargs)
    return _game_service
