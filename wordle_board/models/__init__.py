"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameState, GameStatus, Guess, InvalidTargetWordWarning,
    LetterFeedback, Rejection, SubmitResult
)

__all__ = [
    'GameState', 'GameStatus', 'Guess', 'InvalidTargetWordWarning',
    'LetterFeedback', 'Rejection', 'SubmitResult'
]
