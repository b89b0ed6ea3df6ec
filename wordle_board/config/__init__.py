"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    WORD_LIST, WORD_SIZE, MAX_GUESSES_COUNT, VICTORY_MESSAGE, DEFEAT_MESSAGE,
    load_word_list, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LIST', 'WORD_SIZE', 'MAX_GUESSES_COUNT', 'VICTORY_MESSAGE', 'DEFEAT_MESSAGE',
    'load_word_list', 'validate_word_list_integrity'
]
