"""
Helper Functions

Contains utility functions used throughout the application.
"""

import re
from typing import Dict, Optional

from ..config.game_settings import WORD_SIZE

_NON_LETTERS = re.compile(r'[^A-Za-z]')


def normalize_word(raw: Optional[str]) -> str:
    """Drops every character outside A-Z/a-z, then uppercases the rest."""
    return _NON_LETTERS.sub('', raw or '').upper()


def normalize_input(raw: Optional[str], word_size: int = WORD_SIZE) -> str:
    """
    Input-collection boundary: keeps letters only, uppercases them and caps
    the result at ``word_size`` characters, the way a board's text field
    would while the player types.
    """
    return normalize_word(raw)[:word_size]


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from a Flask request."""
    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'session_id': getattr(request_obj, 'sid', None),
    }
