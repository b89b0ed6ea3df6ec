import os
import tempfile

# Keep the file handler out of the working tree; must run before wordle_board is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_board_logs_'))

import pytest

from wordle_board import create_app
from wordle_board.config import TestingConfig
from wordle_board.services.dictionary import WordDictionary
from wordle_board.services.game_service import initialize_game_service

WORDS = ["TESTS", "WORLD", "WRONG", "GUESS", "HELLO", "HAPPY", "CODER"]


@pytest.fixture
def dictionary():
    return WordDictionary(WORDS)


@pytest.fixture
def game_service(dictionary):
    return initialize_game_service(dictionary)


@pytest.fixture
def app(game_service):
    app, _ = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
