import pytest

from wordle_board.config.game_settings import MAX_GUESSES_COUNT


def _events(socket_client, name):
    return [event["args"][0] for event in socket_client.get_received() if event["name"] == name]


@pytest.fixture
def game_id(game_service):
    return game_service.create_new_game("TESTS")


def test_new_game(socket_client):
    socket_client.emit("new_game")

    created = _events(socket_client, "game_created")

    assert len(created) == 1
    assert created[0]["state"]["remaining_guesses"] == MAX_GUESSES_COUNT


def test_submit_guess_accepted(socket_client, game_id):
    socket_client.emit("submit_guess", {"game_id": game_id, "guess": "tests"})

    accepted = _events(socket_client, "guess_accepted")

    assert len(accepted) == 1
    assert accepted[0]["guess"]["feedback"] == ["correct"] * 5
    assert accepted[0]["state"]["is_over"]


def test_submit_guess_rejected(socket_client, game_id):
    socket_client.emit("submit_guess", {"game_id": game_id, "guess": "QWERT"})

    rejected = _events(socket_client, "guess_rejected")

    assert rejected[0]["rejection"] == "unknown_word"
    assert rejected[0]["state"]["guesses"] == []


def test_submit_guess_to_unknown_game(socket_client):
    socket_client.emit("submit_guess", {"game_id": "missing", "guess": "TESTS"})

    assert _events(socket_client, "error")[0]["error"] == "Game not found"


def test_submit_guess_requires_fields(socket_client):
    socket_client.emit("submit_guess", {"guess": "TESTS"})

    assert _events(socket_client, "error")


def test_get_state(socket_client, game_id):
    socket_client.emit("get_state", {"game_id": game_id})

    assert _events(socket_client, "game_state")[0]["state"]["game_id"] == game_id


def test_get_state_of_unknown_game(socket_client):
    socket_client.emit("get_state", {"game_id": "missing"})

    error = _events(socket_client, "error")[0]
    assert error == {"error": "Game not found", "game_id": "missing"}


def test_get_state_requires_game_id(socket_client):
    socket_client.emit("get_state", {})

    assert _events(socket_client, "error")[0]["error"] == "Game not found"
