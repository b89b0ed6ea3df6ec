import pytest

from wordle_board.config.game_settings import DEFEAT_MESSAGE, MAX_GUESSES_COUNT, VICTORY_MESSAGE

WRONG_GUESSES = ["WRONG", "GUESS", "HELLO", "WORLD", "HAPPY", "CODER"]


@pytest.fixture
def game_id(game_service):
    return game_service.create_new_game("TESTS")


def _guess(client, game_id, guess):
    return client.post(f"/api/game/{game_id}/guess", json={"guess": guess})


def test_new_game(client):
    response = client.post("/api/new_game")
    data = response.get_json()

    assert response.status_code == 200
    assert data["success"]
    assert data["game_id"]
    assert data["state"]["status"] == "in_progress"
    assert data["state"]["max_guesses"] == MAX_GUESSES_COUNT
    assert data["state"]["answer"] is None


def test_get_state(client, game_id):
    response = client.get(f"/api/game/{game_id}/state")

    assert response.status_code == 200
    assert response.get_json()["state"]["game_id"] == game_id


def test_get_state_of_unknown_game(client):
    assert client.get("/api/game/missing/state").status_code == 404


def test_accepted_guess_returns_feedback_and_state(client, game_service):
    game_id = game_service.create_new_game("WORLD")

    response = _guess(client, game_id, "wrong")
    data = response.get_json()

    assert response.status_code == 200
    assert data["guess"] == {
        "word": "WRONG",
        "feedback": ["correct", "almost", "almost", "incorrect", "incorrect"],
    }
    assert data["state"]["remaining_guesses"] == MAX_GUESSES_COUNT - 1


def test_overlong_input_is_capped_before_submission(client, game_id):
    data = _guess(client, game_id, "TESTS" + "EXTRA").get_json()

    assert data["state"]["won"]
    assert data["state"]["message"] == VICTORY_MESSAGE
    assert data["state"]["answer"] == "TESTS"


@pytest.mark.parametrize("guess, rejection", [
    ("QWERT", "unknown_word"),
    ("FLY", "invalid_length"),
    ("H3!RT", "invalid_length"),
])
def test_rejected_guess_is_not_recorded(client, game_id, guess, rejection):
    response = _guess(client, game_id, guess)
    data = response.get_json()

    assert response.status_code == 400
    assert not data["success"]
    assert data["rejection"] == rejection
    assert data["state"]["guesses"] == []


def test_player_loses_control_after_max_guesses(client, game_id):
    for guess in WRONG_GUESSES:
        data = _guess(client, game_id, guess).get_json()

    assert data["state"]["is_over"]
    assert data["state"]["status"] == "lost"
    assert data["state"]["message"] == DEFEAT_MESSAGE

    response = _guess(client, game_id, "TESTS")
    assert response.status_code == 400
    assert response.get_json()["rejection"] == "game_already_over"


def test_all_previous_guesses_are_in_the_state(client, game_id):
    for guess in WRONG_GUESSES:
        _guess(client, game_id, guess)

    state = client.get(f"/api/game/{game_id}/state").get_json()["state"]

    assert [guess["word"] for guess in state["guesses"]] == WRONG_GUESSES


def test_guess_is_required(client, game_id):
    response = client.post(f"/api/game/{game_id}/guess", json={})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Guess is required"


def test_guess_on_unknown_game(client):
    assert _guess(client, "missing", "TESTS").status_code == 404


def test_delete_game(client, game_id):
    assert client.delete(f"/api/game/{game_id}").get_json() == {"success": True}
    assert client.delete(f"/api/game/{game_id}").status_code == 404


def test_health(client, game_id):
    data = client.get("/api/health").get_json()

    assert data == {"status": "healthy", "active_games": 1}
