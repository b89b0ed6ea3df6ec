import pytest

from wordle_board.models.game import LetterFeedback
from wordle_board.services.guess_evaluator import evaluate, merge_letter_hints

C = LetterFeedback.CORRECT
A = LetterFeedback.ALMOST
I = LetterFeedback.INCORRECT


@pytest.mark.parametrize("position, expected", [
    (0, C),  # W is the first letter of both words
    (1, A),  # R sits at index 2 of WORLD
    (2, A),  # O sits at index 1 of WORLD
    (3, I),  # N does not exist in WORLD
    (4, I),  # G does not exist in WORLD
])
def test_wrong_against_world(position, expected):
    assert evaluate("WORLD", "WRONG")[position] is expected


def test_exact_match_claims_the_only_occurrence():
    # The second L is correct, so the first one gets nothing
    assert evaluate("WORLD", "HELLO") == [I, I, I, C, A]


def test_leftmost_duplicate_claims_the_occurrence():
    assert evaluate("WORLD", "LLAMA") == [A, I, I, I, I]


def test_repeated_target_letters_can_all_be_claimed():
    assert evaluate("TESTS", "SHIRT") == [A, I, I, I, A]
    assert evaluate("TESTS", "STATS") == [A, A, I, C, C]


@pytest.mark.parametrize("word", ["TESTS", "WORLD", "HAPPY"])
def test_identical_words_are_all_correct(word):
    assert evaluate(word, word) == [C] * len(word)


@pytest.mark.parametrize("target, guess", [
    ("TESTS", "WRONG"),
    ("HAPPY", "PAPPY"),
    ("CODER", "DECOR"),
    ("AB", "BA"),
])
def test_feedback_has_one_value_per_letter(target, guess):
    feedback = evaluate(target, guess)

    assert len(feedback) == len(target)
    assert all(isinstance(status, LetterFeedback) for status in feedback)


def test_evaluate_is_deterministic():
    assert evaluate("CODER", "DECOR") == evaluate("CODER", "DECOR")


def test_letter_hints_only_improve():
    hints = {}

    merge_letter_hints(hints, "WRONG", evaluate("WORLD", "WRONG"))
    assert hints == {"W": C, "R": A, "O": A, "N": I, "G": I}

    merge_letter_hints(hints, "WORLD", evaluate("WORLD", "WORLD"))
    assert hints["R"] is C
    assert hints["O"] is C

    merge_letter_hints(hints, "LLAMA", evaluate("WORLD", "LLAMA"))
    assert hints["L"] is C
    assert hints["A"] is I
