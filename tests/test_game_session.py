import pytest

from wordle_bot.errors import GameNotInProgressError, InvalidGuessError
from wordle_bot.models.evaluation import LetterStatus
from wordle_bot.models.game import GameSession, GameStatus


def test_new_game_starts_in_progress():
    session = GameSession.new_game('hello', 6)
    assert session.target == 'HELLO'
    assert session.status is GameStatus.IN_PROGRESS
    assert session.guesses == []
    assert session.remaining_attempts == 6
    assert session.word_length == 5


def test_new_game_requires_positive_attempts():
    with pytest.raises(ValueError):
        GameSession.new_game('hello', 0)


def test_correct_guess_wins(word_set):
    session = GameSession.new_game('HELLO', 6)
    classifications, status = session.submit_guess('hello', word_set)

    assert classifications == [LetterStatus.CORRECT] * 5
    assert status is GameStatus.WON
    assert session.is_over


def test_no_guesses_after_win(word_set):
    session = GameSession.new_game('HELLO', 6)
    session.submit_guess('HELLO', word_set)

    with pytest.raises(GameNotInProgressError):
        session.submit_guess('APPLE', word_set)
    assert len(session.guesses) == 1


def test_running_out_of_attempts_loses(word_set):
    session = GameSession.new_game('HELLO', 3)
    statuses = [session.submit_guess(word, word_set)[1] for word in ('apple', 'slate', 'crane')]

    assert statuses == [GameStatus.IN_PROGRESS, GameStatus.IN_PROGRESS, GameStatus.LOST]
    assert len(session.guesses) == session.max_attempts
    assert session.remaining_attempts == 0


def test_winning_on_last_attempt_is_a_win(word_set):
    session = GameSession.new_game('HELLO', 2)
    session.submit_guess('apple', word_set)
    _, status = session.submit_guess('hello', word_set)
    assert status is GameStatus.WON


def test_unknown_word_rejected_without_change(word_set):
    session = GameSession.new_game('HELLO', 6)
    with pytest.raises(InvalidGuessError):
        session.submit_guess('zzzzz', word_set)
    assert session.guesses == []
    assert session.status is GameStatus.IN_PROGRESS


def test_wrong_length_rejected_without_change(word_set):
    session = GameSession.new_game('HELLO', 6)
    with pytest.raises(InvalidGuessError) as excinfo:
        session.submit_guess('hell', word_set)
    assert '5 letters' in excinfo.value.message
    assert session.guesses == []


def test_guess_is_normalized(word_set):
    session = GameSession.new_game('HELLO', 6)
    session.submit_guess('  Bolle ', word_set)
    assert session.guesses[0].word == 'BOLLE'


def test_attempted_letters_sorted_and_unique(word_set):
    session = GameSession.new_game('HELLO', 6)
    session.submit_guess('apple', word_set)
    session.submit_guess('slate', word_set)
    assert session.attempted_letters() == ['A', 'E', 'L', 'P', 'S', 'T']


def test_session_survives_dict_round_trip(word_set):
    session = GameSession.new_game('HELLO', 6)
    session.submit_guess('lolly', word_set)
    session.submit_guess('bolle', word_set)

    restored = GameSession.from_dict(session.to_dict())
    assert restored == session


@pytest.mark.parametrize('data', [
    {'target': '', 'guesses': [], 'status': 'IN_PROGRESS', 'max_attempts': 6},
    {'target': 'HELLO', 'guesses': [], 'status': 'PAUSED', 'max_attempts': 6},
    {'target': 'HELLO', 'guesses': [{'word': 'APPLE', 'classifications': ['ABSENT']}],
     'status': 'IN_PROGRESS', 'max_attempts': 6},
    {'target': 'HELLO', 'guesses': [], 'status': 'IN_PROGRESS'},
])
def test_from_dict_rejects_malformed_data(data):
    with pytest.raises((KeyError, TypeError, ValueError)):
        GameSession.from_dict(data)


APPLE = {'word': 'APPLE', 'classifications': ['ABSENT', 'ABSENT', 'ABSENT', 'CORRECT', 'PRESENT']}
HELLO = {'word': 'HELLO', 'classifications': ['CORRECT'] * 5}


@pytest.mark.parametrize('guesses, status', [
    ([APPLE, APPLE], 'IN_PROGRESS'),
    ([APPLE], 'LOST'),
    ([APPLE], 'WON'),
    ([HELLO], 'IN_PROGRESS'),
    ([HELLO, APPLE], 'WON'),
    ([{'word': 'HELL', 'classifications': ['CORRECT'] * 4}], 'IN_PROGRESS'),
    ([dict(APPLE, classifications=['CORRECT'] * 5)], 'WON'),
])
def test_from_dict_rejects_status_that_disagrees_with_guesses(guesses, status):
    data = {'target': 'HELLO', 'guesses': guesses, 'status': status, 'max_attempts': 2}
    with pytest.raises(ValueError):
        GameSession.from_dict(data)


@pytest.mark.parametrize('guesses, status', [
    ([], 'IN_PROGRESS'),
    ([APPLE], 'IN_PROGRESS'),
    ([APPLE, APPLE], 'LOST'),
    ([APPLE, HELLO], 'WON'),
])
def test_from_dict_accepts_consistent_history(guesses, status):
    data = {'target': 'HELLO', 'guesses': guesses, 'status': status, 'max_attempts': 2}
    session = GameSession.from_dict(data)
    assert session.status is GameStatus(status)
    assert session.to_dict() == data
