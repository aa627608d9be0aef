import pytest

from wordle_bot.models.evaluation import LetterStatus
from wordle_bot.models.game import GameSession, GameStatus
from wordle_bot.models.player import PlayerRecord, Score

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT


def test_record_game_end_counts_wins_and_losses():
    record = PlayerRecord(player_id='42', active_session=GameSession.new_game('HELLO', 6))
    record.record_game_end(GameStatus.WON)
    record.record_game_end(GameStatus.LOST)

    assert record.score() == Score(games_played=2, wins=1, losses=1)
    assert record.won_words == ['HELLO']


def test_record_game_end_rejects_in_progress():
    record = PlayerRecord(player_id='42')
    with pytest.raises(ValueError):
        record.record_game_end(GameStatus.IN_PROGRESS)
    assert record.games_played == 0


def test_known_letters_upgrade():
    record = PlayerRecord(player_id='42')
    record.update_known_letters([A, P, A], 'abc')
    record.update_known_letters([C, C, P], 'abc')
    assert record.known_letters == {'A': C, 'B': C, 'C': P}


def test_known_letters_never_downgrade():
    record = PlayerRecord(player_id='42')
    record.update_known_letters([C, P], 'ab')
    record.update_known_letters([A, A], 'ab')
    assert record.known_letters == {'A': C, 'B': P}


def test_known_letters_same_guess_keeps_best():
    record = PlayerRecord(player_id='42')
    # LOLLY against ALLOW marks the first L present and the last L absent
    record.update_known_letters([P, P, C, A, A], 'LOLLY')
    assert record.known_letters['L'] is C
    assert record.known_letters['O'] is P
    assert record.known_letters['Y'] is A


def test_reset_known_letters():
    record = PlayerRecord(player_id='42')
    record.update_known_letters([C], 'a')
    record.reset_known_letters()
    assert record.known_letters == {}


def test_score_rendering():
    assert str(Score(games_played=3, wins=2, losses=1)) == '67% (2/3)'
    assert str(Score()) == '0% (0/0)'
    assert Score(games_played=4, wins=1, losses=3).win_rate == 0.25


def test_record_survives_dict_round_trip(word_set):
    session = GameSession.new_game('HELLO', 6)
    classifications, _ = session.submit_guess('bolle', word_set)
    record = PlayerRecord(
        player_id='42',
        display_name='Ann',
        games_played=3,
        wins=2,
        losses=1,
        active_session=session,
        played_words=['CRANE', 'HELLO'],
        won_words=['CRANE'],
    )
    record.update_known_letters(classifications, 'BOLLE')

    restored = PlayerRecord.from_dict(record.to_dict())
    assert restored == record
    assert restored.to_dict() == record.to_dict()


@pytest.mark.parametrize('data', [
    {},
    {'player_id': '1', 'games_played': -1, 'wins': 0, 'losses': 0},
    {'player_id': '1', 'games_played': 'two', 'wins': 0, 'losses': 0},
    {'player_id': '1', 'games_played': 0, 'wins': 0, 'losses': 0, 'known_letters': {'A': 'GREEN'}},
    {'player_id': '1', 'games_played': 0, 'wins': 0, 'losses': 0, 'active_session': {'target': 'HELLO'}},
    {'player_id': '1', 'games_played': 0, 'wins': 0, 'losses': 0, 'known_letters': []},
    {'player_id': '1', 'games_played': 0, 'wins': 0, 'losses': 0, 'played_words': 'HELLO'},
    {'player_id': '1', 'games_played': 0, 'wins': 0, 'losses': 0, 'active_session': ['HELLO']},
])
def test_from_dict_rejects_malformed(data):
    with pytest.raises((KeyError, TypeError, ValueError)):
        PlayerRecord.from_dict(data)
