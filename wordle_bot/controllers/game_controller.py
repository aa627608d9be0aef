"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, jsonify
from ..errors import GameNotInProgressError, InvalidGuessError, PersistenceError, WordleError
from ..utils.decorators import require_store
from ..utils.game_logger import game_logger
from ..utils.helpers import get_chat_service, get_display_name, get_request_data

game_bp = Blueprint('game', __name__)


def _error_status(error: WordleError) -> int:
    if isinstance(error, InvalidGuessError):
        return 400
    if isinstance(error, GameNotInProgressError):
        return 409
    if isinstance(error, PersistenceError):
        return 503
    return 400


def _error_response(error: WordleError):
    return jsonify({
        'success': False,
        'error': error.message or str(error),
        'error_type': type(error).__name__
    }), _error_status(error)


@game_bp.route('/players/<player_id>/new_game', methods=['POST'])
@require_store
def new_game(player_id, store):
    """Start a new game for a player, abandoning any unfinished one."""
    try:
        data = get_request_data()
        game_logger.log_player_action(player_id, 'new_game')

        session = store.start_new_game(player_id, display_name=get_display_name(data))
        return jsonify({
            'success': True,
            'word_length': session.word_length,
            'max_attempts': session.max_attempts,
            'status': session.status.value
        })

    except WordleError as e:
        game_logger.log_error(player_id, e, 'new_game')
        return _error_response(e)
    except Exception as e:
        game_logger.log_error(player_id, e, 'new_game')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/players/<player_id>/guess', methods=['POST'])
@require_store
def make_guess(player_id, store):
    """Submit a guess for validation and evaluation."""
    try:
        data = get_request_data()
        guess = data.get('guess')
        if not isinstance(guess, str) or not guess.strip():
            return jsonify({
                'success': False,
                'error': 'Guess is required'
            }), 400

        game_logger.log_player_action(player_id, 'submit_guess', guess=guess, guess_length=len(guess))

        result = store.submit_guess(player_id, guess)
        return jsonify({
            'success': True,
            'result': result.to_dict()
        })

    except WordleError as e:
        game_logger.log_error(player_id, e, 'submit_guess')
        return _error_response(e)
    except Exception as e:
        game_logger.log_error(player_id, e, 'submit_guess')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/players/<player_id>/state', methods=['GET'])
@require_store
def get_state(player_id, store):
    """Get the player's current game without revealing an unfinished target."""
    try:
        game_logger.log_player_action(player_id, 'get_state')

        session = store.get_session(player_id)
        if session is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        state = session.to_dict()
        if not session.is_over:
            state['target'] = None
        state['remaining_attempts'] = session.remaining_attempts
        state['word_length'] = session.word_length

        record = store.get_or_create(player_id)
        state['known_letters'] = {letter: status.value for letter, status in sorted(record.known_letters.items())}

        return jsonify({
            'success': True,
            'state': state
        })

    except WordleError as e:
        game_logger.log_error(player_id, e, 'get_state')
        return _error_response(e)
    except Exception as e:
        game_logger.log_error(player_id, e, 'get_state')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/players/<player_id>/score', methods=['GET'])
@require_store
def get_score(player_id, store):
    """Get the player's aggregate statistics."""
    try:
        game_logger.log_player_action(player_id, 'score')

        score = store.score(player_id)
        return jsonify({
            'success': True,
            'score': score.to_dict(),
            'summary': str(score)
        })

    except WordleError as e:
        game_logger.log_error(player_id, e, 'score')
        return _error_response(e)
    except Exception as e:
        game_logger.log_error(player_id, e, 'score')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/players/<player_id>', methods=['DELETE'])
@require_store
def delete_player(player_id, store):
    """Delete a player's record and session."""
    try:
        game_logger.log_player_action(player_id, 'delete_player')
        return jsonify({'success': store.delete(player_id)})

    except WordleError as e:
        game_logger.log_error(player_id, e, 'delete_player')
        return _error_response(e)
    except Exception as e:
        game_logger.log_error(player_id, e, 'delete_player')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/chat', methods=['POST'])
@require_store
def chat_message(store):
    """Handle one chat message and return the rendered reply."""
    data = get_request_data()
    player_id = data.get('player_id')
    if not player_id:
        return jsonify({
            'success': False,
            'error': 'player_id is required'
        }), 400

    try:
        reply = get_chat_service().handle_message(str(player_id), data.get('text', ''), get_display_name(data))
        return jsonify({
            'success': reply.error is None,
            'reply': reply.text,
            'status': reply.status,
            'error_type': reply.error
        })

    except Exception as e:
        game_logger.log_error(str(player_id), e, 'chat_message')
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/health', methods=['GET'])
@require_store
def health_check(store):
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'game_name': store.context.game_name,
        'target_words': len(store.context.word_set),
        'cached_players': store.active_players(),
        'storage': type(store.storage).__name__,
        'log_stats': game_logger.get_log_stats()
    })
