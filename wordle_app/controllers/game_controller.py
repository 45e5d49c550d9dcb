"""
Game Controller

Handles all game-related HTTP endpoints. Each endpoint translates a request
into one engine action; rejected actions still answer 200 with
`accepted: false` and the reason.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import WORD_LENGTH, is_well_formed
from ..models.game import Backspace, EnterLetter, Reset, SubmitGuess
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_target

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _bad_request(action, error, game_id=None):
    error_response = {
        'success': False,
        'error': error
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 400


def _server_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


def _action_response(action, game_id, result):
    """Build the response for a dispatched action."""
    if result is None:
        return _game_not_found(action, game_id)

    state, reason = result
    response_data = {
        'success': True,
        'accepted': not reason,
        'reason': reason,
        'state': state.to_dict()
    }
    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        accepted=not reason, phase=state.phase.value
    )
    return jsonify(response_data)


def _dispatch(action_name, game_id, action):
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, action_name, game_id)
        result = game_service.dispatch(game_id, action, request.remote_addr or 'unknown')
        return _action_response(action_name, game_id, result)

    except Exception as e:
        return _server_error(action_name, e, game_id)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return _bad_request('new_game', 'Request body must be a JSON object')

        game_logger.log_user_action(request, 'new_game', explicit_target=bool(data.get('target')))

        try:
            target = normalize_target(data.get('target'))
            game_id = game_service.create_new_game(target, request.remote_addr or 'unknown')
        except ValueError as e:
            return _bad_request('new_game', str(e))

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': state.to_dict()
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=WORD_LENGTH
        )
        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': state.to_dict()
        }
        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.rounds_used, game_over=state.is_over
        )
        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
def enter_letter(game_id):
    """Append one letter to the current input."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'letter' not in data:
        return _bad_request('enter_letter', 'Letter is required', game_id)
    return _dispatch('enter_letter', game_id, EnterLetter(data['letter']))


@game_bp.route('/game/<game_id>/backspace', methods=['POST'])
def backspace(game_id):
    """Remove the last letter of the current input."""
    return _dispatch('backspace', game_id, Backspace())


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
def submit_guess(game_id):
    """Submit the current input as a guess."""
    return _dispatch('submit_guess', game_id, SubmitGuess())


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Type a whole word and submit it in one request."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            return _bad_request('submit_guess', 'Guess is required', game_id)

        guess = data['guess'].strip()
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        result = game_service.type_word(game_id, guess, request.remote_addr or 'unknown')
        return _action_response('submit_guess', game_id, result)

    except Exception as e:
        return _server_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Start over in the same session, optionally with a chosen target."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _bad_request('reset', 'Request body must be a JSON object', game_id)

    try:
        target = normalize_target(data.get('target'))
    except ValueError as e:
        return _bad_request('reset', str(e), game_id)

    if target is not None and not is_well_formed(target):
        return _bad_request('reset', f"Target must be exactly {WORD_LENGTH} letters", game_id)

    return _dispatch('reset', game_id, Reset(target))


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr or 'unknown')
            return jsonify(response_data)
        return jsonify(response_data), 404

    except Exception as e:
        return _server_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': game_service.active_game_count() if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
