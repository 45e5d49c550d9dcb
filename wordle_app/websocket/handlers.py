"""
WebSocket Event Handlers

Real-time play: clients send raw key presses and receive one
`game_state_update` per processed action.
"""

from flask_socketio import emit, join_room, leave_room
from ..models.game import Reset
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import get_user_identity, key_to_action, normalize_target


def _room(game_id):
    return f"game_{game_id}"


def _payload(data):
    return data if isinstance(data, dict) else {}


def broadcast_game_state_update(socketio, game_id, state, accepted=True, reason=""):
    """Send the new state of a game to everyone watching it."""
    socketio.emit('game_state_update', {
        'success': True,
        'game_id': game_id,
        'accepted': accepted,
        'reason': reason,
        'state': state.to_dict()
    }, room=_room(game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def _dispatch(game_id, action):
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        result = game_service.dispatch(game_id, action, get_user_identity()['user_ip'])
        if result is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        state, reason = result
        broadcast_game_state_update(socketio, game_id, state, accepted=not reason, reason=reason)

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room and receive its current state."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = _payload(data).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        join_room(_room(game_id))
        game_logger.logger.info(f"WebSocket: {get_user_identity()['user_ip']} joined game {game_id}")

        emit('game_state_update', {
            'success': True,
            'game_id': game_id,
            'accepted': True,
            'reason': '',
            'state': state.to_dict()
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving updates for a game."""
        game_id = _payload(data).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return
        leave_room(_room(game_id))

    @socketio.on('key_press')
    def handle_key_press(data):
        """Translate a key press (letter, 'enter' or 'backspace') into an action."""
        data = _payload(data)
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        action = key_to_action(data.get('key'))
        if action is None:
            emit('error', {'error': 'Key is required', 'game_id': game_id})
            return

        _dispatch(game_id, action)

    @socketio.on('reset')
    def handle_reset(data):
        """Start a fresh game in the same session."""
        data = _payload(data)
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            target = normalize_target(data.get('target'))
            _dispatch(game_id, Reset(target))
        except ValueError as e:
            emit('error', {'error': str(e), 'game_id': game_id})
