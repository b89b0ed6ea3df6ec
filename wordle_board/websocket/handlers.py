"""
WebSocket Event Handlers

Real-time counterpart of the HTTP game endpoints: a client opens a game,
streams guesses and gets each result pushed back on the same socket.
"""

from dataclasses import asdict

from flask import request
from flask_socketio import emit

from ..models.game import GameStatus
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_input


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and send its initial state back to this socket."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_logger.log_user_action(request, 'ws_new_game')

            game_id = game_service.create_new_game()

            emit('game_created', {
                'game_id': game_id,
                'state': asdict(game_service.get_game_state(game_id))
            })
        except Exception as e:
            game_logger.log_error(request, e, 'ws_new_game')
            emit('error', {'error': str(e)})

    @socketio.on('get_state')
    def handle_get_state(data=None):
        """Send the current state of a game back to this socket."""
        game_id = (data or {}).get('game_id')
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_logger.log_user_action(request, 'ws_get_state', game_id)

            state = game_service.get_game_state(game_id) if game_id else None
            if state is None:
                emit('error', {'error': 'Game not found', 'game_id': game_id})
                return

            emit('game_state', {'game_id': game_id, 'state': asdict(state)})
        except Exception as e:
            game_logger.log_error(request, e, 'ws_get_state', game_id)
            emit('error', {'error': str(e), 'game_id': game_id})

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        """Submit a guess; the reply tells the client whether to clear or disable its input."""
        data = data or {}
        game_id = data.get('game_id')
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            if not game_id or not isinstance(data.get('guess'), str):
                emit('error', {'error': 'game_id and guess are required'})
                return

            guess = normalize_input(data['guess'], game_service.word_size)
            game_logger.log_user_action(request, 'ws_submit_guess', game_id, guess=guess)

            result = game_service.make_guess(game_id, guess)
            if result is None:
                emit('error', {'error': 'Game not found', 'game_id': game_id})
                return

            state = asdict(game_service.get_game_state(game_id))

            if not result.accepted:
                emit('guess_rejected', {
                    'game_id': game_id,
                    'error': result.message,
                    'rejection': result.rejection.value,
                    'state': state
                })
                return

            emit('guess_accepted', {
                'game_id': game_id,
                'guess': result.guess.to_dict(),
                'state': state
            })

            if state['is_over']:
                event = 'game_won' if result.status is GameStatus.WON else 'game_lost'
                game_logger.log_game_event(game_id, event, request, guesses_used=len(state['guesses']))
        except Exception as e:
            game_logger.log_error(request, e, 'ws_submit_guess', game_id)
            emit('error', {'error': str(e), 'game_id': game_id})
