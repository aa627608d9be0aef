"""
WebSocket Event Handlers

Handles chat messages arriving over Socket.IO.
"""

from flask import request
from flask_socketio import emit, join_room
from ..utils.decorators import websocket_player_required
from ..utils.game_logger import game_logger
from ..utils.helpers import get_display_name


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('join')
    @websocket_player_required
    def handle_join(data, chat_service=None):
        """Subscribe this socket to replies for a player."""
        player_id = str(data['player_id'])
        join_room(f"player_{player_id}")
        game_logger.log_player_action(player_id, 'join', sid=request.sid)
        emit('joined', {'player_id': player_id})

    @socketio.on('chat_message')
    @websocket_player_required
    def handle_chat_message(data, chat_service=None):
        """
        Handle one chat message.

        Expected data: {'player_id': str, 'text': str, 'display_name': optional str}
        Emits 'chat_reply' to the player's room and to the sender.
        """
        player_id = str(data['player_id'])
        try:
            reply = chat_service.handle_message(player_id, data.get('text', ''), get_display_name(data))
        except Exception as e:
            game_logger.log_error(player_id, e, 'chat_message')
            emit('error', {'error': 'Failed to process message'})
            return

        payload = {
            'player_id': player_id,
            'reply': reply.text,
            'status': reply.status,
            'error_type': reply.error
        }
        emit('chat_reply', payload)
        socketio.emit('chat_reply', payload, to=f"player_{player_id}", skip_sid=request.sid)
