"""
Services Package

Contains the session store and the chat front-end built on it.
"""

from .session_store import GuessResult, PlayerLock, SessionStore
from .chat_service import ChatReply, ChatService

__all__ = [
    'GuessResult', 'PlayerLock', 'SessionStore',
    'ChatReply', 'ChatService'
]
