"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional

from flask import current_app, request


def get_session_store():
    """Session store attached to the running app, or None."""
    return getattr(current_app, 'session_store', None)


def get_chat_service():
    """Chat service attached to the running app, or None."""
    return getattr(current_app, 'chat_service', None)


def get_request_data(request_obj=None) -> Dict[str, Any]:
    """JSON body of the request, or an empty dict."""
    if request_obj is None:
        request_obj = request
    data = request_obj.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def get_display_name(data: Dict[str, Any]) -> Optional[str]:
    name = data.get('display_name')
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None
