"""
Helper Functions

Contains utility functions used by the HTTP and WebSocket layers.
"""

from typing import Any, Dict, Optional

from flask import request

from ..models.game import Action, Backspace, EnterLetter, SubmitGuess


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {'user_ip': request_obj.remote_addr or 'unknown'}


def key_to_action(key: Any) -> Optional[Action]:
    """
    Translate a raw key press into an engine action.

    'enter' submits, 'backspace' deletes, anything else is treated as a
    letter and left for the engine to accept or ignore.
    """
    if not isinstance(key, str) or not key:
        return None

    name = key.strip().lower()
    if name in ('enter', 'return'):
        return SubmitGuess()
    if name in ('backspace', 'delete'):
        return Backspace()
    return EnterLetter(key)


def normalize_target(value: Any) -> Optional[str]:
    """Empty or missing targets mean 'pick one at random'."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("Target must be a string")
    value = value.strip()
    return value.lower() or None
