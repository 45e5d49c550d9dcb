"""
Utilities Package

Contains utility functions and the logging module.
"""

from .helpers import get_user_identity, key_to_action, normalize_target
from .game_logger import game_logger

__all__ = ['get_user_identity', 'key_to_action', 'normalize_target', 'game_logger']
