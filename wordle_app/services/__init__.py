"""
Services Package

Contains the game engine and the services around it.
"""

from .dictionary import WordDictionary
from .engine import GameEngine, score_guess, upgrade_keyboard
from .game_service import GameService, build_game_service, get_game_service, initialize_game_service
from .word_source import WordSource

__all__ = [
    'WordDictionary',
    'GameEngine', 'score_guess', 'upgrade_keyboard',
    'GameService', 'build_game_service', 'get_game_service', 'initialize_game_service',
    'WordSource',
]
