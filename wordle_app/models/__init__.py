"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Action,
    Backspace,
    EnterLetter,
    GamePhase,
    GameState,
    LetterStatus,
    Reset,
    ScoredLetter,
    SubmitGuess,
    initial_keyboard,
)

__all__ = [
    'Action', 'Backspace', 'EnterLetter', 'GamePhase', 'GameState',
    'LetterStatus', 'Reset', 'ScoredLetter', 'SubmitGuess', 'initial_keyboard',
]
