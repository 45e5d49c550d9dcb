"""
Game Service

Owns the state of every running game session and feeds actions through the
engine. Each action replaces a game's state in one step under a lock, so
observers never see a partially applied guess.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import WORD_LENGTH, is_well_formed
from ..models.game import Action, Backspace, EnterLetter, GamePhase, GameState, Reset, SubmitGuess
from ..utils.game_logger import game_logger
from .dictionary import WordDictionary
from .engine import GameEngine
from .word_source import WordSource


class GameService:
    """
    Core game service managing multiple single-player sessions.

    This class handles:
    - Game session management with unique game IDs
    - Target selection through the injected word source
    - Serialized dispatch of actions to the engine
    - Logging of game outcomes
    """

    def __init__(self, engine: GameEngine, default_target: Optional[str] = None):
        self.engine = engine
        self.default_target = default_target
        self.games: Dict[str, GameState] = {}
        self._lock = threading.Lock()

    def create_new_game(self, target: Optional[str] = None, source: str = 'local') -> str:
        """
        Creates a new game session.

        Args:
            target: Explicit target word, otherwise the configured default or a random word
            source: Client address used for logging

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the explicit target is not a five-letter word
        """
        state = self.engine.new_game(target or self.default_target)
        game_id = str(uuid.uuid4())

        with self._lock:
            self.games[game_id] = state

        game_logger.log_game_event(game_id, 'game_created', source, explicit_target=bool(target))
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        return self.games.get(game_id)

    def dispatch(self, game_id: str, action: Action, source: str = 'local') -> Optional[Tuple[GameState, str]]:
        """
        Applies one action to a game.

        Args:
            game_id: Unique game identifier
            action: EnterLetter, Backspace, SubmitGuess or Reset. A Reset without
                a target starts over with the configured default target, if any
            source: Client address used for logging

        Returns:
            Tuple of (new_state, rejection_reason), or None if the game does not exist
        """
        explicit_target = isinstance(action, Reset) and bool(action.new_target)
        if isinstance(action, Reset) and not action.new_target and self.default_target:
            action = Reset(self.default_target)

        with self._lock:
            state = self.games.get(game_id)
            if state is None:
                return None

            next_state, reason = self.engine.apply_with_reason(state, action)
            self.games[game_id] = next_state

        if reason:
            game_logger.logger.debug(f"Game {game_id}: rejected {type(action).__name__} ({reason})")
        else:
            self._log_transition(game_id, state, next_state, action, source, explicit_target)

        return next_state, reason

    def _log_transition(self, game_id: str, previous: GameState, state: GameState,
                        action: Action, source: str, explicit_target: bool = False) -> None:
        if isinstance(action, Reset):
            game_logger.log_game_event(
                game_id, 'game_reset', source,
                previous_phase=previous.phase.value, explicit_target=explicit_target
            )
        elif previous.phase == GamePhase.RUNNING and state.phase == GamePhase.WON:
            game_logger.log_game_event(
                game_id, 'game_won', source,
                rounds_used=state.rounds_used, target_word=state.target,
                winning_guess=state.guess_words[-1]
            )
        elif previous.phase == GamePhase.RUNNING and state.phase == GamePhase.LOST:
            game_logger.log_game_event(
                game_id, 'game_lost', source,
                rounds_used=state.rounds_used, target_word=state.target,
                final_guess=state.guess_words[-1]
            )

    def enter_letter(self, game_id: str, letter: str, source: str = 'local'):
        return self.dispatch(game_id, EnterLetter(letter), source)

    def backspace(self, game_id: str, source: str = 'local'):
        return self.dispatch(game_id, Backspace(), source)

    def submit_guess(self, game_id: str, source: str = 'local'):
        return self.dispatch(game_id, SubmitGuess(), source)

    def reset(self, game_id: str, new_target: Optional[str] = None, source: str = 'local'):
        return self.dispatch(game_id, Reset(new_target), source)

    def type_word(self, game_id: str, word: str, source: str = 'local') -> Optional[Tuple[GameState, str]]:
        """
        Replaces the current input with `word` and submits it.

        The whole sequence runs as one update. Words that are not five letters
        are rejected without touching the game, otherwise any pending input is
        cleared, the letters are entered and the result is that of the
        SubmitGuess, including keeping the typed input when it is rejected.
        """
        with self._lock:
            state = self.games.get(game_id)
            if state is None:
                return None

            if not is_well_formed(word):
                return state, f"Guess must be exactly {WORD_LENGTH} letters"

            next_state = state
            for _ in range(len(state.current_input)):
                next_state = self.engine.apply(next_state, Backspace())
            for letter in word:
                next_state = self.engine.apply(next_state, EnterLetter(letter))
            next_state, reason = self.engine.apply_with_reason(next_state, SubmitGuess())
            self.games[game_id] = next_state

        if reason:
            game_logger.logger.debug(f"Game {game_id}: rejected guess {word!r} ({reason})")
        else:
            self._log_transition(game_id, state, next_state, SubmitGuess(), source)

        return next_state, reason

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False

    def active_game_count(self) -> int:
        return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def build_game_service(config_class=Config) -> GameService:
    """Wire the bundled dictionary and word list into a GameService."""
    dictionary = WordDictionary.default()
    word_source = WordSource(seed=config_class.WORD_SEED)
    engine = GameEngine(dictionary.is_valid_word, word_source.random_word)
    return GameService(engine, default_target=config_class.DEFAULT_TARGET)


def initialize_game_service(config_class=Config) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = build_game_service(config_class)
    return _game_service
