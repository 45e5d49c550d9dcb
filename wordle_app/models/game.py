"""
Game Data Models

Contains the immutable game state, the action vocabulary and the enums
they are built from.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..config.game_settings import ALPHABET, KEYBOARD_ROWS, MAX_GUESSES, WORD_LENGTH, is_well_formed


class LetterStatus(Enum):
    """Letter evaluation status, ordered UNSET < ABSENT < PRESENT < CORRECT."""
    UNSET = "UNSET"
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
    CORRECT = "CORRECT"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.UNSET: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GamePhase(Enum):
    """Overall game outcome."""
    RUNNING = "RUNNING"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class ScoredLetter:
    """A guessed letter paired with its feedback."""
    character: str
    status: LetterStatus

    def to_dict(self) -> Dict[str, str]:
        return {'character': self.character, 'status': self.status.value}


ScoredGuess = Tuple[ScoredLetter, ...]


def initial_keyboard() -> Mapping[str, LetterStatus]:
    """Keyboard with every letter unset."""
    return MappingProxyType({letter: LetterStatus.UNSET for letter in ALPHABET})


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a single game.

    Transitions never modify a GameState; they build a new one with
    dataclasses.replace or GameState.new.
    """
    target: str
    phase: GamePhase = GamePhase.RUNNING
    guesses: Tuple[ScoredGuess, ...] = ()
    current_input: Tuple[str, ...] = ()
    keyboard: Mapping[str, LetterStatus] = field(default_factory=initial_keyboard)

    @classmethod
    def new(cls, target: str) -> "GameState":
        """
        Create a fresh game for `target`.

        Raises:
            ValueError: If the target is not exactly five letters
        """
        if not is_well_formed(target):
            raise ValueError(f"Target must be exactly {WORD_LENGTH} letters, got {target!r}")
        return cls(target=target.lower())

    @property
    def is_over(self) -> bool:
        return self.phase != GamePhase.RUNNING

    @property
    def rounds_used(self) -> int:
        return len(self.guesses)

    @property
    def input_word(self) -> str:
        return "".join(self.current_input)

    @property
    def guess_words(self) -> Tuple[str, ...]:
        return tuple("".join(letter.character for letter in guess) for guess in self.guesses)

    def to_dict(self, reveal_target: Optional[bool] = None) -> Dict[str, Any]:
        """
        Serialize for the presentation layer.

        The target is only included once the game is over unless
        `reveal_target` says otherwise.
        """
        if reveal_target is None:
            reveal_target = self.is_over

        return {
            'phase': self.phase.value,
            'game_over': self.is_over,
            'won': self.phase == GamePhase.WON,
            'current_round': self.rounds_used,
            'max_rounds': MAX_GUESSES,
            'word_length': WORD_LENGTH,
            'guesses': list(self.guess_words),
            'guess_results': [[letter.to_dict() for letter in guess] for guess in self.guesses],
            'current_input': self.input_word,
            'letter_status': {letter: status.value for letter, status in self.keyboard.items()},
            'keyboard_rows': list(KEYBOARD_ROWS),
            'answer': self.target if reveal_target else None,
        }


@dataclass(frozen=True)
class EnterLetter:
    letter: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class SubmitGuess:
    pass


@dataclass(frozen=True)
class Reset:
    new_target: Optional[str] = None


Action = Union[EnterLetter, Backspace, SubmitGuess, Reset]
