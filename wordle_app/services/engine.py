"""
Game Engine

Pure state transitions for a single game. The engine holds no state of its
own: `apply` takes a GameState and an action and returns the next GameState,
or the very same object when the action is not allowed in that state.
"""

import dataclasses
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..models.game import (
    Action,
    Backspace,
    EnterLetter,
    GamePhase,
    GameState,
    LetterStatus,
    Reset,
    ScoredLetter,
    SubmitGuess,
)


def score_guess(guess: str, target: str) -> Tuple[ScoredLetter, ...]:
    """
    Score `guess` against `target` one letter at a time.

    Exact matches are resolved first and consume their target slot. Every
    other position, left to right, takes the leftmost unconsumed slot holding
    the same letter (PRESENT) or is ABSENT when none is left. Both words are
    assumed to be five lowercase letters.
    """
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)
    taken = [False] * len(target)

    # First pass: exact position matches
    for index, letter in enumerate(guess):
        if target[index] == letter:
            statuses[index] = LetterStatus.CORRECT
            taken[index] = True

    # Second pass: misplaced letters claim the leftmost free slot
    for index, letter in enumerate(guess):
        if statuses[index] is not None:
            continue

        if letter not in target:
            statuses[index] = LetterStatus.ABSENT
            continue

        free_slot = None
        for target_index, target_letter in enumerate(target):
            if target_letter == letter and not taken[target_index]:
                free_slot = target_index
                break

        if free_slot is None:
            statuses[index] = LetterStatus.ABSENT
        else:
            statuses[index] = LetterStatus.PRESENT
            taken[free_slot] = True

    return tuple(ScoredLetter(letter, status) for letter, status in zip(guess, statuses))


def upgrade_keyboard(keyboard: Mapping[str, LetterStatus],
                     scored: Sequence[ScoredLetter]) -> Mapping[str, LetterStatus]:
    """
    Merge a scored guess into the keyboard.

    A letter's status only ever moves up UNSET < ABSENT < PRESENT < CORRECT.
    """
    updated = dict(keyboard)
    for scored_letter in scored:
        current = updated.get(scored_letter.character, LetterStatus.UNSET)
        if scored_letter.status.rank > current.rank:
            updated[scored_letter.character] = scored_letter.status
    return MappingProxyType(updated)


def _is_letter(value) -> bool:
    return isinstance(value, str) and len(value) == 1 and value.isascii() and value.isalpha()


class GameEngine:
    """
    Reducer for the guessing game.

    Args:
        is_valid_word: Dictionary check gating SubmitGuess
        random_word: Word source used by Reset when no target is given
    """

    def __init__(self,
                 is_valid_word: Callable[[str], bool],
                 random_word: Callable[[], str]):
        self.is_valid_word = is_valid_word
        self.random_word = random_word

    def new_game(self, target: Optional[str] = None) -> GameState:
        return GameState.new(target if target is not None else self.random_word())

    def check_action(self, state: GameState, action: Action) -> Tuple[bool, str]:
        """
        Report whether `action` would be accepted in `state`.

        Returns:
            Tuple of (is_accepted, rejection_reason)
        """
        if isinstance(action, Reset):
            return True, ""

        if state.phase != GamePhase.RUNNING:
            return False, "Game is already over"

        if isinstance(action, EnterLetter):
            if not _is_letter(action.letter):
                return False, "Not a letter"
            if len(state.guesses) >= MAX_GUESSES:
                return False, "No guesses left"
            if len(state.current_input) >= WORD_LENGTH:
                return False, "Input is full"
            return True, ""

        if isinstance(action, Backspace):
            if not state.current_input:
                return False, "Nothing to delete"
            return True, ""

        if isinstance(action, SubmitGuess):
            if len(state.guesses) >= MAX_GUESSES:
                return False, "No guesses left"
            if len(state.current_input) != WORD_LENGTH:
                return False, f"Guess must be exactly {WORD_LENGTH} letters"
            if not self.is_valid_word(state.input_word):
                return False, "Word not in dictionary"
            return True, ""

        return False, f"Unknown action: {type(action).__name__}"

    def apply(self, state: GameState, action: Action) -> GameState:
        """Apply `action`; rejected actions return `state` unchanged."""
        return self.apply_with_reason(state, action)[0]

    def apply_with_reason(self, state: GameState, action: Action) -> Tuple[GameState, str]:
        """Like apply, also returning the rejection reason ('' when accepted)."""
        accepted, reason = self.check_action(state, action)
        if not accepted:
            return state, reason

        if isinstance(action, EnterLetter):
            next_state = dataclasses.replace(
                state, current_input=state.current_input + (action.letter.lower(),)
            )
        elif isinstance(action, Backspace):
            next_state = dataclasses.replace(state, current_input=state.current_input[:-1])
        elif isinstance(action, SubmitGuess):
            next_state = self._submit(state)
        else:
            next_state = self.new_game(action.new_target)

        return next_state, ""

    def _submit(self, state: GameState) -> GameState:
        guess = state.input_word
        scored = score_guess(guess, state.target)
        guesses = state.guesses + (scored,)

        if guess == state.target:
            phase = GamePhase.WON
        elif len(guesses) == MAX_GUESSES:
            phase = GamePhase.LOST
        else:
            phase = GamePhase.RUNNING

        return dataclasses.replace(
            state,
            phase=phase,
            guesses=guesses,
            current_input=(),
            keyboard=upgrade_keyboard(state.keyboard, scored),
        )
