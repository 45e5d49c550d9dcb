import pytest

from wordle_app.models import (
    Backspace,
    EnterLetter,
    GamePhase,
    GameState,
    LetterStatus,
    Reset,
    ScoredLetter,
    SubmitGuess,
)
from wordle_app.services.engine import GameEngine, score_guess, upgrade_keyboard
from wordle_app.models.game import initial_keyboard

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT
U = LetterStatus.UNSET


def statuses(scored):
    return [letter.status for letter in scored]


def enter_word(engine, state, word):
    for letter in word:
        state = engine.apply(state, EnterLetter(letter))
    return state


def guess(engine, state, word):
    return engine.apply(enter_word(engine, state, word), SubmitGuess())


def test_score_guess_all_correct():
    for word in ["house", "vivid", "daddy", "eerie"]:
        assert statuses(score_guess(word, word)) == [C] * 5


def test_score_guess_keeps_letters_in_guess_order():
    scored = score_guess("homer", "house")
    assert [letter.character for letter in scored] == list("homer")
    assert scored == (
        ScoredLetter("h", C),
        ScoredLetter("o", C),
        ScoredLetter("m", A),
        ScoredLetter("e", P),
        ScoredLetter("r", A),
    )


def test_score_guess_duplicate_letters():
    assert statuses(score_guess("daddy", "vivid")) == [P, A, A, A, A]
    assert statuses(score_guess("baddy", "vivid")) == [A, A, P, A, A]
    assert statuses(score_guess("allot", "total")) == [P, P, A, P, P]
    assert statuses(score_guess("abbey", "cabin")) == [P, A, C, A, A]
    assert statuses(score_guess("press", "spree")) == [P, P, P, P, A]


def test_score_guess_leftmost_occurrence_is_present():
    # The exact match claims the only "e" of "house", leaving none for earlier copies
    assert statuses(score_guess("eerie", "house")) == [A, A, A, A, C]
    assert statuses(score_guess("daddy", "crane")) == [A, P, A, A, A]
    assert statuses(score_guess("eerie", "spree"))[:2] == [P, A]


def test_score_guess_exact_match_consumes_before_earlier_duplicates():
    # target "total" has one "a" at index 3
    scored = statuses(score_guess("aaaaa", "total"))
    assert scored == [A, A, A, C, A]


def test_score_guess_never_marks_more_letters_than_target_has():
    pairs = [
        ("daddy", "vivid"), ("baddy", "vivid"), ("allot", "total"), ("abbey", "cabin"),
        ("press", "spree"), ("eerie", "house"), ("geese", "spree"), ("hopes", "house"),
    ]
    for guess_word, target in pairs:
        scored = score_guess(guess_word, target)
        for letter in set(guess_word):
            hits = sum(1 for s in scored if s.character == letter and s.status in (P, C))
            assert hits <= target.count(letter), (guess_word, target, letter)


def test_upgrade_keyboard_only_moves_up():
    keyboard = initial_keyboard()

    keyboard = upgrade_keyboard(keyboard, [ScoredLetter("e", A)])
    assert keyboard["e"] == A

    keyboard = upgrade_keyboard(keyboard, [ScoredLetter("e", P)])
    assert keyboard["e"] == P

    keyboard = upgrade_keyboard(keyboard, [ScoredLetter("e", A)])
    assert keyboard["e"] == P

    keyboard = upgrade_keyboard(keyboard, [ScoredLetter("e", C)])
    assert keyboard["e"] == C

    keyboard = upgrade_keyboard(keyboard, [ScoredLetter("e", P), ScoredLetter("e", A)])
    assert keyboard["e"] == C
    assert keyboard["a"] == U


def test_upgrade_keyboard_does_not_modify_input():
    keyboard = initial_keyboard()
    upgrade_keyboard(keyboard, [ScoredLetter("a", C)])
    assert keyboard["a"] == U


def test_input_rules(engine):
    state = GameState.new("house")

    # An uppercase letter is stored lowercase
    state = engine.apply(state, EnterLetter("A"))
    assert state.current_input == ("a",)

    # Can't submit until five letters are entered
    assert engine.apply(state, SubmitGuess()) is state

    # Anything but a letter is ignored
    for character in ["1", ".", ";", " ", "", "ab", "é"]:
        assert engine.apply(state, EnterLetter(character)) is state

    state = enter_word(engine, state, "bcde")
    assert state.input_word == "abcde"

    # Can't enter more than five letters
    assert engine.apply(state, EnterLetter("f")) is state

    # Can't submit words that are not in the dictionary; input is kept
    rejected = engine.apply(state, SubmitGuess())
    assert rejected is state
    assert rejected.input_word == "abcde"
    assert rejected.guesses == ()


def test_backspace(engine):
    state = GameState.new("house")
    assert engine.apply(state, Backspace()) is state

    state = enter_word(engine, state, "hom")
    state = engine.apply(state, Backspace())
    assert state.current_input == ("h", "o")
    state = engine.apply(engine.apply(state, Backspace()), Backspace())
    assert state.current_input == ()


def test_apply_does_not_mutate_previous_state(engine):
    start = GameState.new("house")
    typed = enter_word(engine, start, "homer")
    submitted = engine.apply(typed, SubmitGuess())

    assert start.current_input == ()
    assert typed.input_word == "homer"
    assert typed.guesses == ()
    assert dict(typed.keyboard) == dict(initial_keyboard())
    assert submitted.guess_words == ("homer",)


def test_game(engine):
    state = GameState.new("house")

    state = guess(engine, state, "homer")
    assert state.guess_words == ("homer",)
    assert statuses(state.guesses[0]) == [C, C, A, P, A]
    assert state.current_input == ()
    assert state.phase == GamePhase.RUNNING
    assert {k: v for k, v in state.keyboard.items() if v != U} == {
        "h": C, "o": C, "m": A, "e": P, "r": A,
    }

    state = guess(engine, state, "hopes")
    assert {k: v for k, v in state.keyboard.items() if v != U} == {
        "h": C, "o": C, "m": A, "e": P, "r": A, "p": A, "s": P,
    }

    state = guess(engine, state, "horse")
    assert state.keyboard["e"] == C
    assert state.keyboard["s"] == C
    assert state.keyboard["r"] == A
    assert state.phase == GamePhase.RUNNING

    state = guess(engine, state, "house")
    assert state.phase == GamePhase.WON
    assert state.keyboard["u"] == C
    assert state.guess_words == ("homer", "hopes", "horse", "house")
    assert state.current_input == ()

    # Once the game is won nothing but reset is accepted
    assert engine.apply(state, EnterLetter("h")) is state
    assert engine.apply(state, Backspace()) is state
    assert engine.apply(state, SubmitGuess()) is state

    reset = engine.apply(state, Reset("crane"))
    assert reset.target == "crane"
    assert reset.phase == GamePhase.RUNNING
    assert reset.guesses == ()
    assert dict(reset.keyboard) == dict(initial_keyboard())


def test_loss_after_six_guesses(engine):
    state = GameState.new("house")
    for word in ["crane", "vivid", "daddy", "baddy", "allot"]:
        state = guess(engine, state, word)
        assert state.phase == GamePhase.RUNNING

    state = guess(engine, state, "total")
    assert state.phase == GamePhase.LOST
    assert len(state.guesses) == 6

    assert engine.apply(state, EnterLetter("a")) is state
    assert engine.apply(state, SubmitGuess()) is state


def test_win_on_last_guess_is_not_a_loss(engine):
    state = GameState.new("house")
    for word in ["crane", "vivid", "daddy", "baddy", "allot"]:
        state = guess(engine, state, word)

    state = guess(engine, state, "house")
    assert state.phase == GamePhase.WON


def test_guards_when_six_guesses_recorded(engine):
    row = score_guess("crane", "house")
    state = GameState(target="house", guesses=(row,) * 6, current_input=("h",))

    assert engine.apply(state, EnterLetter("o")) is state
    assert engine.apply(state, SubmitGuess()) is state
    assert engine.check_action(state, EnterLetter("o")) == (False, "No guesses left")
    # Backspace only depends on the phase and the input
    assert engine.apply(state, Backspace()).current_input == ()


@pytest.mark.parametrize("phase", list(GamePhase))
def test_reset_from_any_phase(engine, phase):
    state = GameState(
        target="house",
        phase=phase,
        guesses=(score_guess("homer", "house"),),
        current_input=("a", "b"),
        keyboard=upgrade_keyboard(initial_keyboard(), score_guess("homer", "house")),
    )

    reset = engine.apply(state, Reset("crane"))

    assert reset.target == "crane"
    assert reset.phase == GamePhase.RUNNING
    assert reset.guesses == ()
    assert reset.current_input == ()
    assert set(reset.keyboard) == set("abcdefghijklmnopqrstuvwxyz")
    assert all(status == U for status in reset.keyboard.values())


def test_reset_without_target_uses_word_source(engine):
    state = guess(engine, GameState.new("house"), "homer")
    assert engine.apply(state, Reset()).target == "crane"


def test_reset_with_invalid_target_raises(engine):
    with pytest.raises(ValueError):
        engine.apply(GameState.new("house"), Reset("toolong"))


def test_keyboard_is_monotonic(engine):
    state = GameState.new("spree")
    seen = {}
    for word in ["press", "geese", "eerie", "abbey", "allot", "spree"]:
        state = guess(engine, state, word)
        for letter, status in state.keyboard.items():
            assert status.rank >= seen.get(letter, U).rank
            seen[letter] = status
    assert state.phase == GamePhase.WON


def test_check_action_reasons(dictionary):
    engine = GameEngine(dictionary.is_valid_word, lambda: "crane")
    state = GameState.new("house")

    assert engine.check_action(state, EnterLetter("h")) == (True, "")
    assert engine.check_action(state, EnterLetter("7")) == (False, "Not a letter")
    assert engine.check_action(state, Backspace()) == (False, "Nothing to delete")
    assert engine.check_action(state, SubmitGuess()) == (False, "Guess must be exactly 5 letters")

    state = enter_word(engine, state, "abcde")
    assert engine.check_action(state, EnterLetter("f")) == (False, "Input is full")
    assert engine.check_action(state, SubmitGuess()) == (False, "Word not in dictionary")
    assert engine.apply_with_reason(state, SubmitGuess()) == (state, "Word not in dictionary")

    won = GameState(target="house", phase=GamePhase.WON)
    assert engine.check_action(won, EnterLetter("a")) == (False, "Game is already over")
    assert engine.check_action(won, Reset()) == (True, "")


def test_dictionary_is_consulted_with_the_typed_word():
    checked = []

    def is_valid_word(word):
        checked.append(word)
        return True

    engine = GameEngine(is_valid_word, lambda: "crane")
    state = guess(engine, GameState.new("house"), "QuIZz")

    assert checked == ["quizz"]
    assert state.guess_words == ("quizz",)
