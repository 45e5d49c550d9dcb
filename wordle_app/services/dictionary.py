"""
Dictionary Service

Answers "is this a real word?" for submitted guesses. Backed by a plain
word list; anything outside the vocabulary is rejected.
"""

from typing import Iterable, Optional, Set

from ..config.game_settings import DICTIONARY_FILE, WORD_LIST, is_well_formed, load_dictionary_words


class WordDictionary:
    """Case-insensitive set of allowed five-letter guesses."""

    def __init__(self, words: Iterable[str]):
        self._words: Set[str] = {word.strip().lower() for word in words if is_well_formed(word.strip())}
        if not self._words:
            raise ValueError("Dictionary cannot be empty")

    @classmethod
    def from_file(cls, path: str, extra_words: Optional[Iterable[str]] = None) -> "WordDictionary":
        """
        Build a dictionary from a newline separated word list.

        Args:
            path: Word list file
            extra_words: Additional words to accept, typically the answer list
        """
        words = load_dictionary_words(path)
        if extra_words is not None:
            words.extend(extra_words)
        return cls(words)

    @classmethod
    def default(cls) -> "WordDictionary":
        """The bundled allowed-guess list plus every possible answer."""
        return cls.from_file(DICTIONARY_FILE, extra_words=WORD_LIST)

    def is_valid_word(self, word: str) -> bool:
        if not word or not isinstance(word, str):
            return False
        return word.lower() in self._words

    def __contains__(self, word) -> bool:
        return self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)
