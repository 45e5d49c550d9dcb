"""
Word Source

Picks target words for new games.
"""

import random
from typing import List, Optional, Sequence

from ..config.game_settings import WORD_LIST


class WordSource:
    """Uniform random choice over a fixed answer list, deterministic when seeded."""

    def __init__(self, words: Sequence[str] = WORD_LIST, seed: Optional[int] = None):
        if not words:
            raise ValueError("Word list cannot be empty")

        self._words: List[str] = [word.lower() for word in words]
        self._rng = random.Random(seed)
        self._seed = seed

    def set_seed(self, seed: Optional[int]) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    def random_word(self) -> str:
        return self._rng.choice(self._words)

    def __len__(self) -> int:
        return len(self._words)
