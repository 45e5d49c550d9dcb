"""
Game Configuration Constants Module

This module defines the game rules and the bundled word databases.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Final, List, Tuple

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in the target word and in every guess."""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"

# Virtual keyboard layout sent to clients
KEYBOARD_ROWS: Final[Tuple[str, ...]] = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))
ANSWERS_FILE = os.path.join(CONFIG_DIR, 'wordles.json')
DICTIONARY_FILE = os.path.join(CONFIG_DIR, 'dictionary.txt')


def is_well_formed(word: str) -> bool:
    """True if `word` is exactly WORD_LENGTH ASCII letters."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and word.isascii()
        and word.isalpha()
    )


# Load word list from JSON file
def _load_word_list(json_file_path: str = ANSWERS_FILE) -> List[str]:
    """
    Load the answer list from wordles.json.

    Returns:
        List[str]: List of lowercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [str(word).strip().lower() for word in word_list]

    for word in lowercase_words:
        if not is_well_formed(word):
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} alphabetic characters")

    return lowercase_words


def load_dictionary_words(path: str = DICTIONARY_FILE) -> List[str]:
    """
    Load a newline separated word list.

    Blank lines and lines starting with '#' are skipped, as are entries that
    are not five letters long. The result keeps first-seen order without
    duplicates.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    words: List[str] = []
    seen = set()
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip().lower()
            if not word or word.startswith('#'):
                continue
            if not is_well_formed(word) or word in seen:
                continue
            seen.add(word)
            words.append(word)
    return words


# Curated answer database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: List[str] = WORD_LIST) -> dict:
    """
    Analyzes word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
