"""Rules that decide whether a candidate word is acceptable.

All three predicates expect candidates that are already normalized
(lowercased and stripped). They never touch game state; the session decides
the order in which they run.
"""

from collections.abc import Collection
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from word_scramble.dictionary_client import SpellChecker

MIN_WORD_LENGTH = 3


def is_original(candidate: str, used_words: Collection[str]) -> bool:
    """Return True if the candidate has not been accepted already this round."""
    return candidate not in used_words


def is_possible(candidate: str, root_word: str) -> bool:
    """Return True if the candidate can be spelled from the root word's letters.

    Each letter of the root word may be used once per occurrence. Matched
    letters are removed from a working copy of the root word so a letter
    cannot be reused.

    Example:
        >>> is_possible("silk", "silkworm")
        True
        >>> is_possible("sills", "silkworm")
        False
    """
    remaining = list(root_word)
    for letter in candidate:
        try:
            remaining.remove(letter)
        except ValueError:
            return False
    return True


def is_real(
    candidate: str,
    root_word: str,
    spell_checker: "SpellChecker",
    language: str = "en",
    min_length: int = MIN_WORD_LENGTH,
) -> bool:
    """Return True if the candidate counts as a real word.

    Words shorter than ``min_length`` and the root word itself never count,
    whatever the dictionary says. Everything else is up to the spell checker.

    Args:
        candidate: Normalized candidate word
        root_word: The current root word
        spell_checker: Dictionary collaborator that knows correct spellings
        language: Language code passed to the spell checker
        min_length: Shortest acceptable word. Values below 3 are raised to 3.

    Returns:
        True if the word is long enough, differs from the root word and is
        spelled correctly
    """
    min_length = max(min_length, MIN_WORD_LENGTH)
    if len(candidate) < min_length:
        logger.debug(f"'{candidate}' is shorter than {min_length} letters")
        return False

    if candidate == root_word:
        logger.debug(f"'{candidate}' is the root word itself")
        return False

    return spell_checker.is_correctly_spelled(candidate, language)
