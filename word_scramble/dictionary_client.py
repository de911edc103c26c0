"""Spell checkers that decide whether a word exists.

The game does not ship a dictionary of its own. It asks a spell checker
"is this word correctly spelled in language X". Two backends are provided:

- ``OfflineSpellChecker`` works offline: pyspellchecker decides which words
  exist and wordfreq frequencies filter out obscure ones.
- ``MerriamWebsterSpellChecker`` asks the Merriam-Webster Collegiate
  Dictionary API, with responses cached by requests-cache.
"""

import time
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import requests
import spellchecker
from loguru import logger
from requests_cache import CachedSession
from wordfreq import zipf_frequency

if TYPE_CHECKING:
    from word_scramble.config import Settings


@runtime_checkable
class SpellChecker(Protocol):
    """Anything that can tell whether a word is spelled correctly."""

    def is_correctly_spelled(self, word: str, language: str) -> bool: ...


class OfflineSpellChecker:
    """Spell checker that works without network access.

    A word is correctly spelled when it is purely alphabetic, appears in the
    pyspellchecker dictionary for the language, and wordfreq gives it a Zipf
    frequency of at least ``min_zipf``. Dictionary membership decides what a
    word is; the frequency threshold only drops obscure entries.

    Attributes:
        min_zipf: Minimum Zipf frequency for a dictionary word to count as real
    """

    def __init__(self, min_zipf: float = 1.0):
        if min_zipf < 0:
            msg = "min_zipf cannot be negative"
            logger.error(msg)
            raise ValueError(msg)
        self.min_zipf = min_zipf
        self._dictionaries: dict[str, spellchecker.SpellChecker] = {}

    def load_language(self, language: str) -> spellchecker.SpellChecker:
        """Load (once) the dictionary for a language.

        Raises:
            ValueError: If pyspellchecker has no dictionary for the language
        """
        if language not in self._dictionaries:
            logger.debug(f"Loading '{language}' dictionary")
            self._dictionaries[language] = spellchecker.SpellChecker(language=language)
        return self._dictionaries[language]

    def is_correctly_spelled(self, word: str, language: str) -> bool:
        if not word or not word.isalpha():
            return False

        if word not in self.load_language(language):
            logger.debug(f"'{word}' is not in the '{language}' dictionary")
            return False

        frequency = zipf_frequency(word, language)
        known = frequency >= self.min_zipf
        logger.debug(f"wordfreq zipf for '{word}' ({language}): {frequency} -> {known}")
        return known


class MerriamWebsterSpellChecker:
    """Spell checker backed by the Merriam-Webster Collegiate Dictionary API.

    When the API does not know a word it answers with a list of suggested
    spellings (plain strings) instead of entries, which is how misspellings
    are detected. Lookups go through a cached session so repeated guesses do
    not hit the network, and timeouts are retried with exponential backoff.

    Attributes:
        api_key: Merriam-Webster Collegiate API key
        session: Cached HTTP session for making requests
    """

    BASE_URL = "https://dictionaryapi.com/api/v3/references/collegiate/json"
    SUPPORTED_LANGUAGES = ("en",)
    MAX_RETRIES = 3
    RETRY_DELAY = 2  # seconds

    def __init__(self, api_key: str, session: CachedSession):
        """Initialize the Merriam-Webster spell checker.

        Args:
            api_key: Merriam-Webster Collegiate Dictionary API key
            session: CachedSession instance for making HTTP requests

        Raises:
            ValueError: If api_key is empty or whitespace-only
        """
        if not api_key or not api_key.strip():
            msg = "API key cannot be empty"
            logger.error(msg)
            raise ValueError(msg)

        self.api_key = api_key.strip()
        self.session = session
        logger.debug(f"Initialized MerriamWebsterSpellChecker with API key: {self.api_key[:8]}...")

    def is_correctly_spelled(self, word: str, language: str) -> bool:
        """Check a word against the dictionary.

        Raises:
            ValueError: If the language is not English
            requests.Timeout: If all retries fail due to timeout
            requests.HTTPError: If the API returns an error status
        """
        if language not in self.SUPPORTED_LANGUAGES:
            msg = f"Merriam-Webster only supports {self.SUPPORTED_LANGUAGES}, got '{language}'"
            logger.error(msg)
            raise ValueError(msg)

        if not word or not word.strip():
            return False

        entries = self.get_entries(word.strip().lower())
        if not entries:
            return False
        return any(self._entry_matches(entry, word.strip().lower()) for entry in entries)

    def get_entries(self, word: str) -> list[dict]:
        """Fetch dictionary entries for a word.

        Returns:
            The list of entry dicts, or an empty list when the API only has
            spelling suggestions for the word
        """
        url = f"{self.BASE_URL}/{word}"
        params = {"key": self.api_key}

        for attempt in range(self.MAX_RETRIES):
            try:
                logger.debug(
                    f"Looking up '{word}' (attempt {attempt + 1}/{self.MAX_RETRIES})"
                )
                response = self.session.get(url, params=params, timeout=10)
                response.raise_for_status()
                data = response.json()

                if not data or isinstance(data[0], str):
                    logger.info(f"'{word}' not found in dictionary. Suggestions: {data}")
                    return []

                logger.debug(f"Found {len(data)} entries for '{word}'")
                return data

            except requests.Timeout:
                if attempt < self.MAX_RETRIES - 1:
                    delay = self.RETRY_DELAY * (2**attempt)
                    logger.warning(
                        f"Timeout looking up '{word}' on attempt {attempt + 1}, "
                        f"retrying in {delay}s..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(f"Failed to look up '{word}' after {self.MAX_RETRIES} attempts")
                    raise

            except requests.HTTPError:
                logger.exception(f"HTTP error looking up '{word}'")
                raise
        return []

    @staticmethod
    def _entry_matches(entry: dict, word: str) -> bool:
        # Entry ids look like "silk:1" for homographs
        meta = entry.get("meta", {})
        headword = str(meta.get("id", "")).split(":", 1)[0].lower()
        stems = [str(stem).lower() for stem in meta.get("stems", [])]
        return word == headword or word in stems


def create_spell_checker(
    settings: "Settings", session: CachedSession | None = None
) -> SpellChecker:
    """Build the spell checker selected by the settings.

    Args:
        settings: Game settings
        session: Cached session for the HTTP backend. Created from the
            settings' cache directory when omitted.

    Raises:
        ValueError: If the offline backend has no dictionary for the language
    """
    if settings.dictionary_backend == "merriam-webster":
        if session is None:
            from word_scramble.cache_manager import create_cached_session

            session = create_cached_session(settings.cache_dir)
        logger.debug("Using Merriam-Webster spell checker")
        return MerriamWebsterSpellChecker(settings.mw_collegiate_api_key or "", session)

    logger.debug(f"Using offline spell checker (min zipf {settings.min_zipf})")
    checker = OfflineSpellChecker(min_zipf=settings.min_zipf)
    checker.load_language(settings.language)
    return checker
