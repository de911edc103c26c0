"""Word List Manager for loading candidate root words.

Root words come from a plain text file with one word per line and no header,
either supplied by the player or bundled with the package.
"""

import re
from importlib import resources
from pathlib import Path

from loguru import logger

from word_scramble.exceptions import WordListUnavailableError

BUNDLED_PACKAGE = "word_scramble.resources"
BUNDLED_FILE = "start.txt"


class WordListManager:
    """Loads and cleans lists of root words."""

    # Root words are single words made only of letters
    WORD_PATTERN = re.compile(r"^[^\W\d_]+$")

    def load_from_file(self, file_path: str) -> list[str]:
        """Load root words from a text file.

        Each line is stripped and lowercased, blank lines are skipped and the
        remaining lines must contain letters only.

        Args:
            file_path: Path to the word list file

        Returns:
            List of words in file order

        Raises:
            WordListUnavailableError: If the file does not exist or cannot be read
            ValueError: If a line is not a single word

        Example:
            >>> manager = WordListManager()
            >>> manager.load_from_file("start.txt")
            ['silkworm', 'abdicate', 'handbook']
        """
        path = Path(file_path)

        if not path.is_file():
            error_msg = f"Word list file not found: {file_path}"
            logger.error(error_msg)
            raise WordListUnavailableError(error_msg)

        logger.info(f"Loading word list from: {file_path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.exception(f"Failed to read word list: {file_path}")
            error_msg = f"Could not read word list {file_path}: {e}"
            raise WordListUnavailableError(error_msg) from e

        words = self.parse(text, source=str(file_path))
        logger.info(f"Loaded {len(words)} words from {file_path}")
        return words

    def load_bundled(self) -> list[str]:
        """Load the root word list shipped inside the package.

        Raises:
            WordListUnavailableError: If the bundled resource is missing
        """
        logger.debug(f"Loading bundled word list {BUNDLED_PACKAGE}/{BUNDLED_FILE}")
        try:
            text = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_FILE).read_text(
                encoding="utf-8"
            )
        except (FileNotFoundError, ModuleNotFoundError) as e:
            error_msg = f"Could not load {BUNDLED_FILE} from the package"
            logger.error(error_msg)
            raise WordListUnavailableError(error_msg) from e

        words = self.parse(text, source=BUNDLED_FILE)
        logger.info(f"Loaded {len(words)} bundled root words")
        return words

    def parse(self, text: str, source: str = "<string>") -> list[str]:
        """Split newline-delimited text into normalized words.

        Raises:
            ValueError: If a non-blank line is not a single word
        """
        words = []
        for line_num, line in enumerate(text.splitlines(), start=1):
            word = line.strip().lower()
            if not word:
                continue

            if not self.WORD_PATTERN.match(word):
                error_msg = (
                    f"Invalid word format in {source} at line {line_num}: '{word}'. "
                    f"Root words must contain only letters."
                )
                logger.error(error_msg)
                raise ValueError(error_msg)

            words.append(word)
        return words

    def remove_duplicates(self, words: list[str]) -> list[str]:
        """Remove duplicate words while preserving first-occurrence order."""
        unique_words = list(dict.fromkeys(words))
        duplicates_removed = len(words) - len(unique_words)

        if duplicates_removed > 0:
            logger.info(
                f"Removed {duplicates_removed} duplicate word(s). Unique words: {len(unique_words)}"
            )
        else:
            logger.debug("No duplicates found in word list")

        return unique_words
