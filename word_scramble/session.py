"""Game session: root word, accepted words and score for one round.

The session owns its state and never hands out mutable fields. Every
operation returns an outcome carrying a fresh ``GameSnapshot`` that a
front end can render from.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from word_scramble import validator
from word_scramble.config import DEFAULT_ROOT_WORD
from word_scramble.dictionary_client import SpellChecker
from word_scramble.exceptions import RoundNotStartedError


class RejectionReason(Enum):
    """Why a candidate was rejected, with the text shown to the player."""

    NOT_ORIGINAL = ("Word used already", "Be more original")
    NOT_POSSIBLE = ("Word not possible", "You can't spell that word from '{root_word}'!")
    NOT_REAL = ("Word not recognized", "You can't just make them up, you know!")

    def __init__(self, title: str, message: str):
        self.title = title
        self.message_template = message

    def message(self, root_word: str) -> str:
        return self.message_template.format(root_word=root_word)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a round."""

    root_word: str
    used_words: tuple[str, ...] = ()
    score: int = 0


@dataclass(frozen=True)
class RoundStarted:
    root_word: str
    snapshot: GameSnapshot


@dataclass(frozen=True)
class Accepted:
    word: str
    score: int
    snapshot: GameSnapshot


@dataclass(frozen=True)
class Rejected:
    word: str
    reason: RejectionReason
    title: str
    message: str
    score: int
    snapshot: GameSnapshot


SubmissionResult = Accepted | Rejected


def normalize(raw: str) -> str:
    """Lowercase a candidate and strip surrounding whitespace."""
    return raw.lower().strip()


class GameSession:
    """A single player's game.

    Args:
        spell_checker: Dictionary collaborator used by the realness check
        language: Language code passed to the spell checker
        min_word_length: Shortest word that counts as real, at least 3
        default_root_word: Root word used when the word list is empty
        rng: Random source for picking root words

    Example:
        >>> session = GameSession(spell_checker)
        >>> session.start_round(["silkworm"]).root_word
        'silkworm'
        >>> session.submit("silk").score
        4
    """

    def __init__(
        self,
        spell_checker: SpellChecker,
        language: str = "en",
        min_word_length: int = validator.MIN_WORD_LENGTH,
        default_root_word: str = DEFAULT_ROOT_WORD,
        rng: random.Random | None = None,
    ):
        if min_word_length < validator.MIN_WORD_LENGTH:
            msg = f"min_word_length cannot be below {validator.MIN_WORD_LENGTH}"
            logger.error(msg)
            raise ValueError(msg)

        self.spell_checker = spell_checker
        self.language = language
        self.min_word_length = min_word_length
        self.default_root_word = normalize(default_root_word)
        self._rng = rng or random.Random()
        self._root_word: str | None = None
        self._used_words: list[str] = []
        self._score = 0

    @property
    def snapshot(self) -> GameSnapshot:
        """Current state of the round.

        Raises:
            RoundNotStartedError: If no round has been started yet
        """
        if self._root_word is None:
            msg = "No round has been started"
            raise RoundNotStartedError(msg)
        return GameSnapshot(self._root_word, tuple(self._used_words), self._score)

    @property
    def has_started(self) -> bool:
        return self._root_word is not None

    def start_round(self, word_list: Sequence[str]) -> RoundStarted:
        """Pick a new root word and reset the accepted words and score.

        Blank entries in ``word_list`` are ignored. When nothing is left the
        default root word is used.
        """
        candidates = [normalize(word) for word in word_list if word.strip()]
        if candidates:
            root_word = self._rng.choice(candidates)
        else:
            logger.warning(
                f"Word list is empty, falling back to default root word '{self.default_root_word}'"
            )
            root_word = self.default_root_word

        self._root_word = root_word
        self._used_words = []
        self._score = 0

        logger.info(f"New round started with root word '{root_word}'")
        return RoundStarted(root_word=root_word, snapshot=self.snapshot)

    def submit(self, raw: str) -> SubmissionResult | None:
        """Validate a candidate word and update the score.

        Checks run in a fixed order: originality, then feasibility, then
        realness. The first failing check decides the rejection reason and
        later checks are skipped. Empty input is ignored and returns None.

        Raises:
            RoundNotStartedError: If no round has been started yet
        """
        if self._root_word is None:
            msg = "Start a round before submitting words"
            raise RoundNotStartedError(msg)

        word = normalize(raw)
        if not word:
            logger.debug("Ignoring empty submission")
            return None

        reason = self._first_failure(word)
        if reason is not None:
            self._score -= len(word)
            logger.info(f"Rejected '{word}' ({reason.name}), score {self._score}")
            return Rejected(
                word=word,
                reason=reason,
                title=reason.title,
                message=reason.message(self._root_word),
                score=self._score,
                snapshot=self.snapshot,
            )

        self._used_words.insert(0, word)
        self._score += len(word)
        logger.info(f"Accepted '{word}', score {self._score}")
        return Accepted(word=word, score=self._score, snapshot=self.snapshot)

    def _first_failure(self, word: str) -> RejectionReason | None:
        if not validator.is_original(word, self._used_words):
            return RejectionReason.NOT_ORIGINAL
        if not validator.is_possible(word, self._root_word):
            return RejectionReason.NOT_POSSIBLE
        if not validator.is_real(
            word,
            self._root_word,
            self.spell_checker,
            language=self.language,
            min_length=self.min_word_length,
        ):
            return RejectionReason.NOT_REAL
        return None
