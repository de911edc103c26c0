"""Exceptions raised by the word scramble game."""


class WordScrambleError(Exception):
    """Base class for all game errors."""


class WordListUnavailableError(WordScrambleError):
    """The list of root words could not be read at all."""


class RoundNotStartedError(WordScrambleError):
    """A word was submitted before any round was started."""
