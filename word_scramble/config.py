"""Configuration for the word scramble game.

Settings are read from ``WORD_SCRAMBLE_*`` environment variables and an
optional ``.env`` file in the working directory. Environment variables take
precedence over the file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from word_scramble.validator import MIN_WORD_LENGTH

DEFAULT_ROOT_WORD = "silkworm"


class Settings(BaseSettings):
    """Game settings.

    Attributes:
        start_words_file: Path to a custom root word list. None uses the bundled list.
        default_root_word: Root word used when the word list is empty.
        min_word_length: Shortest word that counts as a real word. Never below 3.
        language: Language code passed to the spell checker.
        dictionary_backend: Which spell checker decides whether a word is real.
        min_zipf: Minimum wordfreq Zipf frequency for the offline backend.
        mw_collegiate_api_key: Merriam-Webster Collegiate API key.
        cache_dir: Directory for the HTTP cache of dictionary lookups.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORD_SCRAMBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    start_words_file: str | None = None
    default_root_word: str = DEFAULT_ROOT_WORD
    min_word_length: int = Field(default=MIN_WORD_LENGTH, ge=MIN_WORD_LENGTH)
    language: str = "en"
    dictionary_backend: Literal["offline", "merriam-webster"] = "offline"
    min_zipf: float = Field(default=1.0, ge=0.0)
    mw_collegiate_api_key: str | None = None
    cache_dir: str = ".cache/"

    @field_validator("start_words_file", "mw_collegiate_api_key")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        """Strip optional strings and treat blank values as unset."""
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("default_root_word")
    @classmethod
    def normalize_root_word(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            msg = "default_root_word cannot be empty"
            raise ValueError(msg)
        return value

    @field_validator("language")
    @classmethod
    def normalize_language(cls, value: str) -> str:
        return value.strip().lower()

    @model_validator(mode="after")
    def check_merriam_webster_backend(self) -> "Settings":
        if self.dictionary_backend != "merriam-webster":
            return self
        if not self.mw_collegiate_api_key:
            msg = "mw_collegiate_api_key is required when dictionary_backend is 'merriam-webster'"
            raise ValueError(msg)
        if self.language != "en":
            msg = f"The merriam-webster backend only supports language 'en', got '{self.language}'"
            raise ValueError(msg)
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()
