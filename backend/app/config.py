from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

from app.services.match_service import DEFAULT_STOP_WORDS, TokenizerConfig


class Settings(BaseSettings):
    data_path: Path = Path.home() / "ResumeMatch"
    # Reject oversized payloads before tokenizing or extracting anything.
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MiB
    max_text_chars: int = 200_000
    # Tokenizer tuning; the defaults reproduce the classic keyword matcher.
    min_token_length: int = 3
    stop_words: list[str] = sorted(DEFAULT_STOP_WORDS)
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def db_path(self) -> Path:
        return self.data_path / "db.sqlite"

    def tokenizer_config(self) -> TokenizerConfig:
        return TokenizerConfig(
            stop_words=frozenset(self.stop_words),
            min_token_length=self.min_token_length,
        )

    model_config = {"env_prefix": "RESUMEMATCH_"}


settings = Settings()
