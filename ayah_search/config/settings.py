"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings


class LafazWeights(BaseModel):
    """Tuning constants for the transliteration scorer."""

    exact_match: float = Field(default=50.0)
    substring: float = Field(default=35.0)
    substring_prefix: float = Field(default=5.0)
    reverse_substring: float = Field(default=20.0)

    skeleton_exact: float = Field(default=25.0)
    skeleton_substring: float = Field(default=15.0)
    skeleton_prefix: float = Field(default=3.0)
    skeleton_reverse: float = Field(default=10.0)

    edit_distance: float = Field(default=20.0)
    edit_distance_max_length_ratio: float = Field(default=3.0)

    length_bonus: float = Field(default=10.0)
    length_bonus_max_diff: float = Field(default=0.5)
    length_penalty: float = Field(default=5.0)
    length_penalty_min_diff: float = Field(default=2.0)


class MaknaWeights(BaseModel):
    """Tuning constants for the translation scorer."""

    token_match: float = Field(default=10.0)
    min_token_length: int = Field(default=3)
    phrase_match: float = Field(default=20.0)

    # Shorter translations get up to `length_bonus` extra points
    length_bonus: float = Field(default=5.0)
    length_bonus_span: int = Field(default=200)

    fuzzy_exact: float = Field(default=80.0)
    fuzzy_typo: float = Field(default=60.0)
    max_typo_distance: int = Field(default=1)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Ayah Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Corpus
    corpus_path: str = Field(default="")  # empty -> bundled sample corpus
    enable_cache: bool = Field(default=True)

    # Search Configuration
    default_limit: int = Field(default=50)
    max_limit: int = Field(default=200)
    min_query_length: int = Field(default=2)
    max_query_length: int = Field(default=200)

    # Candidate caps trade recall for scoring cost
    lafaz_candidate_cap: int = Field(default=200)
    makna_candidate_cap: int = Field(default=300)
    lafaz_fuzzy_fallback: bool = Field(default=False)  # opt-in full-corpus scan
    lafaz_fallback_threshold: float = Field(default=0.8)

    lafaz_weights: LafazWeights = Field(default_factory=LafazWeights)
    makna_weights: MaknaWeights = Field(default_factory=MaknaWeights)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
