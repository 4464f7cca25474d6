from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edaitorial.platform import prompts


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "edAItorial"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = False

    # ── Logging ─────────────────────────────────
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # ── Analysis ────────────────────────────────
    USE_AI: bool = True
    # Empty list means every registered checker is enabled
    ENABLED_CHECKERS: List[str] = []
    RULE_BASED_CHECKERS: bool = False
    MIN_TITLE_LENGTH: int = 30
    MAX_TITLE_LENGTH: int = 60
    MIN_WORD_COUNT: int = 300
    AVAILABLE_NODES_LIMIT: int = 100
    ANALYSIS_DEADLINE: Optional[float] = None  # seconds, whole pipeline

    # ── Prompt templates ────────────────────────
    BATCH_ANALYSIS_PROMPT: str = prompts.BATCH_ANALYSIS_PROMPT
    SEO_PROMPT: str = prompts.SEO_PROMPT
    BROKEN_LINKS_PROMPT: str = prompts.BROKEN_LINKS_PROMPT
    ACCESSIBILITY_PROMPT: str = prompts.ACCESSIBILITY_PROMPT
    TYPOS_PROMPT: str = prompts.TYPOS_PROMPT
    SUGGESTIONS_PROMPT: str = prompts.SUGGESTIONS_PROMPT

    # ── Quality gate ────────────────────────────
    ENABLE_QUALITY_GATE: bool = True
    MIN_SCORE: int = Field(default=80, ge=0, le=100)
    BLOCK_PUBLISHING_BELOW_THRESHOLD: bool = True
    ENABLED_CONTENT_TYPES: List[str] = ["article", "page"]

    # ── Determinism cache ───────────────────────
    CACHE_ANALYSIS_RESULTS: bool = True
    CACHE_TTL: int = Field(default=3600, ge=0)
    CACHE_KEY_PREFIX: str = "edaitorial:analysis:"
    REDIS_URL: Optional[str] = None

    # ── LLM backend (OpenAI-compatible) ─────────
    LLM_BASE_URL: str = "https://openrouter.ai/api/v1"
    LLM_API_KEY: Optional[str] = None
    LLM_MODEL: str = "mistralai/mistral-large"
    LLM_TEMPERATURE: float = 0.3
    LLM_TIMEOUT: float = 30.0
    LLM_MAX_RETRIES: int = 1
    LLM_REFERER: str = "https://edaitorial.local"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
