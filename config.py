"""
Configuration settings for the coursepack loader.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with a COURSEPACK_-prefixed environment variable,
e.g. COURSEPACK_MAX_MODULES=20.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COURSEPACK_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    content_root: str = Field(
        default="data",
        description="Directory scanned for lesson and quiz files",
    )
    max_file_bytes: int = Field(
        default=512 * 1024,
        description="Files larger than this are skipped as oversized",
    )

    # ========================================
    # Capacities (defaults match the device loader)
    # ========================================
    max_modules: int = Field(
        default=10,
        description="Maximum number of modules kept in the curriculum",
    )
    max_lessons: int = Field(
        default=10,
        description="Maximum lessons per module",
    )
    max_quiz_questions: int = Field(
        default=50,
        description="Maximum quiz questions per module",
    )

    # ========================================
    # Parsing
    # ========================================
    quiz_lookahead: int = Field(
        default=500,
        description="Characters after a question body searched for options and the answer marker",
    )
    fallback_module_id: str = Field(
        default="general",
        description="Module key for files without a '<module>_' prefix",
    )
    markdown_extensions: list[str] = Field(
        default_factory=lambda: ["extra"],
        description="Python-Markdown extensions used when rendering lessons",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def get_capacity_config(self) -> dict[str, int]:
        """Return the capacity limits used by the module aggregator."""
        return {
            "max_modules": self.max_modules,
            "max_lessons": self.max_lessons,
            "max_questions": self.max_quiz_questions,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
