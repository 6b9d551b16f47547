"""
Configuration settings for the Debug Logging Benchmark.

Uses Pydantic Settings to load environment variables for logging and benchmark
defaults. CLI options override these values per run.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SWEEP: List[int] = [10, 100, 1_000, 10_000, 100_000, 1_000_000]


class Settings(BaseSettings):
    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    payload_log_level: Optional[str] = Field(None, alias="PAYLOAD_LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Benchmark defaults
    benchmark_dataset_size: int = Field(10_000, ge=0, alias="BENCHMARK_DATASET_SIZE")
    benchmark_sweep: List[int] = Field(
        default_factory=lambda: list(DEFAULT_SWEEP), alias="BENCHMARK_SWEEP"
    )
    benchmark_seed: Optional[int] = Field(None, alias="BENCHMARK_SEED")
    benchmark_profile_memory: bool = Field(False, alias="BENCHMARK_PROFILE_MEMORY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("benchmark_sweep")
    @classmethod
    def _positive_sweep(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("sweep must contain at least one repetition count")
        if any(count <= 0 for count in value):
            raise ValueError("sweep repetition counts must be positive")
        return value

    @field_validator("log_level", "payload_log_level")
    @classmethod
    def _known_level(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return value
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{value}'")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_SWEEP", "Settings", "get_settings"]
