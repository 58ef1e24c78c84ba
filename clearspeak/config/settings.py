from __future__ import annotations

import functools
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # App / env
    app_env: str = Field("dev", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Remote enhancer
    enhancer_calls_enabled: int = Field(1, alias="ENHANCER_CALLS_ENABLED")
    enhancer_provider: str = Field("none", alias="ENHANCER_PROVIDER")
    enhancer_api_key: Optional[str] = Field(None, alias="ENHANCER_API_KEY")
    enhancer_base_url: Optional[str] = Field(None, alias="ENHANCER_BASE_URL")
    enhancer_model: str = Field("gpt-4o-mini", alias="ENHANCER_MODEL")
    enhancer_language: str = Field("en", alias="ENHANCER_LANGUAGE")
    enhancer_temperature: float = Field(0.7, alias="ENHANCER_TEMPERATURE")
    enhancer_max_tokens: int = Field(256, alias="ENHANCER_MAX_TOKENS")
    enhancer_timeout_seconds: int = Field(30, alias="ENHANCER_TIMEOUT_SECONDS")
    enhancer_connect_timeout_seconds: int = Field(10, alias="ENHANCER_CONNECT_TIMEOUT_SECONDS")
    enhancer_circuit_breaker_failures: int = Field(5, alias="ENHANCER_CIRCUIT_BREAKER_FAILURES")
    enhancer_circuit_breaker_window_seconds: int = Field(60, alias="ENHANCER_CIRCUIT_BREAKER_WINDOW_SECONDS")
    enhancer_circuit_breaker_open_seconds: int = Field(120, alias="ENHANCER_CIRCUIT_BREAKER_OPEN_SECONDS")

    # Matching and ranking
    match_distance_tolerance: float = Field(0.4, alias="MATCH_DISTANCE_TOLERANCE")
    match_min_chars: int = Field(2, alias="MATCH_MIN_CHARS")
    direct_match_confidence: float = Field(0.7, alias="DIRECT_MATCH_CONFIDENCE")
    suggestion_limit: int = Field(5, alias="SUGGESTION_LIMIT")

    @field_validator(
        "enhancer_calls_enabled",
        "enhancer_max_tokens",
        "enhancer_timeout_seconds",
        "enhancer_connect_timeout_seconds",
        "enhancer_circuit_breaker_failures",
        "enhancer_circuit_breaker_window_seconds",
        "enhancer_circuit_breaker_open_seconds",
        "match_min_chars",
        "suggestion_limit",
    )
    @classmethod
    def clamp_non_negative(cls, v: int) -> int:
        return max(0, v)

    @field_validator("match_distance_tolerance", "direct_match_confidence")
    @classmethod
    def clamp_unit_interval(cls, v: float) -> float:
        return max(0.0, min(1.0, v))

    @field_validator("app_env", "enhancer_provider")
    @classmethod
    def normalize_lower(cls, v: str) -> str:
        return (v or "").strip().lower()

    @property
    def enhancer_enabled(self) -> bool:
        return self.enhancer_calls_enabled != 0 and self.enhancer_provider != "none"


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def settings_public_summary(settings: Settings) -> Dict[str, Any]:
    """Loggable view of the settings; secrets are reduced to presence flags."""
    return {
        "env": settings.app_env,
        "enhancer_provider": settings.enhancer_provider,
        "enhancer_model": settings.enhancer_model,
        "enhancer_enabled": settings.enhancer_enabled,
        "enhancer_api_key_present": bool(settings.enhancer_api_key),
        "enhancer_base_url_present": bool(settings.enhancer_base_url),
        "timeouts": {
            "request": settings.enhancer_timeout_seconds,
            "connect": settings.enhancer_connect_timeout_seconds,
        },
        "match_distance_tolerance": settings.match_distance_tolerance,
        "direct_match_confidence": settings.direct_match_confidence,
    }


__all__ = ["Settings", "get_settings", "settings_public_summary"]
