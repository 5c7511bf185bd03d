"""Resolver configuration read from the environment."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dynamic_json.matching import DEFAULT_MAX_DISTANCE

MatchLogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ResolverSettings(BaseSettings):
    """Fuzzy matching threshold and diagnostic reporting switches."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    max_fuzzy_distance: int = Field(
        default=DEFAULT_MAX_DISTANCE, ge=0, alias="DYNAMIC_JSON_MAX_FUZZY_DISTANCE"
    )
    report_matches: bool = Field(default=False, alias="DYNAMIC_JSON_REPORT_MATCHES")
    match_log_level: MatchLogLevel = Field(default="WARNING", alias="DYNAMIC_JSON_MATCH_LOG_LEVEL")


def load_resolver_settings() -> ResolverSettings:
    return ResolverSettings()


__all__ = ["MatchLogLevel", "ResolverSettings", "load_resolver_settings"]
