from functools import lru_cache
from typing import Dict, List, Literal, Tuple
import os
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopsearch.domain.services.constants import (
    AUTOCOMPLETE_SUFFIXES,
    MAX_AUTOCOMPLETE_SUGGESTIONS,
    MAX_RECENT_SUGGESTIONS,
    MAX_TRENDING_SUGGESTIONS,
    PREFERRED_PRICE_BAND,
    RECENT_HISTORY_LIMIT,
)
from shopsearch.domain.services.synonyms import DEFAULT_SYNONYM_TABLE

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"


class SuggestionCaps(BaseModel):
    recent: int = Field(default=MAX_RECENT_SUGGESTIONS, ge=0)
    trending: int = Field(default=MAX_TRENDING_SUGGESTIONS, ge=0)
    auto_complete: int = Field(default=MAX_AUTOCOMPLETE_SUGGESTIONS, ge=0)

    model_config = {"frozen": True}


class EngineConfig(BaseModel):
    """
    Per-call options of the search engine.
    The engine never reads the environment; hosts build this from Settings
    (see Settings.engine_config) or construct it directly.
    """
    enable_text_scoring: bool = True
    synonym_table: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_SYNONYM_TABLE.items()}
    )
    suggestion_caps: SuggestionCaps = Field(default_factory=SuggestionCaps)
    autocomplete_suffixes: List[str] = Field(default_factory=lambda: list(AUTOCOMPLETE_SUFFIXES))
    preferred_price_band: Tuple[float, float] = PREFERRED_PRICE_BAND
    history_limit: int = Field(default=RECENT_HISTORY_LIMIT, ge=1)

    model_config = {"frozen": True}  # immuable = safe

    @model_validator(mode="after")
    def _check_band(self):
        low, high = self.preferred_price_band
        if low > high:
            raise ValueError(f"preferred_price_band low bound {low} is above high bound {high}")
        return self


class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    DEBUG: bool = False

    # Engine defaults
    SEARCH_ENABLE_TEXT_SCORING: bool = True
    SEARCH_MAX_RECENT: int = MAX_RECENT_SUGGESTIONS
    SEARCH_MAX_TRENDING: int = MAX_TRENDING_SUGGESTIONS
    SEARCH_MAX_AUTOCOMPLETE: int = MAX_AUTOCOMPLETE_SUGGESTIONS
    SEARCH_HISTORY_LIMIT: int = RECENT_HISTORY_LIMIT

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            enable_text_scoring=self.SEARCH_ENABLE_TEXT_SCORING,
            suggestion_caps=SuggestionCaps(
                recent=self.SEARCH_MAX_RECENT,
                trending=self.SEARCH_MAX_TRENDING,
                auto_complete=self.SEARCH_MAX_AUTOCOMPLETE,
            ),
            history_limit=self.SEARCH_HISTORY_LIMIT,
        )

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cached so hosts can call it on every request.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
