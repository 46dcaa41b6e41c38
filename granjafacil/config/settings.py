from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from granjafacil.domain.value_objects.alert import AlertRegenerationPolicy


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./granjafacil.db"
    log_level: str = "INFO"
    environment: str = "dev"
    # CORS
    cors_allow_origins: str = "*"
    # Calendar / scheduling
    timezone_name: str = "America/Sao_Paulo"
    vaccine_match_tolerance_days: int = 3
    alert_regeneration_policy: AlertRegenerationPolicy = AlertRegenerationPolicy.REPLACE
    # Egg production
    laying_target_pct: int = 85
    # Seed breed presets on startup when the table is empty
    seed_presets_on_startup: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_async_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        if value.startswith("sqlite://") and "+" not in value.split("://", 1)[0]:
            return value.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return value

    @field_validator("vaccine_match_tolerance_days")
    @classmethod
    def ensure_non_negative_tolerance(cls, value: int) -> int:
        if value < 0:
            raise ValueError("vaccine_match_tolerance_days must be >= 0")
        return value

    @field_validator("laying_target_pct")
    @classmethod
    def ensure_target_range(cls, value: int) -> int:
        if not 1 <= value <= 100:
            raise ValueError("laying_target_pct must be between 1 and 100")
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
