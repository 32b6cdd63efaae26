from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from random_server.observability.logging import parse_log_level


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    random_error_rate: float = Field(default=0.1, ge=0.0, le=1.0, alias="RANDOM_ERROR_RATE")
    log_level: str = Field(default="error", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, ge=1, le=65535, alias="PORT")
    metrics_enabled: bool = Field(default=False, alias="METRICS_ENABLED")
    metrics_port: int = Field(default=8081, ge=1, le=65535, alias="METRICS_PORT")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        parse_log_level(value)
        return value.lower()

    @model_validator(mode="after")
    def _distinct_ports(self) -> "Settings":
        if self.metrics_enabled and self.metrics_port == self.port:
            raise ValueError("METRICS_PORT must differ from PORT when metrics are enabled")
        return self

    @property
    def log_level_number(self) -> int:
        return parse_log_level(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
