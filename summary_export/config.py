from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")
    metric_key_prefix: str = Field(default="", alias="METRIC_KEY_PREFIX")
    default_dimensions: dict[str, str] = Field(default_factory=dict, alias="DEFAULT_DIMENSIONS")

    def prefixed(self, metric_key: str) -> str:
        if not self.metric_key_prefix:
            return metric_key
        return f"{self.metric_key_prefix.rstrip('.')}.{metric_key}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
