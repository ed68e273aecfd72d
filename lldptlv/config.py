from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class CodecSettings(BaseSettings):
    log_level: str = Field("WARNING", validation_alias="LLDPTLV_LOG_LEVEL")
    log_ring_size: int = Field(200, ge=1, validation_alias="LLDPTLV_LOG_RING_SIZE")
    log_preview_bytes: int = Field(32, ge=0, validation_alias="LLDPTLV_LOG_PREVIEW_BYTES")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> CodecSettings:
    return CodecSettings()
