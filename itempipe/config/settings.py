from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_category_transitions: int = Field(default=16, ge=0)
    decompress_extensions: list[str] = Field(
        default_factory=lambda: [".jpg", ".json", ".zip"],
        min_length=1,
    )
    random_seed: int | None = None

    batch_max_workers: int = Field(default=1, ge=1)

    acquisition_read_payload: bool = False
    files_root: str = "."
    http_timeout_seconds: int = 30

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level
