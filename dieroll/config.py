from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DIEROLL_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Fixed seed for reproducible rolls. Unset draws from OS entropy.
    seed: int | None = None

    # Level handed to logging.basicConfig by the CLI. Logs go to stderr.
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def load_settings() -> Settings:
    """Read settings from the environment and ``.env``.

    Raises:
        pydantic.ValidationError: If a ``DIEROLL_*`` value is invalid.
    """
    return Settings()
