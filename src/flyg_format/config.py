"""Runtime configuration for flyg-format."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="FLYG_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    compression_enabled: bool = Field(
        default=True,
        description="Decode files with the compressed extension through gzip.",
    )


settings = Settings()
