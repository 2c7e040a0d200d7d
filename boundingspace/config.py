"""Package configuration."""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from BOUNDINGSPACE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='boundingspace_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    # dtype of region classes built without an explicit one
    default_dtype: str = 'float64'

    # Logging
    log_level: str = 'warning'


settings = Settings()


def setup_logging():
    """Configure logging for scripts using the package."""
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
