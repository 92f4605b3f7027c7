"""
Package configuration.

Settings loaded from environment variables, used to set up logging. Rendering
itself never reads configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class PodfeedSettings(BaseSettings):
    """
    Podfeed settings from environment variables.

    All settings are prefixed with PODFEED_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="PODFEED_",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# Global instance
settings = PodfeedSettings()
