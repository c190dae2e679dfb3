"""Configuration management using pydantic-settings.

Loads from environment variables and .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes:
        source_dir: Directory scanned by the CLI to build a file collection.
        matcher_type: Pattern matcher backend (default: glob).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Output logs in JSON format for production.
        log_file: Optional file to also write logs to.

    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Build input
    source_dir: str = "./src"

    # Matching
    matcher_type: str = "glob"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None

    @property
    def source_path(self) -> Path:
        """Return the source directory as a Path object.

        Returns:
            Path: Path to the source directory.

        """
        return Path(self.source_dir)


# Global settings instance
settings = Settings()
