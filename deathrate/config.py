"""Configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Downsampling settings."""

    # Fixed output sizes used by chart call sites
    default_threshold: int = 25
    wide_threshold: int = 55

    # Derive the threshold from series length instead of default_threshold
    dynamic_threshold: bool = True

    # Series length -> threshold scale
    scale_domain_min: float = 0.0
    scale_domain_max: float = 500.0
    scale_range_min: float = 6.0
    scale_range_max: float = 25.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="DEATHRATE_",
    )


# Global settings instance
settings = Settings()
