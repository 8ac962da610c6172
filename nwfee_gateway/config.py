"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Fee rules
    ruleset_path: str = "config/rules.yaml"
    strict_ruleset_validation: bool = False  # Reject inverted amount ranges instead of warning

    # Service
    service_name: str = "nwfee-gateway"
    log_level: str = "INFO"

    # Output
    fee_display_places: int = 4


settings = Settings()
