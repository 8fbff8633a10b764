"""
Configuration management for Calc Service.

Handles loading configuration from environment variables, YAML files,
and provides sensible defaults for all settings.
"""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calc_service.models import TokenizationMode


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "Calc Service"
    debug: bool = False
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    # Evaluator settings
    tokenization_mode: TokenizationMode = TokenizationMode.NUMBER
    min_expression_length: int = Field(3, ge=0)  # 1+1 is the shortest valid input


def load_yaml_config(path: Path) -> dict:
    """Load configuration from a YAML file."""
    import yaml

    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_settings(config_file: Path | None = None) -> Settings:
    """
    Build settings from the environment plus an optional YAML file.

    The file defaults to $CALC_CONFIG_FILE or ./calc.yaml; keys present in
    it take precedence over environment variables.
    """
    if config_file is None:
        config_file = Path(os.environ.get("CALC_CONFIG_FILE", "calc.yaml"))
    return Settings(**load_yaml_config(config_file))


# Global settings instance
settings = load_settings()
