"""Configuration management using Pydantic Settings."""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tweet_studio.exceptions import ConfigError
from tweet_studio.models import DEFAULT_PREFERENCES, PreferenceOverrides, StylePreferences

# Load environment variables from .env file
load_dotenv()


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "info"


class GenerationConfig(BaseModel):
    """Tweet generation configuration."""

    defaults: PreferenceOverrides = Field(default_factory=PreferenceOverrides)
    seed: int | None = None  # Pins the call-to-action pick

    @property
    def preferences(self) -> StylePreferences:
        """Configured defaults merged over the built-in ones."""
        return self.defaults.apply(DEFAULT_PREFERENCES)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TWEET_STUDIO_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)


def _interpolate_env_vars(data: Any) -> Any:
    """Recursively interpolate ${VAR} patterns with environment variables."""
    if isinstance(data, str):
        if data.startswith("${") and data.endswith("}"):
            var_name = data[2:-1]
            return os.environ.get(var_name, "")
        return data
    elif isinstance(data, dict):
        return {k: _interpolate_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_interpolate_env_vars(item) for item in data]
    return data


def load_config(config_path: Path | None = None) -> Settings:
    """Load configuration from YAML file with env var interpolation."""
    if config_path is None:
        # Check current directory first, then home directory
        local_config = Path("config.yaml")
        if local_config.exists():
            config_path = local_config
        else:
            config_path = Path.home() / ".tweet-studio" / "config.yaml"

    if not config_path.exists():
        # Defaults, plus anything set through TWEET_STUDIO_ env vars
        config_data = {}
    else:
        try:
            with open(config_path) as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e

        config_data = _interpolate_env_vars(raw_config)

    try:
        return Settings(**config_data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings
