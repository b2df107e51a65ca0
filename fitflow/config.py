"""
Configuration management for FitFlow.

Settings are read from environment variables (and a .env file in the
working directory) with defaults suitable for interactive use.
"""

from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .processors.interface import DecodeOptions

load_dotenv()


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="")

    level: str = Field(default="INFO", alias="FITFLOW_LOG_LEVEL")
    format: str = Field(default="console", alias="FITFLOW_LOG_FORMAT")
    file: Optional[str] = Field(default=None, alias="FITFLOW_LOG_FILE")
    structlog: bool = Field(default=True, alias="FITFLOW_STRUCTLOG")


class DecoderConfig(BaseSettings):
    """Default decode options."""

    model_config = SettingsConfigDict(env_prefix="")

    units: str = Field(default="metric", alias="FITFLOW_UNITS")
    pace: bool = Field(default=False, alias="FITFLOW_PACE")
    fix_data: str = Field(default="", alias="FITFLOW_FIX_DATA")
    data_every_second: bool = Field(default=False, alias="FITFLOW_DATA_EVERY_SECOND")
    garmin_timestamps: bool = Field(default=False, alias="FITFLOW_GARMIN_TIMESTAMPS")

    @field_validator('fix_data', mode='before')
    @classmethod
    def _join_fix_data(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ','.join(str(v) for v in value)
        return value

    @property
    def fix_data_list(self) -> List[str]:
        """FITFLOW_FIX_DATA split on commas"""
        return [part.strip() for part in self.fix_data.split(',') if part.strip()]

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a decode options mapping."""
        return {
            'units': self.units,
            'pace': self.pace,
            'fix_data': self.fix_data_list,
            'data_every_second': self.data_every_second,
            'garmin_timestamps': self.garmin_timestamps,
        }

    def to_options(self) -> DecodeOptions:
        """Build DecodeOptions; raises InvalidOptionError on bad values."""
        return DecodeOptions.parse(self.to_dict())


class Settings(BaseSettings):
    """Main settings combining all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore"
    )

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    decoder: DecoderConfig = Field(default_factory=DecoderConfig)

    @property
    def log_level(self) -> str:
        """DEBUG overrides the configured log level."""
        return "DEBUG" if self.debug else self.logging.level


def load_settings() -> Settings:
    """Read settings from the environment."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid FitFlow settings", {'errors': str(e)}) from e


# Global settings instance
settings = load_settings()


def reload_settings() -> Settings:
    """Re-read the environment into the global settings instance."""
    global settings
    settings = load_settings()
    return settings


def get_decoder_config() -> DecoderConfig:
    """Get decoder configuration."""
    return settings.decoder


def get_settings() -> Settings:
    """Get complete application settings."""
    return settings
