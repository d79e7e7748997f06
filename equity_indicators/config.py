"""
Configuration for the indicator engine.
Default windows and log level, overridable through INDICATORS_* environment
variables or a .env file.
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, model_validator
import logging


class IndicatorSettings(BaseSettings):
    """Indicator defaults loaded from environment variables."""

    # RSI
    RSI_WINDOW: int = Field(14, ge=1, description="Default RSI window")

    # MACD
    MACD_SHORT_WINDOW: int = Field(12, ge=1, description="Fast EMA window")
    MACD_LONG_WINDOW: int = Field(26, ge=1, description="Slow EMA window")
    MACD_SIGNAL_WINDOW: int = Field(9, ge=1, description="Signal line EMA window")

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_prefix = "INDICATORS_"
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any standard logging level name, case-insensitively."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level

    @model_validator(mode='after')
    def validate_macd_windows(self) -> 'IndicatorSettings':
        if self.MACD_SHORT_WINDOW >= self.MACD_LONG_WINDOW:
            raise ValueError("MACD_SHORT_WINDOW must be smaller than MACD_LONG_WINDOW")
        return self


# Global settings instance
settings = IndicatorSettings()
