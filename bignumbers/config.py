"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
Default precisions are read at call time, so reload_config() takes effect immediately.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BigNumConfig(BaseSettings):
    """bignumbers runtime configuration"""

    # Arithmetic defaults
    division_precision: int = Field(40, ge=1)  # Significant digits kept by div / negative pow
    guard_digits: int = Field(5, ge=0)  # Extra digits carried before rounding a quotient

    # Formatting defaults
    significant_digits: int = Field(20, ge=1)  # to_string()
    fixed_digits: int = Field(20, ge=0)  # to_fixed()

    # Float conversion: "saturate" returns +/-inf, "raise" raises FloatConversionOverflowError
    float_overflow: str = Field("saturate", pattern="^(saturate|raise)$")

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text

    model_config = SettingsConfigDict(
        env_prefix="BIGNUM_",
        env_file=".env",
        case_sensitive=False,
    )


# Global configuration instance
config = BigNumConfig()


def get_config() -> BigNumConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BigNumConfig:
    """Reload configuration from environment"""
    global config
    config = BigNumConfig()
    return config
