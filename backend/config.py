"""
Centralized Configuration for Chat Translit
===========================================

Single source of truth for all environment variables and settings.
Uses Pydantic for validation and type safety.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Environment variables take precedence over .env file values.
    """

    # ==========================================
    #  APPLICATION SETTINGS
    # ==========================================

    app_name: str = "Chat Translit"
    app_version: str = "1.0.0"
    environment: str = Field("production")

    # ==========================================
    #  LOGGING
    # ==========================================

    log_level: str = Field("INFO")
    log_dir: Path = Field(Path(__file__).parent / "logs")
    log_to_file: bool = Field(False)
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"

    # ==========================================
    #  TRANSLITERATION
    # ==========================================

    # Paths grow exponentially with the number of phoneme tokens;
    # longer words get no Hebrew variants
    max_input_tokens: int = Field(12)

    # ==========================================
    #  CHAT LOOKUP
    # ==========================================

    # Also match the query as typed (Latin chat names)
    lookup_include_raw_query: bool = Field(True)

    # ==========================================
    #  VALIDATORS
    # ==========================================

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f'log_level must be one of {valid_levels}')
        return v_upper

    @field_validator('environment')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is valid."""
        valid_envs = ['development', 'staging', 'production', 'test']
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f'environment must be one of {valid_envs}')
        return v_lower

    @field_validator('max_input_tokens')
    @classmethod
    def validate_max_input_tokens(cls, v: int) -> int:
        if v < 1:
            raise ValueError('max_input_tokens must be at least 1')
        return v

    # ==========================================
    #  COMPUTED PROPERTIES
    # ==========================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == 'development'

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == 'test'

    def ensure_directories(self):
        """Create the log directory when file logging is on."""
        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    # ==========================================
    #  PYDANTIC CONFIG
    # ==========================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # Allow extra fields for forward compatibility
        extra="ignore",
    )


# ==========================================
#  GLOBAL SETTINGS INSTANCE
# ==========================================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance (singleton pattern).

    This ensures we only load the .env file once and validate once.
    """
    global _settings

    if _settings is None:
        _settings = Settings()
        _settings.ensure_directories()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).
    """
    global _settings
    _settings = None
    return get_settings()


# ==========================================
#  CONVENIENCE FUNCTIONS
# ==========================================

def is_development() -> bool:
    """Check if in development mode."""
    return get_settings().is_development


def is_testing() -> bool:
    """Check if in test mode."""
    return get_settings().is_testing


if __name__ == "__main__":
    settings = get_settings()

    print("=" * 60)
    print(f"{settings.app_name} {settings.app_version} - Configuration")
    print("=" * 60)
    print(f"\nEnvironment: {settings.environment}")
    print(f"Log level: {settings.log_level}")
    print(f"Log to file: {settings.log_to_file} ({settings.log_dir})")
    print(f"Max input tokens: {settings.max_input_tokens}")
    print(f"Match raw query: {settings.lookup_include_raw_query}")
