"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file.

Files that USE this module:
- waformat.app (bot token and logging configuration)
- waformat.application.session (input character limit, copy indicator hold time)
- waformat.shared.language (default UI language)

Files that this module USES:
- waformat.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Log level names
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from waformat.shared.validators import validate_bot_token  # Validate Telegram bot token format


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # --- Telegram ---
    # Optional here so the formatter can be imported without a token; app.main() enforces it
    bot_token: str = Field(default="", alias="BOT_TOKEN")
    
    # --- Formatter UI ---
    input_char_limit: int = Field(default=1000, alias="INPUT_CHAR_LIMIT", ge=1)
    copy_indicator_seconds: float = Field(default=2.0, alias="COPY_INDICATOR_SECONDS", gt=0.0, le=60.0)
    
    # --- Language Settings ---
    default_language: str = Field(default="en", alias="DEFAULT_LANGUAGE")
    
    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="WAFORMAT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    @property
    def log_level_value(self) -> int:
        """Numeric logging level for LOG_LEVEL."""
        return logging.getLevelName(self.log_level)
    
    @field_validator("bot_token")
    @classmethod
    def validate_bot_token(cls, v: str) -> str:
        """Validate bot token format."""
        if v and not validate_bot_token(v):
            raise ValueError("Invalid BOT_TOKEN format")
        return v
    
    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        if v not in ["en", "fa"]:
            raise ValueError("DEFAULT_LANGUAGE must be 'en' or 'fa'")
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level


# Global settings instance
settings = Settings()


# ============================================================================
# Running the bot
# ============================================================================
#
# 1. Put BOT_TOKEN=<token from @BotFather> into .env
#
# 2. Run in the foreground:
#    python -m waformat
#
# 3. Or in the background with logging:
#    nohup waformat-bot > bot.log 2>&1 &
#
# 4. Stop it:
#    pkill -f "python -m waformat"; pkill -f waformat-bot
#
# ============================================================================
