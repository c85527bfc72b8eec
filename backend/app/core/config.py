"""
Configuration management using Pydantic Settings
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py is at: backend/app/core/config.py
# Project root is: backend/app/core/../../../
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent.parent
_project_root = _backend_dir.parent
ENV_FILE = _project_root / ".env"
# Fallback: try in backend/ directory if not found in project root
if not ENV_FILE.exists():
    ENV_FILE = _backend_dir / ".env"
# Real environment wins over .env
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=False)


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Base64 Encoder/Decoder API"
    app_description: str = "A simple API to encode and decode Base64 strings"
    app_version: str = "1.0.0"
    app_env: str = Field(default="development", description="Application environment")
    host: str = Field(default="0.0.0.0", description="API host")
    port: int = Field(default=3000, ge=1, le=65535, description="API port")
    public_url: Optional[str] = Field(
        default=None,
        description="Server URL advertised in the OpenAPI description"
    )

    # Auth
    x_api_key: Optional[str] = Field(
        default=None,
        description="Shared secret expected in the x_api_key request header"
    )

    # Codec
    strict_base64: bool = Field(
        default=True,
        description="Reject malformed Base64 / non UTF-8 payloads on decode"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_uvicorn_access: bool = Field(default=False, description="Enable Uvicorn access logging")
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"app.core": "DEBUG"})'
    )
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_file_enabled: bool = Field(default=False, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/base64_api.log",
        description="Path to log file (relative to project root)"
    )
    log_file_retention: int = Field(
        default=30,
        ge=1,
        description="Number of days to keep log files"
    )
    log_sensitive_data: bool = Field(
        default=False,
        description="Enable logging of sensitive data (api keys, tokens) - NOT RECOMMENDED"
    )

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only 'json' and 'text' formatters exist"""
        value = v.strip().lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level name"""
        return v.strip().upper()

    @property
    def api_key_configured(self) -> bool:
        """Whether a non-empty shared secret is configured"""
        return bool(self.x_api_key)

    @property
    def server_url(self) -> str:
        """URL advertised in the OpenAPI servers list"""
        if self.public_url:
            return self.public_url.rstrip("/")
        return f"http://localhost:{self.port}"

    @property
    def module_levels(self) -> Dict[str, str]:
        """Parse module-specific levels, ignoring malformed JSON"""
        if not self.log_module_levels:
            return {}
        try:
            levels = json.loads(self.log_module_levels)
        except (json.JSONDecodeError, TypeError):
            return {}
        if not isinstance(levels, dict):
            return {}
        return {str(k): str(v) for k, v in levels.items()}

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        frozen=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
