"""Application configuration and settings."""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Set

from pydantic_settings import BaseSettings

from .capture.config import CaptureConfig


class Settings(BaseSettings):
    """Application settings loaded from INKPATH_* environment variables."""

    # API Configuration
    api_keys: str = ""  # Comma-separated valid API keys
    cors_origins: str = "*"  # Comma-separated allowed origins

    # Capture
    capture_config: Optional[Path] = None  # YAML file with cleanup thresholds
    max_sessions: int = 1000
    max_events_per_request: int = 5000

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_prefix = "INKPATH_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    def get_valid_api_keys(self) -> Set[str]:
        """Parse and return valid API keys as a set."""
        if not self.api_keys:
            return set()
        return {key.strip() for key in self.api_keys.split(",") if key.strip()}

    def get_cors_origins(self) -> list[str]:
        """Parse and return CORS origins."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def get_capture_config(self) -> CaptureConfig:
        """Cleanup and default-style configuration for new sessions."""
        return _load_capture_config(str(self.capture_config) if self.capture_config else None)


@lru_cache(maxsize=8)
def _load_capture_config(path: Optional[str]) -> CaptureConfig:
    return CaptureConfig.load(path)


# Global settings instance
settings = Settings()
