"""Application configuration module."""

from pathlib import Path
from pydantic_settings import BaseSettings

# 計算專案根目錄的絕對路徑（相對於此文件的位置）
_THIS_DIR = Path(__file__).parent  # datastar_sse/
_PROJECT_ROOT = _THIS_DIR.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    # Service
    service_name: str = "datastar-sse"
    service_version: str = "0.8.0"
    api_prefix: str = "/api/v1"

    # SSE response headers (Keep-Alive: timeout=..., max=...)
    keep_alive_timeout: int = 300
    keep_alive_max: int = 100000

    # Seconds between comment frames on long-lived streams
    heartbeat_interval: float = 15.0

    # Logging
    log_level: str = "INFO"

    @property
    def keep_alive_header(self) -> str:
        """Value of the Keep-Alive response header."""
        return f"timeout={self.keep_alive_timeout}, max={self.keep_alive_max}"

    model_config = {
        "env_file": str(_ENV_FILE),
        "env_file_encoding": "utf-8",
        "env_prefix": "DATASTAR_",
        "case_sensitive": False,
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
