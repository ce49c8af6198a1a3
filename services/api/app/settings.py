"""API service configuration.

All runtime configuration lives here as a single `pydantic-settings` model so
values are parsed and validated once, on startup, instead of being read with
`os.getenv` throughout the code.

Environment variables (an optional `.env` file is also read):
- `PORT`: listening port (default 3000)
- `HOST`: bind address (default 0.0.0.0)
- `LOG_LEVEL`: root log level (default INFO)
- `STATIC_DIR`: directory served at `/` (default `services/api/public`)
- `CORS_ORIGINS`: JSON list of allowed origins (default `["*"]`)
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "public"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    port: int = 3000
    host: str = "0.0.0.0"
    log_level: str = "INFO"
    static_dir: Path = DEFAULT_STATIC_DIR
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, parsed from the environment once."""
    return Settings()
