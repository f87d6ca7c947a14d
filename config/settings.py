"""partycast process settings — loaded from environment variables via .env file.

These settings locate the server configuration file and configure logging.
They never overlay values inside the loaded ``Config``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Process-level settings. Never read env vars directly."""

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Environment ──────────────────────────────────────────────
    partycast_env: Literal["dev", "prod"] = "dev"

    # ── Server config file ───────────────────────────────────────
    partycast_config_path: Path = Path("config.json")

    # ── Logging ──────────────────────────────────────────────────
    partycast_log_level: str = "INFO"
    partycast_log_json: bool = False


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Singleton settings loader — reads .env once, reuses thereafter."""
    global _settings_instance  # noqa: PLW0603
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
