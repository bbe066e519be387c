"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Ascend life audit server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Default to loopback; the server has no auth layer.
    ascend_host: str = "127.0.0.1"
    ascend_port: int = 8003
    ascend_log_level: str = "info"
    ascend_allow_insecure_bind: bool = False

    # Questionnaire (empty = the shipped life_audit.v1.yaml)
    questionnaire_path: str = ""

    # Scoring tuning
    potential_bonus: float = 2.5
    quick_win_margin: float = 1.0


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
