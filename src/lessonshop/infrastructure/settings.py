"""Application settings.

Loaded once by the entry point from environment variables with the
``LESSONSHOP_`` prefix (or a ``.env`` file) and passed explicitly to
``create_app``. Admin credentials have no defaults.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LESSONSHOP_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Admin gateway
    admin_username: str
    admin_password: SecretStr
    admin_key: SecretStr

    # Storage
    data_dir: Path = Path("data")
    images_dir: Path = Path("images")

    # HTTP
    host: str = "0.0.0.0"
    port: int = 5000
    allowed_origins_raw: str = "*"

    log_level: str = "INFO"

    @computed_field
    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated allowed origins into a list."""
        return [v.strip() for v in self.allowed_origins_raw.split(",") if v.strip()]
