"""Application settings loaded from environment / .env file.

Config precedence (highest to lowest):
    1. Environment variables
    2. ``.env`` file in project root
    3. Defaults defined in this module

The settings object is created once at import and is frozen; request
handlers read it but never re-load it.
"""

from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root is three levels up from this file (frontend/app/core/settings.py)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_DEFAULT_API_BASE_URL = "http://127.0.0.1:4000"


def _redact_url(url: str) -> str:
    """Mask any ``user:password@`` part of *url*."""
    parts = urlsplit(url)
    if parts.username is None and parts.password is None:
        return url
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    return urlunsplit((parts.scheme, f"***@{host}", parts.path, parts.query, parts.fragment))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app_host: str = "127.0.0.1"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Upstream content API: override via API_BASE_URL env var
    api_base_url: str = _DEFAULT_API_BASE_URL

    @field_validator("api_base_url")
    @classmethod
    def _validate_api_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL; drop a trailing slash."""
        v = v.strip()
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            msg = (
                f"Invalid API base URL '{v}'. "
                f"Set API_BASE_URL to an absolute http(s) URL."
            )
            raise ValueError(msg)
        return v.rstrip("/")

    def safe_dump(self) -> dict[str, object]:
        """Return settings dict with credentials masked: safe for logging."""
        return {
            "app_host": self.app_host,
            "app_port": self.app_port,
            "debug": self.debug,
            "log_level": self.log_level,
            "api_base_url": _redact_url(self.api_base_url),
        }


settings = Settings()
