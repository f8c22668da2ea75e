from pydantic import BaseModel, field_validator
import os
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_DEFAULT_ENV_PATH = Path.cwd() / ".env"


def _load_env_file(env_path: Path) -> None:
    """Seed os.environ from a .env file. Variables already set win."""
    if not env_path.exists():
        return
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                if key not in os.environ:
                    os.environ[key] = value


def _sanitize_ascii(val: str) -> str:
    """Strip non-ASCII characters from config values (header values must be ASCII)"""
    return val.encode('ascii', errors='ignore').decode('ascii').strip()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


class Settings(BaseModel):
    model_config = {"frozen": True}

    # UniFi console, e.g. https://192.168.1.1
    base_url: str
    # Integration API key, sent as X-API-KEY
    api_key: str

    # Consoles ship with self-signed certificates
    verify_ssl: bool = True
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() or "INFO"

    @property
    def api_root(self) -> str:
        return f"{self.base_url}/proxy/network/integration"

    @property
    def masked_api_key(self) -> str:
        return '***' + self.api_key[-4:] if len(self.api_key) > 4 else '***'


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """Read settings from the environment, refusing to start without base URL and key."""
    _load_env_file(env_path or _DEFAULT_ENV_PATH)

    base_url = _sanitize_ascii(os.getenv("UNIFI_BASE_URL", ""))
    api_key = _sanitize_ascii(os.getenv("UNIFI_API_KEY", ""))
    if not base_url or not api_key:
        raise SystemExit(
            "FATAL: UNIFI_BASE_URL and UNIFI_API_KEY environment variables are required."
        )

    settings = Settings(
        base_url=base_url,
        api_key=api_key,
        verify_ssl=_env_flag("UNIFI_VERIFY_SSL", True),
        log_level=_sanitize_ascii(os.getenv("UNIFI_LOG_LEVEL", "INFO")),
    )
    logger.info(f"Config: UniFi API → {settings.api_root} (key={settings.masked_api_key}, verify_ssl={settings.verify_ssl})")
    return settings
