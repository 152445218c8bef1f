import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_package_dir = Path(__file__).parent


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class AuditConfig(BaseModel):
    enabled: bool = False  # Development builds only
    banner_ttl_seconds: int = 5


class ApiGuardConfig(BaseModel):
    enabled: bool = True
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    blocked_agent_markers: list[str] = ["bot"]


class AppConfig(BaseModel):
    default_locale: str = "en"
    data_dir: str = ""  # Empty means the fixtures bundled with the package
    dev_mode: bool = False
    audit: AuditConfig = AuditConfig()
    api_guard: ApiGuardConfig = ApiGuardConfig()
    news_page_size: int = 10


_config_dir = Path(os.environ.get("FANSITE_CONFIG_DIR", Path.home() / ".fansite"))
_config_file = _config_dir / "config.json"


def _ensure_config_dir() -> None:
    _config_dir.mkdir(parents=True, exist_ok=True)


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    data_dir = os.environ.get("FANSITE_DATA_DIR")
    if data_dir:
        config.data_dir = data_dir
    default_locale = os.environ.get("FANSITE_DEFAULT_LOCALE")
    if default_locale:
        config.default_locale = default_locale
    if "FANSITE_DEV_MODE" in os.environ:
        config.dev_mode = _env_flag("FANSITE_DEV_MODE")
        config.audit.enabled = config.dev_mode
    return config


def load_config() -> AppConfig:
    _ensure_config_dir()
    config = AppConfig()
    if _config_file.exists():
        try:
            data = json.loads(_config_file.read_text(encoding="utf-8"))
            config = AppConfig(**data)
        except (json.JSONDecodeError, OSError, ValueError):
            logger.warning("Failed to load config.json, using defaults")
    return _apply_env_overrides(config)


def save_config(config: AppConfig) -> None:
    _ensure_config_dir()
    _config_file.write_text(
        config.model_dump_json(indent=2),
        encoding="utf-8",
    )


def get_data_dir(config: Optional[AppConfig] = None) -> Path:
    config = config or get_config()
    if config.data_dir:
        return Path(config.data_dir)
    return _package_dir / "data"


def get_preferences_path() -> Path:
    return _config_dir / "preferences.json"


_current_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    global _current_config
    if _current_config is None:
        _current_config = load_config()
    return _current_config


def update_config(config: AppConfig) -> AppConfig:
    global _current_config
    save_config(config)
    _current_config = config
    return _current_config


def reset_config() -> None:
    global _current_config
    _current_config = None
