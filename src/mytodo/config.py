# src/mytodo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Optional config_local.py overrides for local experiments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "MYTODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    log_file: Path

    # ---- Task store ----
    first_id: int
    seed_on_start: bool
    confirm_delete: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "mytodo").strip() or "mytodo"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/mytodo"))
        log_file = _env_path(_k("LOG_FILE"), data_dir / "mytodo.log")

        # Ids are positive; anything lower falls back to the default start.
        first_id = _env_int(_k("FIRST_ID"), 1)
        if first_id < 1:
            first_id = 1

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_file=log_file,
            first_id=first_id,
            seed_on_start=_env_bool(_k("SEED_ON_START"), False),
            confirm_delete=_env_bool(_k("CONFIRM_DELETE"), True),
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for quick local switches.
try:
    import config_local as _config_local  # type: ignore
except ModuleNotFoundError:
    _config_local = None

if _config_local is not None:
    if hasattr(_config_local, "SEED_ON_START"):
        object.__setattr__(SETTINGS, "seed_on_start", bool(_config_local.SEED_ON_START))  # type: ignore[misc]
    if hasattr(_config_local, "CONFIRM_DELETE"):
        object.__setattr__(SETTINGS, "confirm_delete", bool(_config_local.CONFIRM_DELETE))  # type: ignore[misc]


def get_settings() -> Settings:
    return SETTINGS
