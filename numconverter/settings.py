from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_MAX_INPUT_LENGTH = 1024


@dataclass(frozen=True)
class Settings:
    # None means no limit
    max_input_length: int | None
    modules_path: Path
    hide_private: bool


def _flag(name: str, default: str = "off") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "on"}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value


def _limit_env(name: str, default: int) -> int | None:
    value = _int_env(name, default)
    if value <= 0:
        return None
    return value


def modules_path() -> Path:
    env_path = os.getenv("NUMCONVERTER_MODULES_PATH", "").strip()
    if env_path:
        return Path(env_path)
    return ROOT_DIR / "modules"


def load_settings() -> Settings:
    return Settings(
        max_input_length=_limit_env("NUMCONVERTER_MAX_INPUT_LENGTH", DEFAULT_MAX_INPUT_LENGTH),
        modules_path=modules_path(),
        hide_private=_flag("NUMCONVERTER_HIDE_PRIVATE", "on"),
    )
