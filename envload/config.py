from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = Path("envload.yaml")


def _require_bool(value: Any, default: bool, name: str) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean")
    return value


def _require_str(value: Any, default: str, name: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty string")
    return value


def require_log_level(value: Any, default: str) -> str:
    level = _require_str(value, default, "log_level").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"log_level must be a logging level name, got {value!r}")
    return level


@dataclass(frozen=True)
class Config:
    env_file: str = ".env"
    preserve: bool = False
    strict: bool = False
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        if not config_path.exists():
            return cls()
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"{config_path} must contain a mapping")
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        defaults = cls()
        return cls(
            env_file=_require_str(data.get("env_file"), defaults.env_file, "env_file"),
            preserve=_require_bool(data.get("preserve"), defaults.preserve, "preserve"),
            strict=_require_bool(data.get("strict"), defaults.strict, "strict"),
            log_level=require_log_level(data.get("log_level"), defaults.log_level),
        )
