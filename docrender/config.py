"""Configuration loading for docrender (.docrender.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CODE_BLOCK_LANGUAGE,
    MAX_ARGS_BEFORE_MULTILINE,
    MAX_LENGTH_BEFORE_MULTILINE,
    PARAM_INDENT,
)

CONFIG_FILENAME = ".docrender.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class RenderConfig:
    """Layout settings for prototypes and code blocks."""

    max_documented_params: int = MAX_ARGS_BEFORE_MULTILINE
    max_line_length: int = MAX_LENGTH_BEFORE_MULTILINE
    code_language: str = CODE_BLOCK_LANGUAGE
    param_indent: str = PARAM_INDENT


DEFAULT_CONFIG = RenderConfig()


def load_config(config_path: Path) -> RenderConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)

    if not config_file.exists():
        return DEFAULT_CONFIG

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    prototype_data = _as_dict(data.get("prototype"))
    max_documented_params = _as_int(prototype_data.get("max_documented_params"))
    max_line_length = _as_int(prototype_data.get("max_line_length"))
    param_indent = _as_indent(prototype_data.get("indent"))

    code_data = _as_dict(data.get("code_block"))
    code_language = _as_str(code_data.get("language"))

    return RenderConfig(
        max_documented_params=(
            max_documented_params
            if max_documented_params is not None and max_documented_params >= 0
            else DEFAULT_CONFIG.max_documented_params
        ),
        max_line_length=(
            max_line_length
            if max_line_length is not None and max_line_length > 0
            else DEFAULT_CONFIG.max_line_length
        ),
        code_language=code_language if code_language is not None else DEFAULT_CONFIG.code_language,
        param_indent=param_indent if param_indent is not None else DEFAULT_CONFIG.param_indent,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_indent(value: Any) -> Optional[str]:
    # An integer indent means that many spaces.
    count = _as_int(value)
    if count is not None:
        return " " * count if count > 0 else None
    if isinstance(value, str) and value and not value.strip():
        return value
    return None
