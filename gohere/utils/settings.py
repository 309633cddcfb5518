from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, List, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..generator.errors import ConfigError
from ..generator.models import PRINTABLE_PATTERN

CONFIG_ENV = "GOHERE_CONFIG"
DEFAULT_CONFIG_FILE = Path("~/.config/gohere/config.yml")

DEFAULT_DEV_TOOLS = [
    "github.com/golangci/golangci-lint/cmd/golangci-lint@latest",
    "github.com/cosmtrek/air@latest",
    "github.com/swaggo/swag/cmd/swag@latest",
]


class Settings(BaseModel):
    """User-level defaults; never changed by CLI flags."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    module_host: str = Field(default="github.com", min_length=1, pattern=PRINTABLE_PATTERN)
    dev_tools: List[Annotated[str, Field(pattern=PRINTABLE_PATTERN)]] = Field(
        default_factory=lambda: list(DEFAULT_DEV_TOOLS)
    )
    visibility: Literal["public", "private"] = "public"
    branch: str = Field(default="main", min_length=1, pattern=PRINTABLE_PATTERN)
    commit_message: str = Field(
        default="Initial commit: Basic Go project structure", min_length=1, pattern=PRINTABLE_PATTERN
    )


def config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_FILE).expanduser()


def load_settings(path: Path | None = None) -> Settings:
    path = path or config_path()
    if not path.exists():
        return Settings()
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    try:
        return Settings(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc
