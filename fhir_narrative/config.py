"""Configuration loading from narrative.yaml with env var interpolation."""

from __future__ import annotations

import logging
import logging.handlers
import os
import re
import sys
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


def _interpolate_env(value: str) -> str:
    """Replace ${ENV_VAR} patterns with environment variable values."""
    return re.sub(
        r"\$\{(\w+)\}",
        lambda m: os.environ.get(m.group(1), m.group(0)),
        value,
    )


def _walk_interpolate(obj):
    """Recursively interpolate env vars in a config dict."""
    if isinstance(obj, str):
        return _interpolate_env(obj)
    if isinstance(obj, dict):
        return {k: _walk_interpolate(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_walk_interpolate(v) for v in obj]
    return obj


class RenderingConfig(BaseModel):
    prefix: str = ""
    # Render every rest interface instead of only the first
    all_rest_interfaces: bool = False


class MarkdownConfig(BaseModel):
    extensions: list[str] = Field(default_factory=lambda: ["extra"])


class LoggingConfig(BaseModel):
    level: str = "INFO"
    dir: str | None = None


class NarrativeConfig(BaseModel):
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    # resource type -> "module.path:ClassName"
    renderers: dict[str, str] = Field(default_factory=dict)


def load_config(path: str | Path = "narrative.yaml") -> NarrativeConfig:
    """Load config from YAML file with env var interpolation."""
    path = Path(path)
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        raw = _walk_interpolate(raw)
    else:
        raw = {}
    return NarrativeConfig(**raw)


def setup_logging(config: NarrativeConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.logging.dir:
        log_dir = Path(config.logging.dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_dir / "narrative.log", maxBytes=10_000_000, backupCount=5
            )
        )

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )
