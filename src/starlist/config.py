"""YAML configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from starlist.errors import ConfigError
from starlist.models import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate the app config, then apply environment overrides.

    With no path, starts from defaults (memory backend, empty catalog).
    """
    data: dict = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a YAML mapping, got {type(data).__name__}")

    try:
        config = AppConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid config: {e}") from e

    return apply_env_overrides(config)


def apply_env_overrides(config: AppConfig) -> AppConfig:
    """Let STARLIST_BACKEND and SUPABASE_* env vars override the file."""
    backend = os.environ.get("STARLIST_BACKEND")
    if backend:
        if backend not in ("memory", "supabase"):
            raise ConfigError(f"Invalid STARLIST_BACKEND: {backend!r}")
        config.backend = backend

    url = os.environ.get("SUPABASE_URL")
    if url:
        config.supabase.url = url

    key = os.environ.get("SUPABASE_SERVICE_KEY") or os.environ.get("SUPABASE_ANON_KEY")
    if key:
        config.supabase.key = key

    if config.backend == "supabase" and not (config.supabase.url and config.supabase.key):
        raise ConfigError(
            "Supabase backend requires supabase.url and supabase.key "
            "(or SUPABASE_URL and SUPABASE_SERVICE_KEY)"
        )
    return config
