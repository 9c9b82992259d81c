"""
Load config from config.yaml with optional env overrides.
Single source of truth for backend selection, host store paths and log level.
"""
from __future__ import annotations

import os
from pathlib import Path

import yaml

# Defaults if no YAML or env
_DEFAULTS = {
    "storage": {
        "backend": "preferences",
        "preferences_path": "data/preferences.sqlite",
        "defaults_path": "data/defaults.json",
    },
    "logging": {"level": "WARNING"},
}

_ENV_KEYS = {
    "AGNOSTIC_STORAGE_BACKEND": ("storage", "backend"),
    "AGNOSTIC_STORAGE_PREFERENCES_PATH": ("storage", "preferences_path"),
    "AGNOSTIC_STORAGE_DEFAULTS_PATH": ("storage", "defaults_path"),
    "AGNOSTIC_STORAGE_LOG_LEVEL": ("logging", "level"),
}


def _config_yaml_path() -> Path:
    """Config.yaml lives at repo root (parent of package dir)."""
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    for env_name, (section, key) in _ENV_KEYS.items():
        value = os.environ.get(env_name)
        if value:
            overrides.setdefault(section, {})[key] = value
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def storage_backend() -> str:
    return str(get_config()["storage"]["backend"]).strip().lower()


def preferences_path() -> str:
    return str(get_config()["storage"]["preferences_path"])


def defaults_path() -> str:
    return str(get_config()["storage"]["defaults_path"])


def log_level() -> str:
    return str(get_config()["logging"]["level"]).upper()
