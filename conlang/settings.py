#!/usr/bin/env python3
"""
Application Settings
====================
Reads conlang's app.yaml once and answers dotted-path lookups into it.

The file shipped in ``conlang/configs`` is used unless the
``CONLANG_CONFIG`` environment variable names another YAML file.

Usage:
    from conlang.settings import get_setting

    get_setting("naming.title_chance", 0.1)
    get_setting("logging")              # whole section as a dict
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "CONLANG_CONFIG"


def config_path() -> Path:
    """Location of the active app config (environment override first)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if not override:
        return APP_CONFIG_PATH
    path = Path(os.path.expanduser(override))
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parse the app config. An empty file counts as no settings."""
    path = config_path()
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Missing app config: {path}") from None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"App config {path} must be a mapping, got {type(data).__name__}")
    logger.debug("Loaded app config from %s (%d sections)", path, len(data))
    return data


def reload_settings() -> dict:
    """Drop the cached config and read it again."""
    load_app_config.cache_clear()
    return load_app_config()


def lookup(data: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """
    Walk ``data`` along a dotted path.

    Returns ``default`` when a key is missing or when a step lands on
    something that is not a mapping.
    """
    node: Any = data
    for key in path.split('.'):
        if not isinstance(node, Mapping):
            return default
        node = node.get(key, _MISSING)
        if node is _MISSING:
            return default
    return node


_MISSING = object()


def get_setting(path: str, default: Any = None) -> Any:
    """Get a setting from app.yaml by dotted path, e.g. ``"cli.default_count"``."""
    return lookup(load_app_config(), path, default)


__all__ = [
    "load_app_config",
    "reload_settings",
    "get_setting",
    "lookup",
    "config_path",
    "PACKAGE_ROOT",
    "CONFIG_DIR",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
