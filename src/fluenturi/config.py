"""Loading :class:`UriOptions` from YAML and the environment."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from .options import UriOptions

DEFAULT_CONFIG_PATH = Path("config/fluenturi.yaml")
ENV_PREFIX = "FLUENTURI_"
OPTION_KEYS = ("always_slash_terminate_path", "allow_password_in_userinfo")


@lru_cache(maxsize=1)
def load_uri_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Load the YAML configuration, falling back to defaults when it is missing."""
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    else:
        data = {}

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise ValueError(f"'options' in {config_path} must be a mapping")
    data["options"] = {**UriOptions().to_dict(), **options}
    return data


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect ``FLUENTURI_*`` option overrides, e.g. ``FLUENTURI_ALLOW_PASSWORD_IN_USERINFO``."""
    env = os.environ if environ is None else environ
    overrides: Dict[str, str] = {}
    for key in OPTION_KEYS:
        value = env.get(ENV_PREFIX + key.upper())
        if value is not None and value.strip():
            overrides[key] = value
    return overrides


def load_uri_options(
    path: str | Path | None = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> UriOptions:
    """Build options from the YAML file with environment overrides applied on top.

    Without an explicit ``environ`` the process environment is used, after
    reading any `.env` file in the working directory.
    """
    if environ is None:
        load_dotenv()
    merged = dict(load_uri_config(path)["options"])
    merged.update(env_overrides(environ))
    return UriOptions.from_config(merged)


__all__ = ["load_uri_config", "load_uri_options", "env_overrides", "DEFAULT_CONFIG_PATH", "ENV_PREFIX"]
