"""Configuration loading from YAML files and the environment."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import StoreConfig
from infrastructure.constants import ENV_BACKEND, ENV_COLLECTION, ENV_DATABASE, ENV_HOST, ENV_PORT

logger = logging.getLogger(__name__)

# Environment variable -> StoreConfig field
_ENV_FIELDS: dict[str, str] = {
    ENV_BACKEND: "backend",
    ENV_HOST: "host",
    ENV_PORT: "port",
    ENV_DATABASE: "database",
    ENV_COLLECTION: "collection",
}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file is an empty config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for var, field in _ENV_FIELDS.items():
        value = environ.get(var)
        if value is not None and value.strip():
            out[field] = value.strip()
    return out


def load_store_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> StoreConfig:
    """
    Build a StoreConfig from (lowest to highest precedence):
    built-in defaults, the YAML file, environment variables, explicit overrides.

    Args:
        path: YAML config file. Missing files are skipped; pass None to skip the file entirely
        overrides: Values from the CLI; None values are ignored
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated StoreConfig

    Raises:
        ValueError: If the YAML is not a mapping or a value fails validation
    """
    data: dict[str, Any] = {}
    if path is not None:
        if path.exists():
            data.update(_load_yaml(path))
            logger.debug("Loaded store config from %s", path)
        else:
            logger.debug("No store config at %s; using defaults", path)

    data.update(_env_overrides(os.environ if environ is None else environ))
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})

    unknown = sorted(set(data) - set(StoreConfig.model_fields))
    if unknown:
        raise ValueError(f"Unknown store config keys: {unknown}")

    return StoreConfig(**data)
