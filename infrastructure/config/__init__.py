"""
Configuration management: models, loading, and validation.

Handles:
- StoreConfig: record store connection settings
- TextFormat: editable document encoding
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_store_config
from infrastructure.config.models import StoreBackend, StoreConfig, TextFormat

__all__ = [
    "StoreConfig",
    "load_store_config",
    # Enums
    "StoreBackend",
    "TextFormat",
]
