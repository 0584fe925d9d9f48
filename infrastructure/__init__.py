"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Record stores (MongoDB, Memory)
- Configuration loading (YAML, environment)
- Observability (logging)
- Filesystem and standard stream access

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    StoreBackend,
    StoreConfig,
    TextFormat,
    load_store_config,
)
from infrastructure.stores import RecordStore, StoreError, make_store

__all__ = [
    # Record stores (most commonly used)
    "make_store",
    "RecordStore",
    "StoreError",
    # Configuration (most commonly used)
    "load_store_config",
    "StoreConfig",
    "StoreBackend",
    "TextFormat",
]
