"""Factory for creating record stores."""

import importlib
import logging

from infrastructure.config.models import StoreBackend, StoreConfig

from .base import RecordStore
from .registry import get_store_class

logger = logging.getLogger(__name__)


def _ensure_backend_imported(backend: StoreBackend) -> None:
    """
    Lazy-import the backend module to trigger `register_store(...)`.

    Convention:
      - StoreBackend enum value MUST match module filename under infrastructure/stores/
        e.g., StoreBackend.MONGO.value == "mongo" -> infrastructure/stores/mongo.py
    """
    module_name = f"{__package__}.{backend.value}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if getattr(e, "name", None) == module_name:
            raise RuntimeError(
                f"No store module found for backend='{backend.value}'. "
                f"Expected file: infrastructure/stores/{backend.value}.py"
            ) from e
        raise


def make_store(cfg: StoreConfig) -> RecordStore:
    """
    Factory function to create the record store for the configured backend.
    Args:
        cfg: Store configuration
    Returns:
        An instance of RecordStore for the configured backend.
    Raises:
        RuntimeError: If the backend is unsupported.
    """
    # 1) Try registry first (maybe already imported elsewhere)
    store_cls = get_store_class(cfg.backend)

    # 2) If not registered yet, import the backend module by convention, then retry
    if store_cls is None:
        _ensure_backend_imported(cfg.backend)
        store_cls = get_store_class(cfg.backend)

    if store_cls is None:
        raise RuntimeError(
            f"Backend '{cfg.backend.value}' did not register a store. "
            f"Make sure {cfg.backend.value}.py calls register_store(...)."
        )

    logger.debug("Creating %s for %s", store_cls.__name__, cfg.target)
    return store_cls.from_cfg(cfg)
