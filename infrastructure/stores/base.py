"""Base interface for taxonomy record stores."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from infrastructure.config.models import StoreBackend, StoreConfig

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """The record store could not be reached or does not hold the expected collection."""


class RecordStore(ABC):
    """
    Abstract base class for record stores.
    Common interface for the flat taxonomy record source/sink.

    All concrete stores must implement:
    - read_records(): return every raw record in the collection
    - replace_records(): delete every record, then insert the given ones
    """

    backend: StoreBackend
    cfg: StoreConfig
    client: Any

    def __init__(self, *, cfg: StoreConfig, client: Any) -> None:
        self.cfg = cfg
        self.backend = cfg.backend
        self.client = client

    @property
    def target(self) -> str:
        return self.cfg.target

    @classmethod
    @abstractmethod
    def from_cfg(cls, cfg: StoreConfig) -> "RecordStore":
        """Standard constructor used by the factory."""
        raise NotImplementedError

    @abstractmethod
    def read_records(self) -> list[dict[str, Any]]:
        """Return all raw records (name, parent, className, title, synonyms), in no particular order."""
        raise NotImplementedError

    @abstractmethod
    def replace_records(self, records: Sequence[Mapping[str, Any]]) -> int:
        """
        Replace the whole collection with `records`.

        Returns:
            Number of records inserted
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release the underlying client, if any."""

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
