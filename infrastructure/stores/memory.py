"""In-memory record store for tests and dry runs."""

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from infrastructure.config.models import StoreBackend, StoreConfig
from infrastructure.stores.base import RecordStore
from infrastructure.stores.registry import register_store

logger = logging.getLogger(__name__)


class MemoryRecordStore(RecordStore):
    """List-backed store; nothing is persisted beyond the instance."""

    def __init__(self, *, cfg: StoreConfig, records: Iterable[Mapping[str, Any]] | None = None) -> None:
        super().__init__(cfg=cfg, client=None)
        self.records: list[dict[str, Any]] = [dict(r) for r in records or []]
        logger.debug("Initialized memory store with %d records", len(self.records))

    @classmethod
    def from_cfg(cls, cfg: StoreConfig) -> "MemoryRecordStore":
        return cls(cfg=cfg)

    def read_records(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self.records)

    def replace_records(self, records: Sequence[Mapping[str, Any]]) -> int:
        self.records = [copy.deepcopy(dict(r)) for r in records]
        return len(self.records)


register_store(StoreBackend.MEMORY, MemoryRecordStore)
