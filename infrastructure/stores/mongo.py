"""MongoDB record store."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from infrastructure.config.models import StoreBackend, StoreConfig
from infrastructure.stores.base import RecordStore, StoreError
from infrastructure.stores.registry import register_store

logger = logging.getLogger(__name__)


class MongoRecordStore(RecordStore):
    """
    Taxonomy records kept one document per entry in a MongoDB collection.

    The database must already exist for both reading and writing (guards
    against a mistyped --db silently creating a new one); the collection must
    exist for reading.
    """

    def __init__(self, *, cfg: StoreConfig, client: Any) -> None:
        super().__init__(cfg=cfg, client=client)
        self._db = client[cfg.database]
        self._collection = self._db[cfg.collection]

    @classmethod
    def from_cfg(cls, cfg: StoreConfig) -> "MongoRecordStore":
        client = MongoClient(cfg.connection_uri, serverSelectionTimeoutMS=cfg.server_selection_timeout_ms)
        logger.info("Connecting to MongoDB at %s", cfg.server)
        return cls(cfg=cfg, client=client)

    def _check_database(self) -> None:
        try:
            names = self.client.list_database_names()
        except PyMongoError as e:
            raise StoreError(
                f"Failed to connect to mongodb server at {self.cfg.server}: {e}"
            ) from e
        if self.cfg.database not in names:
            raise StoreError(
                f"No database {self.cfg.database!r} on server {self.cfg.server}. "
                f"Found databases: {sorted(names)}"
            )

    def _check_collection(self) -> None:
        try:
            names = self._db.list_collection_names()
        except PyMongoError as e:
            raise StoreError(f"Failed to list collections in database {self.cfg.database!r}: {e}") from e
        if self.cfg.collection not in names:
            raise StoreError(
                f"No collection {self.cfg.collection!r} in database {self.cfg.database!r} "
                f"on server {self.cfg.server}. Found collections: {sorted(names)}"
            )

    def read_records(self) -> list[dict[str, Any]]:
        self._check_database()
        self._check_collection()
        try:
            records = list(self._collection.find({}, {"_id": 0}))
        except PyMongoError as e:
            raise StoreError(f"Failed to read collection {self.target}: {e}") from e
        logger.debug("Fetched %d documents from %s", len(records), self.target)
        return records

    def replace_records(self, records: Sequence[Mapping[str, Any]]) -> int:
        self._check_database()
        # insert_many adds _id to the documents it is given; hand it copies
        docs = [dict(r) for r in records]
        try:
            deleted = self._collection.delete_many({}).deleted_count
            logger.info("Deleted %d existing documents from %s", deleted, self.target)
            if not docs:
                return 0
            result = self._collection.insert_many(docs)
        except PyMongoError as e:
            raise StoreError(f"Failed to write collection {self.target}: {e}") from e
        return len(result.inserted_ids)

    def close(self) -> None:
        self.client.close()


register_store(StoreBackend.MONGO, MongoRecordStore)
