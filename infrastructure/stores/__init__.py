"""
Record stores: the flat taxonomy record source/sink.

Implements the adapter pattern for different storage backends:
- MongoDB (one document per taxonomy entry)
- Memory (for tests and dry runs)

All stores implement the RecordStore interface.
"""

from infrastructure.stores.base import RecordStore, StoreError
from infrastructure.stores.factory import make_store
from infrastructure.stores.memory import MemoryRecordStore

__all__ = [
    # Abstract base
    "RecordStore",
    "StoreError",
    # Concrete implementations
    "MemoryRecordStore",
    # Factory (most commonly used)
    "make_store",
]
