"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the load (store -> document) and store (document -> store)
workflows plus offline document checks.
"""

from application.serialize import dump_taxonomy_map, parse_taxonomy_map
from application.sync import check_taxonomy, load_taxonomy, log_advisories, store_taxonomy

__all__ = [
    # Main workflows
    "load_taxonomy",
    "store_taxonomy",
    "check_taxonomy",
    "log_advisories",
    # Text encoding
    "dump_taxonomy_map",
    "parse_taxonomy_map",
]
