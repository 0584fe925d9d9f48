"""Load/store/check workflows between the record store and the editable document."""

import logging

from application.serialize import dump_taxonomy_map, parse_taxonomy_map
from domain.taxonomy import Advisories, Advisory, parse_collection_records
from infrastructure.config import TextFormat
from infrastructure.stores import RecordStore

logger = logging.getLogger(__name__)


def log_advisories(advisories: Advisories) -> None:
    """Surface every collected advisory as a warning."""
    for advisory in advisories:
        logger.warning("%s", advisory.message)


def load_taxonomy(store: RecordStore, fmt: TextFormat, advisories: Advisories | None = None) -> str:
    """
    Read the flat collection from `store` and render it as an editable document.

    Raises:
        RecordError: If a record fails validation
        MissingEntryError / ParentCycleError: If a parent chain does not resolve
    """
    sink = advisories if advisories is not None else Advisories()

    records = store.read_records()
    logger.info("Read %d records from %s", len(records), store.target)

    collection = parse_collection_records(records, sink)
    taxonomy_map = collection.to_map(sink)
    log_advisories(sink)

    text = dump_taxonomy_map(taxonomy_map, fmt)
    logger.info("Converted %d entries to %s", len(taxonomy_map), fmt.value)
    return text


def store_taxonomy(
    store: RecordStore,
    text: str,
    fmt: TextFormat,
    *,
    verify: bool = True,
    advisories: Advisories | None = None,
) -> int:
    """
    Decode an editable document and replace the collection in `store` with it.

    With `verify` (the default) the document must resolve back to exactly the
    same paths before anything is written; without it, only the per-path
    conversion runs, so dangling parents reach the store unchecked.

    Returns:
        Number of records written
    """
    sink = advisories if advisories is not None else Advisories()

    taxonomy_map = parse_taxonomy_map(text, fmt, sink)
    logger.info("Decoded %d %s entries", len(taxonomy_map), fmt.value)

    collection = taxonomy_map.verify(sink) if verify else taxonomy_map.into_collection()
    log_advisories(sink)

    written = store.replace_records(collection.to_records())
    logger.info("Wrote %d records to %s", written, store.target)
    return written


def check_taxonomy(text: str, fmt: TextFormat) -> list[Advisory]:
    """
    Validate an editable document without touching any store.

    Returns:
        Advisories raised along the way (empty when the document is clean)

    Raises:
        TaxonomyError: On the first fatal problem
    """
    sink = Advisories()
    taxonomy_map = parse_taxonomy_map(text, fmt, sink)
    taxonomy_map.verify(sink)
    log_advisories(sink)
    logger.info("%d entries OK (%d advisories)", len(taxonomy_map), len(sink))
    return list(sink)
