"""Parse raw store records into a TaxonomyCollection."""

from collections.abc import Iterable, Mapping
from typing import Any

from domain.taxonomy.advisories import Advisories
from domain.taxonomy.entries import CollectionEntry
from domain.taxonomy.errors import DuplicateEntryError, InvalidValueError, RecordError
from domain.taxonomy.forms import TaxonomyCollection
from domain.taxonomy.identifiers import Identifier, Title


def _record_label(record: Mapping[str, Any], index: int) -> str:
    name = record.get("name")
    return repr(name) if isinstance(name, str) and name else f"#{index}"


def _require_str(record: Mapping[str, Any], field: str, label: str) -> str:
    if field not in record:
        raise RecordError(field, label, "missing field")
    value = record[field]
    if not isinstance(value, str):
        raise RecordError(field, label, f"expected a string, got {type(value).__name__}")
    return value


def parse_collection_entry(
    record: Mapping[str, Any],
    index: int = 0,
    advisories: Advisories | None = None,
) -> CollectionEntry:
    """
    Parse a single raw record into a CollectionEntry.

    This is a pure function - it does NOT perform database I/O.
    The records are read in infrastructure.stores.

    Args:
        record: Mapping with name, parent, className, title and synonyms
        index: Position of the record in its source, used when it has no name
        advisories: Optional sink for title-case advisories

    Returns:
        CollectionEntry

    Raises:
        RecordError: Naming the first field that failed and the record it belongs to
    """
    label = _record_label(record, index)

    def field_value(field: str, parse):
        raw = _require_str(record, field, label)
        try:
            return parse(raw)
        except InvalidValueError as e:
            raise RecordError(field, label, str(e)) from e

    name = field_value("name", Identifier.parse)

    raw_parent = record.get("parent")
    parent = None if raw_parent is None else field_value("parent", Identifier.parse)

    class_name = _require_str(record, "className", label)
    title = field_value("title", lambda raw: Title.parse(raw, advisories))

    if "synonyms" not in record:
        raise RecordError("synonyms", label, "missing field")
    synonyms_raw = record["synonyms"]
    if not isinstance(synonyms_raw, list | tuple):
        raise RecordError("synonyms", label, f"expected an array, got {type(synonyms_raw).__name__}")
    for s in synonyms_raw:
        if not isinstance(s, str):
            raise RecordError("synonyms", label, f"Invalid type {type(s).__name__} in synonyms")

    return CollectionEntry(
        class_name=class_name,
        name=name,
        parent=parent,
        synonyms=list(synonyms_raw),
        title=title,
    )


def parse_collection_records(
    records: Iterable[Mapping[str, Any]],
    advisories: Advisories | None = None,
) -> TaxonomyCollection:
    """
    Parse every raw record, keyed by entry name.

    Raises:
        RecordError: On the first record field that fails validation
        DuplicateEntryError: If two records share a name
    """
    entries: dict[Identifier, CollectionEntry] = {}
    first_seen: dict[Identifier, int] = {}
    for index, record in enumerate(records):
        entry = parse_collection_entry(record, index, advisories)
        if entry.name in entries:
            raise DuplicateEntryError(entry.name, [f"#{first_seen[entry.name]}", f"#{index}"])
        entries[entry.name] = entry
        first_seen[entry.name] = index
    return TaxonomyCollection(entries=entries)
