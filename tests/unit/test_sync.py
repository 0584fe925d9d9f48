import json
import tomllib

import pytest

from application.sync import check_taxonomy, load_taxonomy, store_taxonomy
from domain.taxonomy import Advisories, AdvisoryKind, DecodeError, MissingEntryError, RecordError
from infrastructure.config import StoreConfig, TextFormat
from infrastructure.stores import MemoryRecordStore


def _by_name(records: list[dict]) -> dict[str, dict]:
    return {r["name"]: r for r in records}


def test_load_renders_path_keyed_document(memory_store) -> None:
    text = load_taxonomy(memory_store, TextFormat.TOML)
    data = tomllib.loads(text)
    assert set(data) == {
        "software",
        "software/web-development",
        "software/web-development/frontend",
        "civic-issues",
    }
    assert data["software/web-development"]["synonyms"] == ["web dev", "www"]


def test_load_then_store_reproduces_records(memory_store, records) -> None:
    text = load_taxonomy(memory_store, TextFormat.JSON)
    target = MemoryRecordStore(cfg=StoreConfig(backend="memory"))

    written = store_taxonomy(target, text, TextFormat.JSON)

    assert written == len(records)
    assert _by_name(target.records) == _by_name(records)


def test_load_collects_advisories(records) -> None:
    records[0]["title"] = "software"
    records.append({"name": "loop", "parent": "loop", "className": "skill", "title": "Loop", "synonyms": []})
    store = MemoryRecordStore(cfg=StoreConfig(backend="memory"), records=records)
    advisories = Advisories()

    load_taxonomy(store, TextFormat.TOML, advisories)

    assert {a.kind for a in advisories} == {AdvisoryKind.TITLE_CASE, AdvisoryKind.PARENT_LOOP}


def test_load_fails_on_dangling_parent(records) -> None:
    records.append({"name": "orphan", "parent": "ghost", "className": "skill", "title": "Orphan", "synonyms": []})
    store = MemoryRecordStore(cfg=StoreConfig(backend="memory"), records=records)
    with pytest.raises(MissingEntryError) as excinfo:
        load_taxonomy(store, TextFormat.TOML)
    assert excinfo.value.identifier == "ghost"


def test_load_fails_on_invalid_record(records) -> None:
    records[1]["name"] = "Web_Development"
    store = MemoryRecordStore(cfg=StoreConfig(backend="memory"), records=records)
    with pytest.raises(RecordError):
        load_taxonomy(store, TextFormat.TOML)


def test_store_replaces_whole_collection(memory_store) -> None:
    text = json.dumps({"only": {"class_name": "skill", "synonyms": [], "title": "Only"}})
    written = store_taxonomy(memory_store, text, TextFormat.JSON)
    assert written == 1
    assert memory_store.records == [
        {"name": "only", "parent": None, "className": "skill", "title": "Only", "synonyms": []}
    ]


def test_store_refuses_unresolvable_document_without_writing(memory_store, records) -> None:
    text = json.dumps({"x/y": {"class_name": "skill", "synonyms": [], "title": "Y"}})
    with pytest.raises(MissingEntryError):
        store_taxonomy(memory_store, text, TextFormat.JSON)
    assert memory_store.records == records


def test_store_without_verify_writes_dangling_parent(memory_store) -> None:
    text = json.dumps({"x/y": {"class_name": "skill", "synonyms": [], "title": "Y"}})
    assert store_taxonomy(memory_store, text, TextFormat.JSON, verify=False) == 1
    assert memory_store.records[0]["parent"] == "x"


def test_store_rejects_malformed_document_without_writing(memory_store, records) -> None:
    with pytest.raises(DecodeError):
        store_taxonomy(memory_store, "{", TextFormat.JSON)
    assert memory_store.records == records


def test_check_returns_advisories() -> None:
    text = json.dumps(
        {
            "a": {"class_name": "skill", "synonyms": [], "title": "A"},
            "a/b": {"class_name": "skill", "synonyms": [], "title": "lower b"},
        }
    )
    advisories = check_taxonomy(text, TextFormat.JSON)
    assert [a.kind for a in advisories] == [AdvisoryKind.TITLE_CASE]


def test_check_clean_document_has_no_advisories(memory_store) -> None:
    text = load_taxonomy(memory_store, TextFormat.TOML)
    assert check_taxonomy(text, TextFormat.TOML) == []
