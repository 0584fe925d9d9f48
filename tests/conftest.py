import pytest

from domain.taxonomy import CollectionEntry
from infrastructure.config import StoreConfig
from infrastructure.stores import MemoryRecordStore


def _make_entry(name: str, parent: str | None = None, *, title: str | None = None, synonyms=(), class_name="skill"):
    return CollectionEntry(
        class_name=class_name,
        name=name,
        parent=parent,
        synonyms=list(synonyms),
        title=title or name.replace("-", " ").title(),
    )


@pytest.fixture
def make_entry():
    return _make_entry


@pytest.fixture
def records() -> list[dict]:
    return [
        {"name": "software", "parent": None, "className": "skill", "title": "Software", "synonyms": []},
        {
            "name": "web-development",
            "parent": "software",
            "className": "skill",
            "title": "Web Development",
            "synonyms": ["web dev", "www"],
        },
        {"name": "frontend", "parent": "web-development", "className": "skill", "title": "Frontend", "synonyms": ["ui"]},
        {"name": "civic-issues", "parent": None, "className": "issue", "title": "Civic Issues", "synonyms": []},
    ]


@pytest.fixture
def memory_store(records) -> MemoryRecordStore:
    return MemoryRecordStore(cfg=StoreConfig(backend="memory"), records=records)
