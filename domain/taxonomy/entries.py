"""Flat (parent-pointer) and tree (path-keyed) taxonomy entries."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.taxonomy.identifiers import Identifier, Title


class MapEntry(BaseModel):
    """A taxonomy entry in tree form; its ancestry lives in the owning path key."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    class_name: str = Field(..., description="Class of this taxonomy entry.")
    synonyms: list[str] = Field(..., description="Keywords for this taxonomy entry.")
    title: Title = Field(..., description="Human-readable title for this taxonomy entry.")


class CollectionEntry(BaseModel):
    """A taxonomy entry in flat form, pointing at its parent by name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    class_name: str
    name: Identifier
    parent: Identifier | None = None
    synonyms: list[str] = Field(default_factory=list)
    title: Title

    def to_map_entry(self) -> MapEntry:
        return MapEntry(class_name=self.class_name, synonyms=list(self.synonyms), title=self.title)

    def to_record(self) -> dict[str, Any]:
        """Raw record layout used by the record store (camelCase, null parent for roots)."""
        return {
            "name": str(self.name),
            "parent": str(self.parent) if self.parent is not None else None,
            "className": self.class_name,
            "title": str(self.title),
            "synonyms": list(self.synonyms),
        }
