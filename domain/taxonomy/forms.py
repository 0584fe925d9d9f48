"""
The two shapes of a taxonomy and the conversions between them.

- TaxonomyCollection: flat form, entries keyed by their own identifier, each
  pointing at its parent by name. This is what the record store holds.
- TaxonomyMap: tree form, entries keyed by their full path. This is what gets
  written out as TOML/JSON for editing.

The collection mapping doubles as the lookup table for the parent walk, so
no linked node structure is ever built.
"""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.taxonomy.advisories import Advisories, AdvisoryKind
from domain.taxonomy.entries import CollectionEntry, MapEntry
from domain.taxonomy.errors import (
    DuplicateEntryError,
    InconsistentPathError,
    MalformedPathError,
    MissingEntryError,
    ParentCycleError,
)
from domain.taxonomy.identifiers import Identifier, TaxonomyPath


class TaxonomyCollection(BaseModel):
    """Taxonomy entries keyed by identifier."""

    model_config = ConfigDict(frozen=True)

    entries: dict[Identifier, CollectionEntry] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_keys(self) -> "TaxonomyCollection":
        for key, entry in self.entries.items():
            if key != entry.name:
                raise ValueError(f"Collection key {key!r} does not match entry name {entry.name!r}")
        return self

    @classmethod
    def from_entries(cls, entries: Iterable[CollectionEntry]) -> "TaxonomyCollection":
        keyed: dict[Identifier, CollectionEntry] = {}
        for entry in entries:
            if entry.name in keyed:
                raise DuplicateEntryError(entry.name)
            keyed[entry.name] = entry
        return cls(entries=keyed)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __getitem__(self, name: str) -> CollectionEntry:
        return self.entries[name]

    def values(self) -> Iterator[CollectionEntry]:
        return iter(self.entries.values())

    def full_path(self, entry: CollectionEntry, advisories: Advisories | None = None) -> TaxonomyPath:
        """
        Compute the root-to-leaf path of `entry` by walking parent pointers.

        An entry whose parent is itself is treated as a root (an advisory is
        recorded). Any longer loop raises ParentCycleError.

        Raises:
            MissingEntryError: If a parent pointer names an absent identifier
            ParentCycleError: If the walk revisits an entry
        """
        chain = [entry.name]
        seen = {entry.name}
        current = entry
        while current.parent is not None:
            if current.parent == current.name:
                if advisories is not None:
                    advisories.add(
                        AdvisoryKind.PARENT_LOOP,
                        current.name,
                        f"Parent loop detected for entry '{current.name}' - assuming None",
                    )
                break
            parent = self.entries.get(current.parent)
            if parent is None:
                raise MissingEntryError(current.parent, child=current.name)
            if parent.name in seen:
                raise ParentCycleError([*chain, parent.name])
            seen.add(parent.name)
            chain.append(parent.name)
            current = parent
        return TaxonomyPath.from_identifiers(reversed(chain))

    def to_map(self, advisories: Advisories | None = None) -> "TaxonomyMap":
        """Convert to the path-keyed tree form. Fails on the first unresolvable entry."""
        return TaxonomyMap(
            entries={self.full_path(entry, advisories): entry.to_map_entry() for entry in self.entries.values()}
        )

    def to_records(self) -> list[dict]:
        return [entry.to_record() for entry in self.entries.values()]


class TaxonomyMap(BaseModel):
    """Taxonomy entries keyed by full path."""

    model_config = ConfigDict(frozen=True)

    entries: dict[TaxonomyPath, MapEntry] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        return path in self.entries

    def __getitem__(self, path: str) -> MapEntry:
        return self.entries[path]

    def into_collection(self) -> TaxonomyCollection:
        """
        Convert back to the flat form.

        The entry name is the last path segment and the parent is the one
        before it (None for root-level paths).

        Raises:
            MalformedPathError: If a path yields no name
            DuplicateEntryError: If two paths end in the same identifier
        """
        keyed: dict[Identifier, CollectionEntry] = {}
        sources: dict[Identifier, TaxonomyPath] = {}
        for path, entry in self.entries.items():
            name = path.name()
            if name is None:
                raise MalformedPathError(path)
            if name in keyed:
                raise DuplicateEntryError(name, sorted([sources[name], path]))
            keyed[name] = CollectionEntry(
                class_name=entry.class_name,
                name=name,
                parent=path.parent(),
                synonyms=list(entry.synonyms),
                title=entry.title,
            )
            sources[name] = path
        return TaxonomyCollection(entries=keyed)

    def verify(self, advisories: Advisories | None = None) -> TaxonomyCollection:
        """
        Convert to the flat form and check it resolves back to the same paths.

        `into_collection` alone only looks at the last two segments of each
        path; this also catches parents that are not listed anywhere and keys
        whose leading segments contradict the parent chain.

        Raises:
            MissingEntryError: If a parent is not itself an entry
            ParentCycleError: If the parent pointers loop
            InconsistentPathError: If a key differs from its resolved path
        """
        collection = self.into_collection()
        for path in self.entries:
            resolved = collection.full_path(collection[path.name()], advisories)
            if resolved != path:
                raise InconsistentPathError(path, resolved)
        return collection
