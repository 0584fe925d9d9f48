"""
Taxonomy model: validated types, flat/tree forms and the conversions between them.

All functions in this module are pure (no database or file I/O).
"""

from domain.taxonomy.advisories import Advisories, Advisory, AdvisoryKind, Checked
from domain.taxonomy.entries import CollectionEntry, MapEntry
from domain.taxonomy.errors import (
    DecodeError,
    DuplicateEntryError,
    IdentifierError,
    InconsistentPathError,
    InvalidValueError,
    MalformedPathError,
    MissingEntryError,
    ParentCycleError,
    RecordError,
    Rule,
    TaxonomyError,
    TitleError,
)
from domain.taxonomy.forms import TaxonomyCollection, TaxonomyMap
from domain.taxonomy.identifiers import Identifier, TaxonomyPath, Title, to_kebab_case
from domain.taxonomy.loader import parse_collection_entry, parse_collection_records

__all__ = [
    # Validated types
    "Identifier",
    "Title",
    "TaxonomyPath",
    "to_kebab_case",
    # Entries and forms
    "CollectionEntry",
    "MapEntry",
    "TaxonomyCollection",
    "TaxonomyMap",
    # Record parsing
    "parse_collection_entry",
    "parse_collection_records",
    # Advisories
    "Advisories",
    "Advisory",
    "AdvisoryKind",
    "Checked",
    # Errors
    "TaxonomyError",
    "InvalidValueError",
    "IdentifierError",
    "TitleError",
    "Rule",
    "MissingEntryError",
    "ParentCycleError",
    "DuplicateEntryError",
    "InconsistentPathError",
    "MalformedPathError",
    "RecordError",
    "DecodeError",
]
