"""Error types raised by taxonomy validation and conversion."""

from enum import Enum


class TaxonomyError(Exception):
    """Base class for every fatal taxonomy error."""


class Rule(str, Enum):
    """Validation rule violated by a raw value."""

    EMPTY = "empty"
    CONTAINS_SEPARATOR = "contains_separator"
    NOT_KEBAB_CASE = "not_kebab_case"
    SURROUNDING_WHITESPACE = "surrounding_whitespace"


class InvalidValueError(TaxonomyError, ValueError):
    """A raw string failed validation at construction time."""

    kind = "value"

    def __init__(self, raw: str, rule: Rule, message: str) -> None:
        super().__init__(message)
        self.raw = raw
        self.rule = rule


class IdentifierError(InvalidValueError):
    kind = "identifier"


class TitleError(InvalidValueError):
    kind = "title"


class MissingEntryError(TaxonomyError):
    """A parent pointer references an identifier absent from the collection."""

    def __init__(self, identifier: str, child: str | None = None) -> None:
        msg = f"Missing '{identifier}'"
        if child is not None:
            msg += f" (parent of '{child}')"
        super().__init__(msg)
        self.identifier = identifier
        self.child = child


class ParentCycleError(TaxonomyError):
    """Parent pointers loop back onto an entry already visited."""

    def __init__(self, chain: list[str]) -> None:
        super().__init__("Parent cycle detected: " + " -> ".join(chain))
        self.chain = list(chain)


class DuplicateEntryError(TaxonomyError):
    """Two entries resolve to the same identifier."""

    def __init__(self, identifier: str, sources: list[str] | None = None) -> None:
        msg = f"Duplicate entry '{identifier}'"
        if sources:
            msg += f" from {sources!r}"
        super().__init__(msg)
        self.identifier = identifier
        self.sources = list(sources or [])


class MalformedPathError(TaxonomyError):
    """A path does not decompose into an entry name."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Missing path name for {path!r}")
        self.path = path


class RecordError(TaxonomyError):
    """A raw record field failed to parse; wraps the underlying cause."""

    def __init__(self, field: str, record: str, reason: str) -> None:
        super().__init__(f"Record {record}: field {field!r}: {reason}")
        self.field = field
        self.record = record
        self.reason = reason


class DecodeError(TaxonomyError):
    """Text could not be decoded into a taxonomy map."""

    def __init__(self, fmt: str, reason: str, key: str | None = None) -> None:
        where = f" at key {key!r}" if key is not None else ""
        super().__init__(f"Invalid {fmt} taxonomy{where}: {reason}")
        self.format = fmt
        self.key = key
        self.reason = reason


class InconsistentPathError(TaxonomyError):
    """A map key disagrees with the ancestry its entries actually resolve to."""

    def __init__(self, path: str, resolved: str) -> None:
        super().__init__(f"Path {path!r} resolves to {resolved!r}; are its ancestors listed under other paths?")
        self.path = path
        self.resolved = resolved
