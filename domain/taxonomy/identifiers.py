"""
Validated string types: Identifier, Title and TaxonomyPath.

Each type is a `str` subclass that validates on construction, so a value of
the type is always well-formed. They plug into Pydantic via
`__get_pydantic_core_schema__` and serialize as plain strings.
"""

import re
from collections.abc import Iterable
from typing import Any

from pydantic_core import core_schema
from titlecase import titlecase

from domain.taxonomy.advisories import Advisories, AdvisoryKind, Checked
from domain.taxonomy.errors import IdentifierError, Rule, TitleError

SEPARATOR = "/"

_WORD_SPLIT = re.compile(r"[\W_]+")


def to_kebab_case(value: str) -> str:
    """
    Normalize a string to kebab-case.

    Words are split on any non-alphanumeric run and on case boundaries
    (``fooBar`` -> ``foo-bar``, ``XMLHttp`` -> ``xml-http``), lowercased and
    joined with single hyphens.

    Examples:
        >>> to_kebab_case("UpperCase")
        'upper-case'
        >>> to_kebab_case("not_kebab")
        'not-kebab'
    """
    words: list[str] = []
    for chunk in _WORD_SPLIT.split(value):
        word = ""
        for i, ch in enumerate(chunk):
            prev = chunk[i - 1] if i else ""
            nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
            boundary = ch.isupper() and (prev.islower() or (prev.isupper() and nxt.islower()))
            if word and boundary:
                words.append(word)
                word = ""
            word += ch
        if word:
            words.append(word)
    return "-".join(w.lower() for w in words)


class _ValidatedStr(str):
    """Shared Pydantic hooks for the validated string types."""

    @classmethod
    def _from_pydantic(cls, value: Any, info: core_schema.ValidationInfo) -> "_ValidatedStr":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.with_info_plain_validator_function(
            cls._from_pydantic,
            serialization=core_schema.to_string_ser_schema(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class Identifier(_ValidatedStr):
    """A kebab-case token that cannot contain the path separator."""

    def __new__(cls, value: str) -> "Identifier":
        if not value:
            raise IdentifierError(value, Rule.EMPTY, "Empty identifier")
        if SEPARATOR in value:
            raise IdentifierError(value, Rule.CONTAINS_SEPARATOR, f"Identifier {value!r} contains a slash")
        if to_kebab_case(value) != value:
            raise IdentifierError(value, Rule.NOT_KEBAB_CASE, f"Identifier {value!r} is not kebab-case")
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, raw: str) -> "Identifier":
        return cls(raw)


class Title(_ValidatedStr):
    """
    A human-readable display title.

    Surrounding whitespace is rejected outright. A title that differs from its
    title-cased form is still accepted, but an advisory is recorded in the
    optional `advisories` sink.
    """

    def __new__(cls, value: str, advisories: Advisories | None = None) -> "Title":
        if value.strip() != value:
            raise TitleError(
                value,
                Rule.SURROUNDING_WHITESPACE,
                f"Title {value!r} has preceding or trailing spaces",
            )
        expected = titlecase(value)
        if expected != value and advisories is not None:
            advisories.add(
                AdvisoryKind.TITLE_CASE,
                value,
                f"Title {value!r} should use title case {expected!r}",
            )
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, raw: str, advisories: Advisories | None = None) -> "Title":
        return cls(raw, advisories)

    @classmethod
    def check(cls, raw: str) -> Checked["Title"]:
        """Validate `raw`, returning the title together with any advisories."""
        sink = Advisories()
        title = cls(raw, sink)
        return Checked(value=title, advisories=tuple(sink))

    @classmethod
    def _from_pydantic(cls, value: Any, info: core_schema.ValidationInfo) -> "Title":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {type(value).__name__}")
        context = info.context or {}
        return cls(value, context.get("advisories"))


class TaxonomyPath(_ValidatedStr):
    """
    A separator-joined sequence of identifiers, root first.

    The last segment is the entry's own name; the segment before it is the
    parent. Parsing a raw string validates every segment.
    """

    separator = SEPARATOR

    def __new__(cls, value: str) -> "TaxonomyPath":
        for segment in value.split(cls.separator):
            Identifier(segment)
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, raw: str) -> "TaxonomyPath":
        return cls(raw)

    @classmethod
    def from_identifiers(cls, identifiers: Iterable[Identifier]) -> "TaxonomyPath":
        parts = []
        for ident in identifiers:
            if not isinstance(ident, Identifier):
                ident = Identifier(ident)
            parts.append(str(ident))
        # Segments are already validated; an empty sequence gives the empty path.
        return str.__new__(cls, cls.separator.join(parts))

    @property
    def segments(self) -> tuple[Identifier, ...]:
        if not self:
            return ()
        return tuple(Identifier(s) for s in self.split(self.separator))

    def name(self) -> Identifier | None:
        segments = self.segments
        return segments[-1] if segments else None

    def parent(self) -> Identifier | None:
        segments = self.segments
        return segments[-2] if len(segments) > 1 else None
