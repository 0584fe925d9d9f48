"""
Non-fatal diagnostics produced while validating or converting a taxonomy.

Advisories are returned to the caller as values rather than written to a
logger, so the domain layer stays free of I/O and tests can assert on them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class AdvisoryKind(str, Enum):
    TITLE_CASE = "title_case"
    PARENT_LOOP = "parent_loop"


@dataclass(frozen=True)
class Advisory:
    """A single warning about an accepted value."""

    kind: AdvisoryKind
    subject: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class Advisories:
    """Collecting sink passed down through parsing and conversion calls."""

    items: list[Advisory] = field(default_factory=list)

    def add(self, kind: AdvisoryKind, subject: str, message: str) -> None:
        advisory = Advisory(kind=kind, subject=str(subject), message=message)
        # Walks from several descendants can hit the same loop
        if advisory not in self.items:
            self.items.append(advisory)

    def of_kind(self, kind: AdvisoryKind) -> list[Advisory]:
        return [a for a in self.items if a.kind is kind]

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


@dataclass(frozen=True)
class Checked(Generic[T]):
    """A successfully validated value together with the advisories it raised."""

    value: T
    advisories: tuple[Advisory, ...] = ()

    @property
    def clean(self) -> bool:
        return not self.advisories
