"""Type-tree nodes shared by every output dialect."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

# Abstract primitive tokens. Renderers translate these into dialect syntax;
# any other token is emitted verbatim.
FLOAT = "float"
INTEGER = "integer"
BOOLEAN = "boolean"
STRING = "string"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class Primitive:
    """An opaque scalar token, e.g. ``integer`` or a raw proto type name."""

    name: str


@dataclass(frozen=True)
class ArrayOf:
    """A repeated field's element type."""

    element: TypeNode


@dataclass(frozen=True)
class Reference:
    """A reference to another declaration by its public name."""

    name: str


@dataclass(frozen=True)
class Alternatives:
    """A closed set of enum value names, in declared order."""

    members: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class NamedField:
    name: str
    type: TypeNode


@dataclass(frozen=True)
class Record:
    fields: List[NamedField] = field(default_factory=list)


TypeNode = Union[Primitive, ArrayOf, Reference, Alternatives, Record]


@dataclass(frozen=True)
class Declaration:
    """One top-level named type emitted for a message or an enum."""

    public_name: str
    body: TypeNode

    @property
    def is_alias(self) -> bool:
        # Records are structural aliases; enum alternatives are new types.
        return isinstance(self.body, Record)
