"""Resolved protobuf schema model and the by-name registry over it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


class SchemaResolutionError(Exception):
    """Raised when a type or file name cannot be resolved in the registry."""

    def __init__(
        self,
        type_name: str,
        kind: str = "message",
        field_name: Optional[str] = None,
        message_name: Optional[str] = None,
    ):
        self.type_name = type_name
        self.kind = kind
        self.field_name = field_name
        self.message_name = message_name
        text = f"Unresolved {kind} '{type_name}'"
        if field_name:
            owner = f" of message '{message_name}'" if message_name else ""
            text += f" referenced by field '{field_name}'{owner}"
        super().__init__(text)


def normalize_full_name(name: str) -> str:
    """Return a fully-qualified name with exactly one leading dot."""
    return "." + name.lstrip(".")


@dataclass
class SchemaField:
    """A message field.

    ``kind`` is the ``FieldDescriptorProto.Type`` number. ``type_name`` is the
    fully-qualified referenced name for message and enum fields.
    """

    name: str
    kind: int
    type_name: str = ""
    is_repeated: bool = False


@dataclass
class EnumValue:
    name: str


@dataclass
class SchemaMessage:
    name: str
    full_name: str
    package: str = ""
    fields: List[SchemaField] = field(default_factory=list)
    file_name: str = ""


@dataclass
class SchemaEnum:
    name: str
    full_name: str
    package: str = ""
    values: List[EnumValue] = field(default_factory=list)
    file_name: str = ""


@dataclass
class SchemaFile:
    """A resolved .proto file.

    ``messages`` and ``enums`` are flat lists that already include nested
    declarations, in declaration order.
    """

    name: str
    package: str = ""
    messages: List[SchemaMessage] = field(default_factory=list)
    enums: List[SchemaEnum] = field(default_factory=list)


class Registry:
    """Read-only lookup of files, messages and enums by name."""

    def __init__(self, files: Optional[List[SchemaFile]] = None):
        self._files: Dict[str, SchemaFile] = {}
        self._messages: Dict[str, SchemaMessage] = {}
        self._enums: Dict[str, SchemaEnum] = {}
        for f in files or []:
            self.add_file(f)

    def add_file(self, schema_file: SchemaFile) -> None:
        self._files[schema_file.name] = schema_file
        for msg in schema_file.messages:
            self._messages[normalize_full_name(msg.full_name)] = msg
        for enum in schema_file.enums:
            self._enums[normalize_full_name(enum.full_name)] = enum

    def lookup_file(self, name: str) -> SchemaFile:
        try:
            return self._files[name]
        except KeyError:
            raise SchemaResolutionError(name, kind="file") from None

    def lookup_message(self, full_name: str) -> SchemaMessage:
        try:
            return self._messages[normalize_full_name(full_name)]
        except KeyError:
            raise SchemaResolutionError(full_name, kind="message") from None

    def lookup_enum(self, full_name: str) -> SchemaEnum:
        try:
            return self._enums[normalize_full_name(full_name)]
        except KeyError:
            raise SchemaResolutionError(full_name, kind="enum") from None
