from __future__ import annotations

from typing import List

from protoc_typegen.config import GeneratorOptions
from protoc_typegen.mapper import enum_type_name, map_field, materialize_enum, message_type_name
from protoc_typegen.models import Declaration, NamedField, Record
from protoc_typegen.schema import Registry, SchemaEnum, SchemaFile, SchemaMessage


def enum_declaration(enum: SchemaEnum, options: GeneratorOptions) -> Declaration:
    return Declaration(
        public_name=enum_type_name(enum, options),
        body=materialize_enum(enum),
    )


def message_declaration(
    message: SchemaMessage,
    registry: Registry,
    options: GeneratorOptions,
) -> Declaration:
    fields: List[NamedField] = [
        map_field(f, registry, options, message_name=message.full_name.lstrip("."))
        for f in message.fields
    ]
    return Declaration(
        public_name=message_type_name(message, options),
        body=Record(fields=fields),
    )


def build_declarations(
    schema_file: SchemaFile,
    registry: Registry,
    options: GeneratorOptions,
) -> List[Declaration]:
    """Build every declaration for a file: enums first, then messages.

    Nested declarations are taken from the file's flat lists as-is. The first
    resolution error aborts the whole file.
    """
    declarations: List[Declaration] = []
    for enum in schema_file.enums:
        declarations.append(enum_declaration(enum, options))
    for message in schema_file.messages:
        declarations.append(message_declaration(message, registry, options))
    return declarations
