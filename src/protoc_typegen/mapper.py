"""Map protobuf fields onto type-tree nodes."""

from __future__ import annotations

from google.protobuf import descriptor_pb2 as d2

from protoc_typegen.config import GeneratorOptions
from protoc_typegen.models import (
    BOOLEAN,
    FLOAT,
    INTEGER,
    STRING,
    UNKNOWN,
    Alternatives,
    ArrayOf,
    NamedField,
    Primitive,
    Reference,
    TypeNode,
)
from protoc_typegen.naming import qualify_name
from protoc_typegen.schema import (
    Registry,
    SchemaEnum,
    SchemaField,
    SchemaMessage,
    SchemaResolutionError,
)

_T = d2.FieldDescriptorProto

FLOAT_KINDS = frozenset({_T.TYPE_DOUBLE, _T.TYPE_FLOAT})

INTEGER_KINDS = frozenset({
    _T.TYPE_INT32, _T.TYPE_INT64,
    _T.TYPE_UINT32, _T.TYPE_UINT64,
    _T.TYPE_SINT32, _T.TYPE_SINT64,
    _T.TYPE_FIXED32, _T.TYPE_FIXED64,
    _T.TYPE_SFIXED32, _T.TYPE_SFIXED64,
})

# Binary payloads are rendered as text; consumers rely on this shape.
BYTES_AS_STRING = Primitive(STRING)

# Groups are a legacy construct and are not materialized.
GROUP_PLACEHOLDER = Primitive(UNKNOWN)


def unknown_kind_fallback(field: SchemaField) -> Primitive:
    """Best-effort token for a kind this mapper does not recognise."""
    return Primitive(field.type_name or UNKNOWN)


def message_type_name(message: SchemaMessage, options: GeneratorOptions) -> str:
    return qualify_name(message.full_name, message.package, options.always_qualify_type_names)


def enum_type_name(enum: SchemaEnum, options: GeneratorOptions) -> str:
    return qualify_name(enum.full_name, enum.package, options.always_qualify_type_names)


def materialize_enum(enum: SchemaEnum) -> Alternatives:
    """One alternative per declared enum value, in declared order."""
    return Alternatives(members=[v.name for v in enum.values])


def _base_type(
    field: SchemaField,
    registry: Registry,
    options: GeneratorOptions,
) -> TypeNode:
    kind = field.kind
    if kind in FLOAT_KINDS:
        return Primitive(FLOAT)
    if kind in INTEGER_KINDS:
        return Primitive(INTEGER)
    if kind == _T.TYPE_BOOL:
        return Primitive(BOOLEAN)
    if kind == _T.TYPE_STRING:
        return Primitive(STRING)
    if kind == _T.TYPE_BYTES:
        return BYTES_AS_STRING
    if kind == _T.TYPE_GROUP:
        return GROUP_PLACEHOLDER
    if kind == _T.TYPE_MESSAGE:
        message = registry.lookup_message(field.type_name)
        return Reference(message_type_name(message, options))
    if kind == _T.TYPE_ENUM:
        enum = registry.lookup_enum(field.type_name)
        if options.embed_enums:
            return materialize_enum(enum)
        return Reference(enum_type_name(enum, options))
    return unknown_kind_fallback(field)


def map_field(
    field: SchemaField,
    registry: Registry,
    options: GeneratorOptions,
    message_name: str = "",
) -> NamedField:
    """Translate one schema field into a named type-tree field.

    Raises SchemaResolutionError, annotated with the field, when a message or
    enum reference cannot be resolved.
    """
    try:
        field_type = _base_type(field, registry, options)
    except SchemaResolutionError as e:
        raise SchemaResolutionError(
            e.type_name,
            kind=e.kind,
            field_name=field.name,
            message_name=message_name or None,
        ) from e

    if field.is_repeated:
        field_type = ArrayOf(field_type)
    return NamedField(name=field.name, type=field_type)
