from google.protobuf import descriptor_pb2 as d2

from protoc_typegen.schema import (
    EnumValue,
    Registry,
    SchemaEnum,
    SchemaField,
    SchemaFile,
    SchemaMessage,
)

T = d2.FieldDescriptorProto


def make_field(name: str, kind: int = T.TYPE_STRING, type_name: str = "",
               is_repeated: bool = False) -> SchemaField:
    return SchemaField(name=name, kind=kind, type_name=type_name, is_repeated=is_repeated)


def make_message(name: str, fields: list, package: str = "example") -> SchemaMessage:
    return SchemaMessage(
        name=name.split(".")[-1],
        full_name=f".{package}.{name}" if package else f".{name}",
        package=package,
        fields=fields,
        file_name="example.proto",
    )


def make_enum(name: str, values: list, package: str = "example") -> SchemaEnum:
    return SchemaEnum(
        name=name.split(".")[-1],
        full_name=f".{package}.{name}" if package else f".{name}",
        package=package,
        values=[EnumValue(name=v) for v in values],
        file_name="example.proto",
    )


def make_registry(messages: list = None, enums: list = None,
                  package: str = "example", file_name: str = "example.proto") -> Registry:
    schema_file = SchemaFile(
        name=file_name,
        package=package,
        messages=messages or [],
        enums=enums or [],
    )
    return Registry([schema_file])


def person_registry() -> Registry:
    """One message Person{name, age} and one enum Status{ACTIVE, INACTIVE}."""
    person = make_message("Person", [
        make_field("name", T.TYPE_STRING),
        make_field("age", T.TYPE_INT32),
    ])
    status = make_enum("Status", ["ACTIVE", "INACTIVE"])
    return make_registry(messages=[person], enums=[status])
