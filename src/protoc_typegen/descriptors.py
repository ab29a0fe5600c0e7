"""Build the schema registry from protobuf descriptors."""

from __future__ import annotations

import os
import subprocess
import tempfile
from typing import Iterable, List, Optional

from google.protobuf import descriptor_pb2 as d2

from protoc_typegen.schema import (
    EnumValue,
    Registry,
    SchemaEnum,
    SchemaField,
    SchemaFile,
    SchemaMessage,
)


def _build_enum(desc: d2.EnumDescriptorProto, scope: str, fdp: d2.FileDescriptorProto) -> SchemaEnum:
    return SchemaEnum(
        name=desc.name,
        full_name=f"{scope}.{desc.name}",
        package=fdp.package,
        values=[EnumValue(name=v.name) for v in desc.value],
        file_name=fdp.name,
    )


def _build_field(fd: d2.FieldDescriptorProto) -> SchemaField:
    return SchemaField(
        name=fd.name,
        kind=fd.type,
        type_name=fd.type_name,
        is_repeated=fd.label == d2.FieldDescriptorProto.LABEL_REPEATED,
    )


def _collect_messages(
    descs: Iterable[d2.DescriptorProto],
    scope: str,
    fdp: d2.FileDescriptorProto,
    messages: List[SchemaMessage],
    enums: List[SchemaEnum],
) -> None:
    # Pre-order: each message precedes the messages nested inside it.
    for desc in descs:
        full_name = f"{scope}.{desc.name}"
        messages.append(SchemaMessage(
            name=desc.name,
            full_name=full_name,
            package=fdp.package,
            fields=[_build_field(fd) for fd in desc.field],
            file_name=fdp.name,
        ))
        _collect_messages(desc.nested_type, full_name, fdp, messages, enums)
        enums.extend(_build_enum(e, full_name, fdp) for e in desc.enum_type)


def build_schema_file(fdp: d2.FileDescriptorProto) -> SchemaFile:
    """Flatten a FileDescriptorProto into a SchemaFile.

    Top-level enums come first, followed by nested enums in message order.
    """
    scope = f".{fdp.package}" if fdp.package else ""
    messages: List[SchemaMessage] = []
    enums: List[SchemaEnum] = [_build_enum(e, scope, fdp) for e in fdp.enum_type]
    _collect_messages(fdp.message_type, scope, fdp, messages, enums)
    return SchemaFile(
        name=fdp.name,
        package=fdp.package,
        messages=messages,
        enums=enums,
    )


def build_registry(file_protos: Iterable[d2.FileDescriptorProto]) -> Registry:
    return Registry([build_schema_file(fdp) for fdp in file_protos])


def load_descriptor_set(proto_path: str, includes: Optional[List[str]] = None) -> d2.FileDescriptorSet:
    """Compile a .proto with protoc and return the resulting descriptor set."""
    search_paths = [os.path.dirname(os.path.abspath(proto_path))] + list(includes or [])

    # de-dup while preserving order
    seen = set()
    inc_args: List[str] = []
    for inc in search_paths:
        if inc and inc not in seen:
            seen.add(inc)
            inc_args.extend(["-I", inc])

    with tempfile.TemporaryDirectory() as td:
        desc_path = os.path.join(td, "descriptor_set.pb")
        cmd = ["protoc", "--include_imports", f"--descriptor_set_out={desc_path}"] + inc_args + [proto_path]
        try:
            subprocess.run(cmd, check=True, capture_output=True)
        except FileNotFoundError as e:
            raise RuntimeError("'protoc' not found. Please install Protocol Buffers compiler and ensure it is in PATH.") from e
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"protoc failed: {e.stderr.decode('utf-8', errors='ignore')}") from e

        fds = d2.FileDescriptorSet()
        with open(desc_path, "rb") as f:
            fds.ParseFromString(f.read())
    return fds


def find_target_file(fds: d2.FileDescriptorSet, proto_path: str) -> d2.FileDescriptorProto:
    """Locate the descriptor for ``proto_path`` in a set produced with --include_imports."""
    base = os.path.basename(proto_path)
    # protoc lists imports before the file that imports them
    for f in reversed(fds.file):
        if os.path.basename(f.name) == base:
            return f
    if len(fds.file) == 1:
        return fds.file[0]
    names = ", ".join(ff.name for ff in fds.file)
    raise RuntimeError(f"Could not locate target file '{base}' in descriptor set. Found: {names}")
