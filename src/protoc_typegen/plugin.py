"""protoc plugin entry points: protoc-gen-elmtypes and protoc-gen-flowtypes."""

from __future__ import annotations

import sys

from google.protobuf.compiler import plugin_pb2

from protoc_typegen.config import GeneratorOptions
from protoc_typegen.descriptors import build_registry
from protoc_typegen.pipeline import ELM, FLOW, generate, output_file_name
from protoc_typegen.schema import SchemaResolutionError


def generate_code(
    request: plugin_pb2.CodeGeneratorRequest,
    dialect: str,
) -> plugin_pb2.CodeGeneratorResponse:
    """Render every requested file; any failure turns into ``response.error``."""
    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    try:
        options = GeneratorOptions.from_parameter(request.parameter)
        registry = build_registry(request.proto_file)
        outputs = [
            (output_file_name(name, dialect), generate(name, registry, dialect, options))
            for name in request.file_to_generate
        ]
    except (SchemaResolutionError, ValueError) as e:
        response.error = str(e)
        return response

    for name, content in outputs:
        out = response.file.add()
        out.name = name
        out.content = content
    return response


def _run(dialect: str) -> None:
    request_payload = sys.stdin.buffer.read()

    request = plugin_pb2.CodeGeneratorRequest()
    if request_payload:
        request.ParseFromString(request_payload)

    response = generate_code(request, dialect)
    if response.error:
        print(f"protoc-gen-{dialect}types: {response.error}", file=sys.stderr)
    sys.stdout.buffer.write(response.SerializeToString())


def main_elm() -> None:
    _run(ELM)


def main_flow() -> None:
    _run(FLOW)
