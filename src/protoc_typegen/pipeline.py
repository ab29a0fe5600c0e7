from __future__ import annotations

import sys
from pathlib import PurePosixPath
from typing import Dict

from protoc_typegen.config import GeneratorOptions
from protoc_typegen.generator.elm_generator import generate_elm_types
from protoc_typegen.generator.flow_generator import generate_flow_types
from protoc_typegen.schema import Registry

ELM = "elm"
FLOW = "flow"

FILE_EXTENSIONS: Dict[str, str] = {
    ELM: ".elm",
    FLOW: ".js",
}


def output_file_name(proto_name: str, dialect: str) -> str:
    """``foo/bar.proto`` -> ``foo/bar.elm`` (or ``.js`` for Flow)."""
    if dialect not in FILE_EXTENSIONS:
        raise ValueError(f"Unknown dialect '{dialect}'. Expected one of: {sorted(FILE_EXTENSIONS)}")
    return str(PurePosixPath(proto_name).with_suffix(FILE_EXTENSIONS[dialect]))


def generate(
    file_name: str,
    registry: Registry,
    dialect: str,
    options: GeneratorOptions = GeneratorOptions(),
) -> str:
    """Render one registered .proto file in the requested dialect."""
    if dialect == ELM:
        if options.embed_enums:
            print("Warning: embed_enums is not supported by the elm dialect; ignoring", file=sys.stderr)
        return generate_elm_types(file_name, registry, options.always_qualify_type_names)
    if dialect == FLOW:
        return generate_flow_types(
            file_name,
            registry,
            options.always_qualify_type_names,
            options.embed_enums,
        )
    raise ValueError(f"Unknown dialect '{dialect}'. Expected one of: {sorted(FILE_EXTENSIONS)}")
