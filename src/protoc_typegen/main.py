from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from protoc_typegen.config import GeneratorOptions
from protoc_typegen.descriptors import build_registry, find_target_file, load_descriptor_set
from protoc_typegen.pipeline import ELM, FILE_EXTENSIONS, FLOW, generate
from protoc_typegen.schema import SchemaResolutionError


def _find_proto_files(root: str) -> List[str]:
    """Recursively find .proto files under root, sorted for deterministic output."""
    return sorted(str(p) for p in Path(root).rglob("*.proto"))


def generate_file(
    proto_path: str,
    out_dir: str,
    dialect: str,
    options: GeneratorOptions,
    includes: Optional[List[str]] = None,
) -> str:
    """Compile one .proto, render it and write ``<out_dir>/<stem><ext>``."""
    fds = load_descriptor_set(proto_path, includes)
    target = find_target_file(fds, proto_path)
    registry = build_registry(fds.file)
    source = generate(target.name, registry, dialect, options)

    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, Path(proto_path).stem + FILE_EXTENSIONS[dialect])
    Path(out_path).write_text(source, encoding="utf-8")
    return out_path


def run(
    proto: str,
    out_dir: str,
    dialect: str,
    options: GeneratorOptions,
    includes: Optional[List[str]] = None,
) -> List[str]:
    """Generate type declarations for a .proto file or every .proto under a directory."""
    if os.path.isdir(proto):
        inputs = _find_proto_files(proto)
        if not inputs:
            print(f"No .proto files found under directory: {proto}")
            return []
        # Let sibling files import each other by their path relative to the root.
        includes = [proto] + list(includes or [])
    else:
        inputs = [proto]

    generated: List[str] = []
    for p in inputs:
        generated.append(generate_file(p, out_dir, dialect, options, includes))
    return generated


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate Elm or Flow type declarations from .proto files",
    )
    parser.add_argument("--proto", required=True, help="Path to a .proto file or a directory containing .proto files (recursively)")
    parser.add_argument("--out", required=True, help="Output directory for generated file(s)")
    parser.add_argument("--dialect", choices=[ELM, FLOW], default=FLOW, help="Output dialect (default: flow)")
    parser.add_argument("-I", "--include", action="append", default=[], help="Additional protoc include path (repeatable)")
    parser.add_argument("--always-qualify-type-names", action="store_true", help="Keep the package prefix on every generated type name")
    parser.add_argument("--embed-enums", action="store_true", help="Inline enum alternatives at each use site (flow only)")
    args = parser.parse_args(argv)

    options = GeneratorOptions(
        always_qualify_type_names=args.always_qualify_type_names,
        embed_enums=args.embed_enums,
    )

    try:
        generated = run(args.proto, args.out, args.dialect, options, args.include)
    except (SchemaResolutionError, RuntimeError) as e:
        print(f"FATAL: {e}", file=sys.stderr)
        sys.exit(1)

    for path in generated:
        print(f"Generated: {path}")


if __name__ == "__main__":
    main()
