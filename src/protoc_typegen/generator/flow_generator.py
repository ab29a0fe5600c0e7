from __future__ import annotations

from typing import Dict

from protoc_typegen.builder import build_declarations
from protoc_typegen.config import GeneratorOptions
from protoc_typegen.generator.renderer import TypeRenderer
from protoc_typegen.models import BOOLEAN, FLOAT, INTEGER, STRING, UNKNOWN, ArrayOf, NamedField
from protoc_typegen.schema import Registry

# Abstract primitive token -> Flow type
FLOW_PRIMITIVES: Dict[str, str] = {
    FLOAT: "number",
    INTEGER: "number",
    BOOLEAN: "boolean",
    STRING: "string",
    UNKNOWN: "any",
}


class FlowRenderer(TypeRenderer):
    template_name = "flow_types.js.j2"
    primitive_tokens = FLOW_PRIMITIVES

    def render_array(self, node: ArrayOf) -> str:
        return f"Array<{self.render_type(node.element)}>"

    def render_literal(self, member: str) -> str:
        return f'"{member}"'

    def render_field(self, field: NamedField) -> str:
        return f"  {field.name}?: {self.render_type(field.type)}"


def generate_flow_types(
    file_name: str,
    registry: Registry,
    always_qualify_type_names: bool = False,
    embed_enums: bool = False,
) -> str:
    """Generate Flow type declarations for one registered .proto file."""
    schema_file = registry.lookup_file(file_name)
    options = GeneratorOptions(
        always_qualify_type_names=always_qualify_type_names,
        embed_enums=embed_enums,
    )
    declarations = build_declarations(schema_file, registry, options)
    return FlowRenderer().render(declarations)
