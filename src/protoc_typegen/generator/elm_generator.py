from __future__ import annotations

from typing import Dict

from protoc_typegen.builder import build_declarations
from protoc_typegen.config import GeneratorOptions
from protoc_typegen.generator.renderer import TypeRenderer
from protoc_typegen.models import (
    BOOLEAN,
    FLOAT,
    INTEGER,
    STRING,
    UNKNOWN,
    Alternatives,
    ArrayOf,
    NamedField,
    TypeNode,
)
from protoc_typegen.schema import Registry

# Abstract primitive token -> Elm type
ELM_PRIMITIVES: Dict[str, str] = {
    FLOAT: "Float",
    INTEGER: "Int",
    BOOLEAN: "Boolean",
    STRING: "String",
    UNKNOWN: "?",
}


class ElmRenderer(TypeRenderer):
    template_name = "elm_types.elm.j2"
    primitive_tokens = ELM_PRIMITIVES

    def _argument(self, node: TypeNode) -> str:
        """Render a node in type-argument position, parenthesised if compound."""
        text = self.render_type(node)
        if isinstance(node, (ArrayOf, Alternatives)):
            return f"({text})"
        return text

    def render_array(self, node: ArrayOf) -> str:
        return f"List {self._argument(node.element)}"

    def render_literal(self, member: str) -> str:
        return member

    def render_field(self, field: NamedField) -> str:
        # Elm has no implicit absence, so every field is a Maybe.
        return f"  {field.name}: Maybe {self._argument(field.type)}"


def generate_elm_types(
    file_name: str,
    registry: Registry,
    always_qualify_type_names: bool = False,
) -> str:
    """Generate Elm type declarations for one registered .proto file."""
    schema_file = registry.lookup_file(file_name)
    options = GeneratorOptions(always_qualify_type_names=always_qualify_type_names)
    declarations = build_declarations(schema_file, registry, options)
    return ElmRenderer().render(declarations)
