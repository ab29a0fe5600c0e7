from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from protoc_typegen.models import (
    Alternatives,
    ArrayOf,
    Declaration,
    NamedField,
    Primitive,
    Record,
    Reference,
    TypeNode,
)


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
    )


class TypeRenderer(ABC):
    """Serializes declarations into one dialect's source text.

    Subclasses supply the template, the primitive token table and the
    dialect-specific pieces of syntax.
    """

    template_name: str = ""
    primitive_tokens: Dict[str, str] = {}

    def render(self, declarations: List[Declaration]) -> str:
        env = _get_template_env()
        template = env.get_template(self.template_name)
        return template.render(declarations=declarations, render_type=self.render_type)

    def render_type(self, node: TypeNode) -> str:
        if isinstance(node, Primitive):
            return self.render_primitive(node)
        if isinstance(node, ArrayOf):
            return self.render_array(node)
        if isinstance(node, Reference):
            return node.name
        if isinstance(node, Alternatives):
            return " | ".join(self.render_literal(m) for m in node.members)
        if isinstance(node, Record):
            return self.render_record(node)
        raise TypeError(f"Unsupported type node: {node!r}")

    def render_primitive(self, node: Primitive) -> str:
        # Tokens outside the table are raw proto type names; emit them as-is.
        return self.primitive_tokens.get(node.name, node.name)

    def render_record(self, node: Record) -> str:
        lines = [self.render_field(f) for f in node.fields]
        return "{\n%s\n}" % ",\n".join(lines)

    @abstractmethod
    def render_array(self, node: ArrayOf) -> str:
        raise NotImplementedError

    @abstractmethod
    def render_literal(self, member: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def render_field(self, field: NamedField) -> str:
        raise NotImplementedError
