import pytest

from protoc_typegen.generator.elm_generator import ElmRenderer
from protoc_typegen.generator.flow_generator import FlowRenderer
from protoc_typegen.generator.renderer import TypeRenderer
from protoc_typegen.models import ArrayOf, NamedField, Primitive


class _ArrayOnlyRenderer(TypeRenderer):
    def render_array(self, node: ArrayOf) -> str:
        return "[]"


class TestTypeRendererContract:
    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            TypeRenderer()

    def test_missing_hooks_fail_at_construction(self):
        with pytest.raises(TypeError, match="render_field"):
            _ArrayOnlyRenderer()

    def test_dialects_are_concrete(self):
        field = NamedField("id", Primitive("integer"))
        assert ElmRenderer().render_field(field) == "  id: Maybe Int"
        assert FlowRenderer().render_field(field) == "  id?: number"
