import pytest
from google.protobuf import descriptor_pb2 as d2

from protoc_typegen.descriptors import build_registry, build_schema_file, find_target_file
from protoc_typegen.schema import SchemaResolutionError

T = d2.FieldDescriptorProto


def _add_field(msg, name, number, kind, type_name="", repeated=False):
    f = msg.field.add()
    f.name = name
    f.number = number
    f.type = kind
    f.label = T.LABEL_REPEATED if repeated else T.LABEL_OPTIONAL
    if type_name:
        f.type_name = type_name
    return f


def _shop_file() -> d2.FileDescriptorProto:
    fdp = d2.FileDescriptorProto(name="shop/order.proto", package="shop")

    status = fdp.enum_type.add(name="Status")
    status.value.add(name="NEW", number=0)
    status.value.add(name="PAID", number=1)

    order = fdp.message_type.add(name="Order")
    _add_field(order, "id", 1, T.TYPE_INT64)
    _add_field(order, "items", 2, T.TYPE_MESSAGE, ".shop.Order.Item", repeated=True)
    _add_field(order, "status", 3, T.TYPE_ENUM, ".shop.Status")

    item = order.nested_type.add(name="Item")
    _add_field(item, "sku", 1, T.TYPE_STRING)
    kind = order.enum_type.add(name="Kind")
    kind.value.add(name="PHYSICAL", number=0)

    fdp.message_type.add(name="Receipt")
    return fdp


class TestBuildSchemaFile:
    def test_file_metadata(self):
        schema_file = build_schema_file(_shop_file())
        assert schema_file.name == "shop/order.proto"
        assert schema_file.package == "shop"

    def test_messages_flattened_pre_order(self):
        schema_file = build_schema_file(_shop_file())
        assert [m.full_name for m in schema_file.messages] == [
            ".shop.Order", ".shop.Order.Item", ".shop.Receipt",
        ]

    def test_enums_top_level_then_nested(self):
        schema_file = build_schema_file(_shop_file())
        assert [e.full_name for e in schema_file.enums] == [".shop.Status", ".shop.Order.Kind"]
        assert [v.name for v in schema_file.enums[0].values] == ["NEW", "PAID"]

    def test_fields(self):
        order = build_schema_file(_shop_file()).messages[0]
        items = order.fields[1]
        assert items.name == "items"
        assert items.kind == T.TYPE_MESSAGE
        assert items.type_name == ".shop.Order.Item"
        assert items.is_repeated is True
        assert order.fields[0].is_repeated is False

    def test_no_package(self):
        fdp = d2.FileDescriptorProto(name="bare.proto")
        fdp.message_type.add(name="Thing")
        schema_file = build_schema_file(fdp)
        assert schema_file.messages[0].full_name == ".Thing"


class TestBuildRegistry:
    def test_lookups(self):
        registry = build_registry([_shop_file()])
        assert registry.lookup_message(".shop.Order.Item").name == "Item"
        assert registry.lookup_message("shop.Order").name == "Order"
        assert registry.lookup_enum(".shop.Order.Kind").name == "Kind"
        assert registry.lookup_file("shop/order.proto").package == "shop"

    def test_missing_names(self):
        registry = build_registry([_shop_file()])
        with pytest.raises(SchemaResolutionError):
            registry.lookup_message(".shop.Nope")
        with pytest.raises(SchemaResolutionError):
            registry.lookup_enum(".shop.Order")
        with pytest.raises(SchemaResolutionError):
            registry.lookup_file("other.proto")


class TestFindTargetFile:
    def test_prefers_last_match(self):
        fds = d2.FileDescriptorSet()
        fds.file.add(name="vendor/order.proto")
        fds.file.add(name="order.proto", package="mine")
        assert find_target_file(fds, "/work/order.proto").package == "mine"

    def test_single_file_fallback(self):
        fds = d2.FileDescriptorSet()
        fds.file.add(name="renamed.proto")
        assert find_target_file(fds, "order.proto").name == "renamed.proto"

    def test_not_found(self):
        fds = d2.FileDescriptorSet()
        fds.file.add(name="a.proto")
        fds.file.add(name="b.proto")
        with pytest.raises(RuntimeError, match="order.proto"):
            find_target_file(fds, "order.proto")
