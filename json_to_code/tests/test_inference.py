import pytest

from json_to_code.core.inference import SchemaInferrer
from json_to_code.core.schema import (
    ANY,
    BOOLEAN,
    STRING,
    CollectionOf,
    Declaration,
    DeclarationRef,
    Field,
    Primitive,
    PrimitiveKind,
)
from json_to_code.core.shapes import ShapeRegistry
from json_to_code.languages.java import create_java_naming
from json_to_code.languages.typescript import TYPESCRIPT_NAMING


@pytest.fixture
def inferrer():
    return SchemaInferrer(TYPESCRIPT_NAMING)


class TestShapeRegistry:
    """Test the insert-if-absent declaration store"""

    def test_first_insertion_wins(self):
        registry = ShapeRegistry()
        first = registry.add(Declaration("IUser"))
        second = registry.add(Declaration("IUser"))

        assert second is first
        assert len(registry) == 1

    def test_insertion_order(self):
        registry = ShapeRegistry()
        for name in ["IB", "IA", "IC"]:
            registry.add(Declaration(name))

        assert registry.names() == ["IB", "IA", "IC"]
        assert [d.name for d in registry] == ["IB", "IA", "IC"]
        assert "IA" in registry
        assert registry.get("IZ") is None

    def test_clear(self):
        registry = ShapeRegistry()
        registry.add(Declaration("IA"))
        registry.clear()
        assert len(registry) == 0


class TestDeclaration:
    """Test dependency bookkeeping on declarations"""

    def test_dependencies_are_unique_and_unwrapped(self):
        declaration = Declaration("IOrder")
        declaration.add_field(Field("a", "a", DeclarationRef("IItem")))
        declaration.add_field(Field("b", "b", CollectionOf(DeclarationRef("IItem"))))
        declaration.add_field(
            Field("c", "c", CollectionOf(CollectionOf(DeclarationRef("IOther"))))
        )
        declaration.add_field(Field("d", "d", STRING))

        assert declaration.dependencies == ["IItem", "IOther"]
        assert declaration.get_field("b").is_reference
        assert not declaration.get_field("d").is_reference
        assert declaration.get_field("missing") is None
        assert declaration.uses_collections()


class TestScalarInference:
    """Test inference of scalar values"""

    def test_null_is_any(self, inferrer):
        assert inferrer.infer(None, "x") == ANY

    def test_boolean_is_not_a_number(self, inferrer):
        assert inferrer.infer(True, "x") == BOOLEAN

    def test_numbers_record_integrality(self, inferrer):
        assert inferrer.infer(1, "x") == Primitive(PrimitiveKind.NUMBER, integral=True)
        assert inferrer.infer(1.5, "x") == Primitive(PrimitiveKind.NUMBER)
        assert inferrer.infer(2.0, "x") == Primitive(
            PrimitiveKind.NUMBER, integral=True
        )

    def test_string(self, inferrer):
        assert inferrer.infer("", "x") == STRING

    def test_unsupported_value(self, inferrer):
        with pytest.raises(TypeError):
            inferrer.infer(object(), "x")


class TestCollectionInference:
    """Test inference of arrays"""

    def test_empty_array(self, inferrer):
        assert inferrer.infer([], "tags", "tags") == CollectionOf(ANY)
        assert len(inferrer.registry) == 0

    def test_first_element_only(self, inferrer):
        assert inferrer.infer([1, "a", None], "x") == CollectionOf(
            Primitive(PrimitiveKind.NUMBER, integral=True)
        )

    def test_array_of_objects_uses_property_key(self, inferrer):
        result = inferrer.infer([{"id": 1}], "items", "items")

        assert result == CollectionOf(DeclarationRef("IItems"))
        assert inferrer.registry.names() == ["IItems"]

    def test_nested_arrays(self, inferrer):
        result = inferrer.infer([[{"x": 1}]], "grid", "grid")

        assert result == CollectionOf(CollectionOf(DeclarationRef("IGridItem")))


class TestObjectInference:
    """Test declaration synthesis for objects"""

    def test_nested_object(self, inferrer):
        root = inferrer.infer_root(
            {"id": 1, "address": {"city": "X", "zip": "00000"}}, "Order"
        )

        assert root == "IOrder"
        assert inferrer.registry.names() == ["IOrder", "IAddress"]

        order = inferrer.registry.get("IOrder")
        assert [f.name for f in order.fields] == ["id", "address"]
        assert order.get_field("address").type == DeclarationRef("IAddress")
        assert order.dependencies == ["IAddress"]

    def test_first_shape_wins_for_a_name(self, inferrer):
        sample = {"user": {"id": 1}, "meta": {"user": {"name": "x"}}}
        inferrer.infer_root(sample, "Root")

        user = inferrer.registry.get("IUser")
        assert [f.name for f in user.fields] == ["id"]
        assert len(inferrer.registry) == 3

    def test_same_shape_under_different_keys(self, inferrer):
        sample = {"billing": {"city": "a"}, "shipping": {"city": "b"}}
        inferrer.infer_root(sample, "Root")

        assert inferrer.registry.names() == ["IRoot", "IBilling", "IShipping"]

    def test_self_reference_terminates(self, inferrer):
        inferrer.infer_root({"self": {"self": None}}, "Node")

        assert inferrer.registry.names() == ["INode", "ISelf"]
        assert inferrer.registry.get("ISelf").get_field("self").type == ANY

    def test_recursive_shape_references_itself(self, inferrer):
        inferrer.infer_root({"child": {"child": {"x": 1}}}, "Root")

        child = inferrer.registry.get("IChild")
        assert child.get_field("child").type == DeclarationRef("IChild")
        assert child.dependencies == ["IChild"]

    def test_field_names_are_sanitized(self):
        inferrer = SchemaInferrer(create_java_naming())
        inferrer.infer_root({"first-name": "x", "class": "y", "2fa": True}, "User")

        user = inferrer.registry.get("UserDto")
        assert [(f.name, f.original_name) for f in user.fields] == [
            ("firstName", "first-name"),
            ("class_", "class"),
            ("_2fa", "2fa"),
        ]

    def test_suffix(self):
        inferrer = SchemaInferrer(create_java_naming(), suffix="Omie")
        inferrer.infer_root({"category": {"id": 1}}, "product")

        assert inferrer.registry.names() == ["ProductOmieDto", "CategoryOmieDto"]

    def test_keys_that_look_prefixed_still_get_the_prefix(self, inferrer):
        inferrer.infer_root({"IBAN": {"x": 1}, "ID": {"y": 2}}, "Account")

        assert inferrer.registry.names() == ["IAccount", "IIBAN", "IID"]

    def test_deep_nesting_is_walked_without_recursion(self, inferrer):
        depth = 3000
        sample = leaf = {}
        for level in range(depth):
            child = {}
            leaf["k%d" % level] = child
            leaf = child

        inferrer.infer_root(sample, "Root")

        assert len(inferrer.registry) == depth + 1
        deepest = inferrer.registry.get("IK%d" % (depth - 1))
        assert deepest.fields == []
        assert inferrer.registry.get("IK0").dependencies == ["IK1"]

    def test_deep_arrays(self, inferrer):
        sample = [1]
        for _ in range(3000):
            sample = [sample]

        value_type = inferrer.infer(sample, "grid", "grid")
        for _ in range(3001):
            assert isinstance(value_type, CollectionOf)
            value_type = value_type.element
        assert value_type == Primitive(PrimitiveKind.NUMBER, integral=True)

    def test_reset(self, inferrer):
        inferrer.infer_root({"a": 1}, "Root")
        inferrer.reset()
        assert len(inferrer.registry) == 0


class TestRootWrapping:
    """Test roots that are not objects"""

    def test_scalar_root(self, inferrer):
        root = inferrer.infer_root(42, "Root")

        declaration = inferrer.registry.get(root)
        assert root == "IRoot"
        assert declaration.fields == [
            Field("value", "value", Primitive(PrimitiveKind.NUMBER, integral=True))
        ]

    def test_array_of_objects_root_is_its_item(self, inferrer):
        root = inferrer.infer_root([{"id": 1}], "Order")

        assert root == "IOrderItem"
        assert inferrer.registry.names() == ["IOrderItem"]

    def test_nested_array_of_objects_root(self, inferrer):
        root = inferrer.infer_root([[{"id": 1}]], "Order")

        assert root == "IOrderItemItem"
        assert inferrer.registry.names() == ["IOrderItemItem"]

    @pytest.mark.parametrize("sample", [[1.5], [], [None], [[]]])
    def test_array_without_objects_is_wrapped(self, inferrer, sample):
        root = inferrer.infer_root(sample, "Root")

        assert root == "IRoot"
        assert inferrer.registry.names() == ["IRoot"]
        value_type = inferrer.registry.get(root).get_field("value").type
        assert isinstance(value_type, CollectionOf)
