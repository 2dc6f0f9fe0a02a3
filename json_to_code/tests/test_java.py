import json
import re

from json_to_code import generate_document, generate_file_set
from json_to_code.core.config import GeneratorConfig
from json_to_code.core.schema import Declaration
from json_to_code.languages.java import JavaGenerator

HEADER = (
    "package com.example.dto;\n"
    "\n"
    "import com.fasterxml.jackson.annotation.JsonInclude;\n"
    "import com.fasterxml.jackson.annotation.JsonInclude.Include;\n"
    "import com.fasterxml.jackson.annotation.JsonProperty;\n"
    "import lombok.AllArgsConstructor;\n"
    "import lombok.Builder;\n"
    "import lombok.Data;\n"
    "import lombok.NoArgsConstructor;\n"
)

ANNOTATIONS = (
    "@Data\n"
    "@AllArgsConstructor\n"
    "@NoArgsConstructor\n"
    "@Builder\n"
    "@JsonInclude(Include.NON_NULL)\n"
)


class TestJavaDocument:
    """Test Java DTO generation"""

    def test_nested_object(self, order_json):
        code = generate_document(order_json, "java", "Order")

        assert code == (
            HEADER + "\n" + ANNOTATIONS + "public class AddressDto {\n"
            "\n"
            '  @JsonProperty("city")\n'
            "  private String city;\n"
            "\n"
            '  @JsonProperty("zip")\n'
            "  private String zip;\n"
            "\n"
            "}\n"
            "\n" + ANNOTATIONS + "public class OrderDto {\n"
            "\n"
            '  @JsonProperty("id")\n'
            "  private Long id;\n"
            "\n"
            '  @JsonProperty("address")\n'
            "  private AddressDto address;\n"
            "\n"
            "}"
        )

    def test_number_classification(self):
        code = generate_document('{"a": 1, "b": 1.5, "c": 2.0}', "java", "Root")

        assert "  private Long a;" in code
        assert "  private Double b;" in code
        assert "  private Long c;" in code

    def test_boolean_is_not_long(self):
        code = generate_document('{"flag": true}', "java", "Root")

        assert "  private Boolean flag;" in code

    def test_null_is_object(self):
        code = generate_document('{"notes": null}', "java", "Root")

        assert "  private Object notes;" in code

    def test_lists(self):
        code = generate_document(
            '{"tags": [], "ids": [1], "matrix": [[1.5]], "items": [{"id": 1}]}',
            "java",
            "Root",
        )

        assert "import java.util.List;" in code
        assert "  private List<Object> tags;" in code
        assert "  private List<Long> ids;" in code
        assert "  private List<List<Double>> matrix;" in code
        assert "  private List<ItemsDto> items;" in code

    def test_no_list_import_without_collections(self, order_json):
        assert "java.util.List" not in generate_document(order_json, "java", "Order")

    def test_header_appears_once(self, catalog_json):
        code = generate_document(catalog_json, "java", "Catalog")

        assert code.count("package com.example.dto;") == 1
        assert code.startswith("package com.example.dto;")

    def test_json_property_keeps_original_keys(self):
        keys = ["first-name", "class", "2fa", "user_id", "userId", 'quo"te', "ação"]
        sample = json.dumps({key: "x" for key in keys}, ensure_ascii=False)

        code = generate_document(sample, "java", "Root")
        found = [json.loads(v) for v in re.findall(r"@JsonProperty\((.*)\)", code)]

        assert found == keys

    def test_field_names_are_valid(self):
        code = generate_document(
            '{"first-name": "x", "class": "y", "2fa": true, "user_id": 1, "userId": 2}',
            "java",
            "Root",
        )

        assert "  private String firstName;" in code
        assert "  private String class_;" in code
        assert "  private Boolean _2fa;" in code
        assert "  private Long userId;" in code
        assert "  private Long userId_1;" in code

    def test_empty_object(self):
        code = generate_document("{}", "java", "Root")

        assert code.endswith(ANNOTATIONS + "public class RootDto {\n\n}")

    def test_array_root_is_wrapped(self):
        code = generate_document("[1.5]", "java", "Root")

        assert "public class RootDto {" in code
        assert '  @JsonProperty("value")\n  private List<Double> value;' in code

    def test_array_of_objects_root(self):
        code = generate_document('[{"id": 1, "tags": ["a"]}]', "java", "Order")

        assert "public class OrderItemDto {" in code
        assert code.count("public class") == 1

    def test_json_property_values_are_sample_keys(self):
        sample = [{"id": 1, "lines": [{"sku": "x", "qty": 2}], "meta": {"id": 3}}]
        keys = {"id", "lines", "sku", "qty", "meta"}

        code = generate_document(json.dumps(sample), "java", "Order")
        found = [json.loads(v) for v in re.findall(r"@JsonProperty\((.*)\)", code)]

        assert set(found) <= keys
        assert len(found) == 6

    def test_suffix(self):
        code = generate_document('{"category":{"id":1}}', "java", "product", "Omie")

        assert "public class CategoryOmieDto {" in code
        assert "public class ProductOmieDto {" in code
        assert "  private CategoryOmieDto category;" in code


class TestJavaConfiguration:
    """Test configurable parts of the Java output"""

    def test_package_name(self, order_json):
        code = generate_document(
            order_json, "java", "Order", config={"package_name": "com.acme.api"}
        )

        assert code.startswith("package com.acme.api;\n")

    def test_without_lombok(self, order_json):
        code = generate_document(
            order_json, "java", "Order", config={"use_lombok": False}
        )

        assert "lombok" not in code
        assert "@Data" not in code
        assert "@JsonInclude(Include.NON_NULL)\npublic class OrderDto {" in code

    def test_json_include_policy(self, order_json):
        code = generate_document(
            order_json, "java", "Order", config={"json_include": "NON_EMPTY"}
        )

        assert "@JsonInclude(Include.NON_EMPTY)" in code

    def test_without_json_include(self, order_json):
        code = generate_document(
            order_json, "java", "Order", config={"json_include": None}
        )

        assert "JsonInclude" not in code
        assert "import com.fasterxml.jackson.annotation.JsonProperty;" in code

    def test_indentation(self, order_json):
        generator = JavaGenerator(GeneratorConfig(use_tabs=True))
        declaration = Declaration("EmptyDto")

        assert generator.package_name == "com.example.dto"
        assert generator.generate_single_declaration(declaration).endswith(
            "public class EmptyDto {\n\n}"
        )
        code = generate_document(order_json, "java", "Order", config={"use_tabs": True})
        assert '\n\t@JsonProperty("id")\n\tprivate Long id;\n' in code


class TestJavaFileSet:
    """Test one file per class"""

    def test_every_file_is_self_contained(self, order_json):
        files = generate_file_set(order_json, "java", "Order")

        assert [f.file_name for f in files] == ["AddressDto.java", "OrderDto.java"]
        for generated in files:
            assert generated.content.startswith("package com.example.dto;\n")
            assert generated.content.count("public class") == 1

    def test_list_import_only_where_needed(self):
        files = dict(
            generate_file_set('{"owner": {"id": 1}, "ids": [1]}', "java", "Root")
        )

        assert "java.util.List" in files["RootDto.java"]
        assert "java.util.List" not in files["OwnerDto.java"]
