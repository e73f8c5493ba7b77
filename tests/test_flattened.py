from dataclasses import dataclass

from json2ts.converters import JsonToFlattenedTsConverter


@dataclass
class Point:
    x: int
    y: int


def test_nested_records_are_inlined():
    data = {"user": {"id": 1, "name": "John"}, "posts": [{"title": "a", "content": "b"}]}
    assert JsonToFlattenedTsConverter.convert(data) == (
        "export interface RootObject {\n"
        "  user: {\n"
        "    id: number;\n"
        "    name: string;\n"
        "  };\n"
        "  posts: {\n"
        "    title: string;\n"
        "    content: string;\n"
        "  }[];\n"
        "}"
    )


def test_deep_nesting_indents():
    data = {"a": {"b": {"c": True}}}
    assert JsonToFlattenedTsConverter.convert(data, "Deep") == (
        "export interface Deep {\n"
        "  a: {\n"
        "    b: {\n"
        "      c: boolean;\n"
        "    };\n"
        "  };\n"
        "}"
    )


def test_single_declaration():
    data = {"a": {"b": {"c": 1}}, "d": [{"e": {"f": "x"}}]}
    result = JsonToFlattenedTsConverter.convert(data, export_type="all")
    assert result.count("interface ") == 1
    assert result.startswith("export interface RootObject {")


def test_export_none():
    result = JsonToFlattenedTsConverter.convert({"a": 1}, export_type="none")
    assert result == "interface RootObject {\n  a: number;\n}"


def test_empty_records():
    assert JsonToFlattenedTsConverter.convert({}) == "export interface RootObject {}"
    assert JsonToFlattenedTsConverter.convert({"meta": {}}) == "export interface RootObject {\n  meta: {};\n}"


def test_cycle_renders_any():
    node = {"name": "x"}
    node["self"] = node
    assert JsonToFlattenedTsConverter.convert(node, "Node") == (
        "export interface Node {\n"
        "  name: string;\n"
        "  self: any;\n"
        "}"
    )


def test_ten_level_cycle_terminates():
    nodes = [{"id": i} for i in range(10)]
    for i, node in enumerate(nodes):
        node["child"] = nodes[(i + 1) % len(nodes)]
    result = JsonToFlattenedTsConverter.convert(nodes[0])
    assert result.count("child: any;") == 1


def test_shared_record_renders_at_both_places():
    shared = {"v": 1}
    assert JsonToFlattenedTsConverter.convert({"left": shared, "right": shared}) == (
        "export interface RootObject {\n"
        "  left: {\n"
        "    v: number;\n"
        "  };\n"
        "  right: {\n"
        "    v: number;\n"
        "  };\n"
        "}"
    )


def test_primitive_arrays():
    result = JsonToFlattenedTsConverter.convert({"tags": ["a", "b"], "mixed": [1, "two", True]})
    assert "  tags: string[];" in result
    assert "  mixed: [number, string, boolean];" in result


def test_class_instances_are_inlined():
    result = JsonToFlattenedTsConverter.convert_value({"origin": Point(0, 0)})
    assert result == (
        "export interface RootObject {\n"
        "  origin: {\n"
        "    x: number;\n"
        "    y: number;\n"
        "  };\n"
        "}"
    )


def test_root_array_alias():
    assert JsonToFlattenedTsConverter.convert([{"id": 1}]) == (
        "export type RootObject = {\n"
        "  id: number;\n"
        "}[];"
    )


def test_scalar_root():
    assert JsonToFlattenedTsConverter.convert('"hi"', options={"strict": True}) == "export type RootObject = string;"
    assert JsonToFlattenedTsConverter.convert('"hi"') == (
        "export interface RootObject {\n"
        "  [p: string]: unknown;\n"
        "}"
    )


def test_property_case_applies_to_inline_fields():
    result = JsonToFlattenedTsConverter.convert({"outer_key": {"inner_key": 1}}, options={"propertyCase": "camel"})
    assert "  outerKey: {\n    innerKey: number;\n  };" in result


def test_nested_arrays_keep_row_type():
    data = {"matrix": [[1, 2], [3, 4]], "rows": [[1, 2]] * 15, "pairs": [[1, "a"], [2, "b"]]}
    result = JsonToFlattenedTsConverter.convert(data)
    assert result == (
        "export interface RootObject {\n"
        "  matrix: number[][];\n"
        "  rows: number[][];\n"
        "  pairs: [number, string][];\n"
        "}"
    )


def test_nested_arrays_of_records():
    result = JsonToFlattenedTsConverter.convert({"grid": [[{"x": 1}]]})
    assert "  grid: {\n    x: number;\n  }[][];" in result


def test_cased_duplicate_properties_keep_first(capsys):
    data = {"user_name": "a", "userName": 1, "inner": {"a_b": True, "aB": "x"}}
    result = JsonToFlattenedTsConverter.convert(data, options={"propertyCase": "camel"})
    assert result == (
        "export interface RootObject {\n"
        "  userName: string;\n"
        "  inner: {\n"
        "    aB: boolean;\n"
        "  };\n"
        "}"
    )
    assert "Skipping property 'userName'" in capsys.readouterr().err
