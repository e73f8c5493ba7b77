import pytest

from json2ts.options import ConvertOptions, coerce_options


def test_defaults():
    options = ConvertOptions()
    assert options.array_max_tuple_size == 10
    assert options.array_min_tuple_size == 2
    assert options.strict is False
    assert options.type_map is None
    assert options.property_case == "original"
    assert options.max_depth == 100
    assert options.any_type == "any"


def test_strict_any_type():
    assert ConvertOptions(strict=True).any_type == "unknown"


def test_from_mapping_accepts_both_spellings():
    options = ConvertOptions.from_mapping({"propertyCase": "camel", "readonly_properties": True, "strict": None})
    assert options.property_case == "camel"
    assert options.readonly_properties is True
    assert options.strict is False


def test_type_map_is_copied():
    source = {"id": "UserId"}
    options = ConvertOptions(type_map=source)
    source["id"] = "Other"
    assert options.type_map == {"id": "UserId"}


@pytest.mark.parametrize("kwargs", [
    {"property_case": "title"},
    {"max_depth": -1},
    {"array_max_tuple_size": "10"},
    {"array_min_tuple_size": True},
])
def test_invalid_options(kwargs):
    with pytest.raises(ValueError):
        ConvertOptions(**kwargs)


def test_coerce_options():
    options = ConvertOptions(strict=True)
    assert coerce_options(options) is options
    assert coerce_options(None) == ConvertOptions()
    assert coerce_options({"maxDepth": 3}).max_depth == 3
