import pytest

from ymbase.json_io import parse, read, write
from ymbase.json_value import JsonValue


def test_parse_null():
    assert parse("null").is_null()


def test_parse_int():
    value = parse("42")
    assert value.is_int()
    assert value.get_int() == 42


def test_parse_string():
    value = parse('"abc"')
    assert value.get_string() == "abc"


def test_parse_float():
    value = parse("1.5")
    assert value.is_float()
    assert value.get_float() == 1.5


def test_parse_bool():
    assert parse("true").get_bool() is True
    assert parse("false").get_bool() is False


def test_parse_nested_matches_constructed_value():
    value = parse('{"a": [1, 2, {"b": null}], "c": "x"}')
    expected = JsonValue({"a": [1, 2, {"b": None}], "c": "x"})
    assert value == expected
    assert value["a"][2]["b"].is_null()


def test_parse_round_trip_through_to_json():
    value = parse('{"k": [true, 3, 2.5, "s"], "n": null}')
    assert parse(value.to_json()) == value
    assert parse(value.to_json(True)) == value


@pytest.mark.parametrize("text", ["", "{", "[1,]", "nul", "NaN", "Infinity"])
def test_parse_invalid_raises(text):
    with pytest.raises(ValueError):
        parse(text)


def test_parse_out_of_range_int_raises():
    with pytest.raises(ValueError):
        parse("4294967296")


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        parse(b"null")


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "data.json"
    value = JsonValue({"name": "x", "list": [1, 2.5, False, None]})
    write(value, path)
    assert read(path) == value


def test_write_indent_round_trip(tmp_path):
    path = tmp_path / "data.json"
    value = JsonValue({"a": [1, 2], "b": {"c": True}})
    write(value, path, indent=True)
    text = path.read_text(encoding="utf-8")
    assert "\n" in text
    assert read(path) == value


def test_write_without_indent_is_single_line(tmp_path):
    path = tmp_path / "data.json"
    write(JsonValue([1, 2, 3]), path)
    assert "\n" not in path.read_text(encoding="utf-8")


def test_write_accepts_plain_data(tmp_path):
    path = tmp_path / "plain.json"
    write({"k": [1, "v"]}, path)
    assert read(path) == JsonValue({"k": [1, "v"]})


def test_write_to_directory_raises(tmp_path):
    with pytest.raises(ValueError, match="Could not open"):
        write(JsonValue(1), tmp_path)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(ValueError, match="Could not open"):
        read(tmp_path / "missing.json")


def test_read_malformed_file_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2", encoding="utf-8")
    with pytest.raises(ValueError):
        read(path)