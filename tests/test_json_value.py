import pytest

from ymbase.json_value import JsonValue


def _assert_not_object(v):
    with pytest.raises(TypeError):
        v.has_key("abc")
    with pytest.raises(TypeError):
        v.key_list()
    with pytest.raises(TypeError):
        v.item_list()
    with pytest.raises(TypeError):
        v["abc"]
    with pytest.raises(TypeError):
        v.at("abc")


def _assert_not_array(v):
    with pytest.raises(TypeError):
        v[0]
    with pytest.raises(TypeError):
        v.at(0)


def _kinds(v):
    return (
        v.is_null(),
        v.is_string(),
        v.is_number(),
        v.is_int(),
        v.is_float(),
        v.is_bool(),
        v.is_object(),
        v.is_array(),
    )


@pytest.mark.parametrize("make", [JsonValue, JsonValue.null])
def test_null(make):
    v = make()
    assert _kinds(v) == (True, False, False, False, False, False, False, False)
    _assert_not_object(v)
    _assert_not_array(v)
    with pytest.raises(TypeError):
        v.size()
    for getter in (v.get_string, v.get_int, v.get_float, v.get_bool):
        with pytest.raises(TypeError):
            getter()
    assert v.to_json() == "null"
    assert JsonValue() == v
    assert JsonValue(0) != v


def test_string():
    v = JsonValue("abcde")
    assert _kinds(v) == (False, True, False, False, False, False, False, False)
    _assert_not_object(v)
    _assert_not_array(v)
    with pytest.raises(TypeError):
        v.size()
    assert v.get_string() == "abcde"
    for getter in (v.get_int, v.get_float, v.get_bool):
        with pytest.raises(TypeError):
            getter()
    assert v.to_json() == '"abcde"'
    assert JsonValue("abcde") == v
    assert JsonValue(0) != v


def test_string_with_double_quotes_uses_single_quotes():
    v = JsonValue('"abcde"')
    assert v.get_string() == '"abcde"'
    assert v.to_json() == "'\"abcde\"'"


def test_string_with_single_quotes_uses_double_quotes():
    v = JsonValue("'abcde'")
    assert v.get_string() == "'abcde'"
    assert v.to_json() == "\"'abcde'\""


def test_string_with_both_quotes_is_escaped():
    v = JsonValue("\"'abcde'\"")
    assert v.get_string() == "\"'abcde'\""
    assert v.to_json() == r'"\"'"'"r"abcde'\""'"'


def test_int():
    v = JsonValue(99)
    assert _kinds(v) == (False, False, True, True, False, False, False, False)
    _assert_not_object(v)
    _assert_not_array(v)
    assert v.get_int() == 99
    for getter in (v.get_string, v.get_float, v.get_bool):
        with pytest.raises(TypeError):
            getter()
    assert v.to_json() == "99"
    assert JsonValue(99) == v
    assert JsonValue("abc") != v


def test_float():
    v = JsonValue(1.2345)
    assert _kinds(v) == (False, False, True, False, True, False, False, False)
    _assert_not_object(v)
    _assert_not_array(v)
    assert v.get_float() == 1.2345
    for getter in (v.get_string, v.get_int, v.get_bool):
        with pytest.raises(TypeError):
            getter()
    assert v.to_json() == "1.2345"
    assert JsonValue(1.2345) == v
    assert JsonValue("abc") != v


@pytest.mark.parametrize("value,text", [(True, "true"), (False, "false")])
def test_bool(value, text):
    v = JsonValue(value)
    assert _kinds(v) == (False, False, False, False, False, True, False, False)
    _assert_not_object(v)
    _assert_not_array(v)
    assert v.get_bool() is value
    for getter in (v.get_string, v.get_int, v.get_float):
        with pytest.raises(TypeError):
            getter()
    assert v.to_json() == text
    assert JsonValue(value) == v
    assert JsonValue(not value) != v
    assert JsonValue("abc") != v


def test_array():
    json1, json2, json3 = JsonValue("xyz"), JsonValue(2), JsonValue(0.99)
    v = JsonValue([json1, json2, json3])
    assert _kinds(v) == (False, False, False, False, False, False, False, True)
    _assert_not_object(v)
    assert v.size() == 3
    assert v[0] == json1
    assert v[1] == json2
    assert v[2] == json3
    assert v.at(0) == json1
    assert v.at(2) == json3
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v.at(4)
    for getter in (v.get_string, v.get_int, v.get_float, v.get_bool):
        with pytest.raises(TypeError):
            getter()
    assert v.to_json() == '["xyz",2,0.99]'
    assert JsonValue([json1, json2, json3]) == v
    assert JsonValue("abc") != v


def test_object():
    json1, json2, json3 = JsonValue("xyz"), JsonValue(2), JsonValue(0.99)
    v = JsonValue({"key1": json1, "key2": json2, "key3": json3})
    assert _kinds(v) == (False, False, False, False, False, False, True, False)
    assert v.has_key("key1")
    assert v["key1"] == json1
    assert v.at("key1") == json1
    assert v["key2"] == json2
    assert v.at("key3") == json3
    assert not v.has_key("abc")
    with pytest.raises(ValueError):
        v["abc"]
    with pytest.raises(ValueError):
        v.at("abc")
    assert v.key_list() == ["key1", "key2", "key3"]
    assert v.item_list() == [("key1", json1), ("key2", json2), ("key3", json3)]
    assert v.size() == 3
    _assert_not_array(v)
    assert v.to_json() == '{"key1":"xyz","key2":2,"key3":0.99}'
    assert JsonValue({"key1": json1, "key2": json2, "key3": json3}) == v
    assert JsonValue("abc") != v


def test_get_returns_null_for_missing_key():
    v = JsonValue({"key": 123})
    assert v.get("key") == JsonValue(123)
    assert v.get("other").is_null()
    with pytest.raises(TypeError):
        JsonValue(1).get("key")


def test_null_member():
    v = JsonValue({"key": None})
    assert v.has_key("key")
    assert v["key"].is_null()
    assert v.to_json() == '{"key":null}'


def test_indented_output():
    v = JsonValue(
        {
            "str_key": "abcd",
            "int_key": 4,
            "float_key": 0.15,
            "bool_key": True,
            "object_key": {"sub_key1": 0, "sub_key2": 1},
            "array_key": [0, 1, 2, 3],
        }
    )
    exp = (
        "{\n"
        '    "array_key":[\n'
        "        0,\n"
        "        1,\n"
        "        2,\n"
        "        3\n"
        "    ],\n"
        '    "bool_key":true,\n'
        '    "float_key":0.15,\n'
        '    "int_key":4,\n'
        '    "object_key":{\n'
        '        "sub_key1":0,\n'
        '        "sub_key2":1\n'
        "    },\n"
        '    "str_key":"abcd"\n'
        "}\n"
    )
    assert v.to_json(True) == exp


def test_nested_python_values_compare_structurally():
    a = JsonValue({"k": [1, "x", {"n": None}]})
    b = JsonValue({"k": [JsonValue(1), JsonValue("x"), {"n": JsonValue.null()}]})
    assert a == b
    assert a != JsonValue({"k": [1, "x"]})


def test_int_and_float_are_distinct():
    assert JsonValue(1) != JsonValue(1.0)


def test_unsupported_values_raise():
    with pytest.raises(TypeError):
        JsonValue(object())
    with pytest.raises(TypeError):
        JsonValue({1: "x"})