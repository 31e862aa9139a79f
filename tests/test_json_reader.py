#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import pytest

from recjson import JsonDataErr, JsonEncodingErr
from recjson.stream import JsonReader, JsonToken, Options


def test_walk_object_tokens():
    reader = JsonReader.fromStr('{"a": 1, "b": [true, null], "c": "s"}')
    assert reader.peek() == JsonToken.BEGIN_OBJECT
    reader.beginObject()
    assert reader.nextName() == "a"
    assert reader.nextInt() == 1
    assert reader.nextName() == "b"
    reader.beginArray()
    assert reader.nextBool() is True
    assert reader.peek() == JsonToken.NULL
    assert reader.nextNull() is None
    assert not reader.hasNext()
    reader.endArray()
    assert reader.nextName() == "c"
    assert reader.nextString() == "s"
    assert not reader.hasNext()
    reader.endObject()
    assert reader.peek() == JsonToken.END_DOCUMENT


def test_duplicate_names_survive_parsing():
    reader = JsonReader.fromStr('{"a": 1, "a": 2}')
    reader.beginObject()
    assert reader.nextName() == "a"
    assert reader.nextInt() == 1
    assert reader.nextName() == "a"
    assert reader.nextInt() == 2
    reader.endObject()


def test_select_name_consumes_only_on_match():
    options = Options.of("x", "y")
    reader = JsonReader.fromStr('{"zz": 5, "y": 6}')
    reader.beginObject()
    assert reader.selectName(options) == -1
    assert reader.peek() == JsonToken.NAME
    reader.skipName()
    reader.skipValue()
    assert reader.selectName(options) == 1
    assert reader.nextInt() == 6
    reader.endObject()


def test_skip_value_skips_nested_structures():
    reader = JsonReader.fromStr('[{"a": [1, 2, {"b": 3}]}, 4]')
    reader.beginArray()
    reader.skipValue()
    assert reader.nextInt() == 4
    reader.endArray()


def test_path_tracks_position():
    reader = JsonReader.fromStr('{"items": [{"id": 1}, {"id": "x"}]}')
    reader.beginObject()
    reader.nextName()
    reader.beginArray()
    reader.skipValue()
    reader.beginObject()
    reader.nextName()
    assert reader.path() == "$.items[1].id"
    with pytest.raises(JsonDataErr) as e:
        reader.nextInt()
    assert e.value.path() == "$.items[1].id"
    assert "Expected NUMBER but was STRING" in e.value.msg()


def test_next_int_accepts_integral_floats_only():
    reader = JsonReader.fromStr("[2.0, 2.5]")
    reader.beginArray()
    assert reader.nextInt() == 2
    with pytest.raises(JsonDataErr):
        reader.nextInt()


def test_malformed_json():
    with pytest.raises(JsonEncodingErr):
        JsonReader.fromStr('{"a": ')
    with pytest.raises(JsonEncodingErr):
        JsonReader.fromStr('[NaN]')


def test_read_json_value():
    reader = JsonReader.fromStr('{"a": [1, {"b": null}], "c": 1.5}')
    assert reader.readJsonValue() == {"a": [1, {"b": None}], "c": 1.5}


def test_read_json_value_rejects_duplicate_keys():
    reader = JsonReader.fromStr('{"a": 1, "a": 2}')
    with pytest.raises(JsonDataErr):
        reader.readJsonValue()


def test_from_value():
    reader = JsonReader.fromValue({"a": (1, 2)})
    reader.beginObject()
    assert reader.nextName() == "a"
    reader.beginArray()
    assert reader.nextInt() == 1
    assert reader.nextInt() == 2
    reader.endArray()
    reader.endObject()


def test_options_reject_duplicates():
    from recjson import ArgErr
    with pytest.raises(ArgErr):
        Options.of("a", "a")
    assert Options.of("a", "b").indexOf("c") == -1
