#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import pytest

from recjson import ArgErr
from recjson.stream import JsonWriter


def test_compact_object():
    w = JsonWriter()
    w.beginObject()
    w.name("a").value(1)
    w.name("b").beginArray().value(True).nullValue().value("x").endArray()
    w.name("c").value(1.5)
    w.endObject()
    assert w.toStr() == '{"a":1,"b":[true,null,"x"],"c":1.5}'


def test_indent():
    w = JsonWriter(indent=2)
    w.beginObject().name("a").beginArray().value(1).endArray().endObject()
    assert w.toStr() == '{\n  "a": [\n    1\n  ]\n}'


def test_empty_containers():
    w = JsonWriter(indent=2)
    w.beginArray().beginObject().endObject().beginArray().endArray().endArray()
    assert w.toStr() == "[\n  {},\n  []\n]"


def test_serialize_nulls_off_drops_name():
    w = JsonWriter(serializeNulls=False)
    w.beginObject().name("a").nullValue().name("b").value(2).endObject()
    assert w.toStr() == '{"b":2}'


def test_non_finite_rejected():
    w = JsonWriter()
    with pytest.raises(ArgErr):
        w.value(float("nan"))


def test_nesting_problems():
    with pytest.raises(ArgErr):
        JsonWriter().name("a")
    w = JsonWriter().beginObject()
    with pytest.raises(ArgErr):
        w.value(1)
    with pytest.raises(ArgErr):
        JsonWriter().beginObject().toStr()


def test_escaping():
    w = JsonWriter()
    w.value('say "hi"\n')
    assert w.toStr() == '"say \\"hi\\"\\n"'


def test_json_value():
    w = JsonWriter()
    w.jsonValue({"a": [1, None, {"b": False}]})
    assert w.toStr() == '{"a":[1,null,{"b":false}]}'


def test_make_reads_config(config):
    config.props()["writer.indent"] = "4"
    config.props()["writer.serializeNulls"] = "false"
    w = JsonWriter.make()
    assert w.serializeNulls() is False
    w.beginObject().name("a").value(1).name("b").nullValue().endObject()
    assert w.toStr() == '{\n    "a": 1\n}'


def test_make_options_override_config(config):
    config.props()["writer.indent"] = "4"
    w = JsonWriter.make({"indent": None})
    w.beginArray().value(1).endArray()
    assert w.toStr() == "[1]"
