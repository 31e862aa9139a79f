#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from dataclasses import dataclass
from typing import Union

import pytest

from recjson import (
    ArgErr,
    Inspector,
    MissingDefaultErr,
    NoSourceErr,
    Prop,
    RecordAdapterFactory,
    TypeMismatchErr,
    UnsupportedErr,
    UnsupportedTypeErr,
)
from records import (
    Account,
    BadReturn,
    Box,
    Card,
    Clash,
    Constants,
    Counter,
    Expr,
    Fixed,
    Greeter,
    Hex,
    Mismatch,
    NoSource,
    Pair,
    Point,
    PositionalOnly,
    Renamed,
    Shape,
    Suit,
    TransientRequired,
    Varargs,
)


def bindings(table):
    return [(b.name(), b.jsonName(), b.slotIndex()) if b is not None else None
            for b in table.allBindings()]


def test_dataclass_table(registry):
    table = Inspector.inspect(Pair, (), registry).get()
    assert bindings(table) == [("a", "a", 0), ("b", "b", 1)]
    assert table.arity() == 2
    assert table.options().names() == ("a", "b")
    assert table.appendedBindings() == ()


def test_json_names_and_transient(registry):
    table = Inspector.inspect(Card, (), registry).get()
    assert bindings(table) == [("rank", "r", 0), ("suit", "suit", 1), ("tags", "tags", 2), None]
    assert table.options().names() == ("r", "suit", "tags")
    assert [b.name() for b in table.fieldBindings()] == ["rank", "suit", "tags"]


def test_field_metadata(registry):
    table = Inspector.inspect(Renamed, (), registry).get()
    assert bindings(table) == [("first", "first_name", 0), None]


def test_settable_property_is_appended(registry):
    table = Inspector.inspect(Counter, (), registry).get()
    assert bindings(table) == [("a", "a", 0), ("c", "c", 1)]
    assert [b.name() for b in table.appendedBindings()] == ["c"]


def test_readonly_property_without_param_skipped(registry):
    table = Inspector.inspect(Account, (), registry).get()
    assert bindings(table) == [("id", "id", 0), ("limit", "limit", 1), ("note", "note", 2)]

    table = Inspector.inspect(Constants, (), registry).get()
    assert table.allBindings() == ()


def test_param_without_property_is_placeholder(registry):
    table = Inspector.inspect(Fixed, (), registry).get()
    assert bindings(table) == [("label", "label", 0), None]
    assert table.slotCount() == 2


def test_generic_type_arguments_resolved(registry):
    table = Inspector.inspect(Box[int], (), registry).get()
    value = table.allBindings()[0]
    assert value.propType() is int
    assert not value.isNullable()

    table = Inspector.inspect(Box, (), registry).get()
    assert table.allBindings()[0].isNullable()


def test_not_handled(registry):
    assert Inspector.inspect(Greeter, (), registry).isNone()
    assert Inspector.inspect(Suit, (), registry).isNone()
    assert Inspector.inspect(str, (), registry).isNone()
    assert Inspector.inspect(Varargs, (), registry).isNone()
    assert Inspector.inspect(Pair, (Hex(),), registry).isNone()
    with pytest.raises(UnsupportedErr):
        Inspector.inspect(Greeter, (), registry).get()


@pytest.mark.parametrize("type_, err_type, text", [
    (Shape, UnsupportedTypeErr, "abstract class"),
    (Expr, UnsupportedTypeErr, "sealed class"),
    (Mismatch, TypeMismatchErr, "'size' has a constructor parameter of type str"),
    (TransientRequired, MissingDefaultErr, "transient constructor parameter 'token'"),
    (NoSource, NoSourceErr, "required constructor parameter 'secret'"),
    (Clash, UnsupportedTypeErr, "both use JSON name 'x'"),
    (PositionalOnly, UnsupportedTypeErr, "positional-only parameter 'a'"),
])
def test_rejected(registry, type_, err_type, text):
    result = Inspector.inspect(type_, (), registry)
    assert result.isErr()
    assert isinstance(result.err(), err_type)
    assert text in result.reason()
    assert result.err().typeName() == f"records.{type_.__qualname__}"


def test_rejects_local_class(registry):
    @dataclass
    class Local:
        a: int

    result = Inspector.inspect(Local, (), registry)
    assert result.isErr()
    assert "local class" in result.reason()


def test_rejects_instance(registry):
    result = Inspector.inspect(Pair(1), (), registry)
    assert isinstance(result.err(), UnsupportedTypeErr)
    assert "object declaration" in result.reason()


def test_subclass_of_sealed_is_bindable(registry):
    assert Inspector.inspect(Expr, (), registry).isErr()
    sub = type("Sub", (Expr,), {"__module__": "records"})
    # dynamic classes have no <locals> qualname
    assert Inspector.inspect(sub, (), registry).isOk()


def test_factory_raises_config_errors(registry):
    factory = RecordAdapterFactory()
    assert factory.create(Greeter, (), registry) is None
    with pytest.raises(NoSourceErr):
        factory.create(NoSource, (), registry)
    with pytest.raises(TypeMismatchErr):
        registry.adapter(Mismatch)


def test_union_request_is_not_handled(registry):
    for type_ in (Union[int, str], int | str):
        result = Inspector.inspect(type_, (), registry)
        assert result.isNone()
        assert "no record binding" in result.reason()
    with pytest.raises(ArgErr) as e:
        registry.adapter(Union[int, str])
    assert "No JsonAdapter for" in e.value.msg()


def test_unresolvable_property_return_type(registry):
    result = Inspector.inspect(BadReturn, (), registry)
    assert isinstance(result.err(), UnsupportedTypeErr)
    assert "Cannot resolve return type of property BadReturn.a" in result.reason()


def test_prop_kinds():
    props = {p.name(): p for p in Prop.list(Account)}
    assert list(props) == ["id", "limit", "note", "display"]
    assert all(p.isProperty() and not p.isField() for p in props.values())
    assert props["id"].isReadonly()
    assert not props["note"].isReadonly()

    fields = Prop.list(Point)
    assert [p.name() for p in fields] == ["x", "y"]
    assert all(p.isField() and p.isReadonly() for p in fields)
