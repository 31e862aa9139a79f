#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from typing import Any, Optional

import pytest

from recjson import ArgErr, JsonDataErr, NullErr, Registry
from records import (
    Colored,
    Greeter,
    Hex,
    HexAdapter,
    Money,
    Suit,
    Wallet,
)


def test_scalars(registry):
    assert registry.adapter(int).fromJsonStr("12") == 12
    assert registry.adapter(float).fromJsonStr("1") == 1.0
    assert registry.adapter(str).fromJsonStr('"hi"') == "hi"
    assert registry.adapter(bool).fromJsonStr("false") is False
    assert registry.adapter(int).toJsonStr(5) == "5"


def test_scalars_decode_null_as_none(registry):
    assert registry.adapter(int).fromJsonStr("null") is None
    assert registry.adapter(int).toJsonStr(None) == "null"


def test_scalar_type_mismatch(registry):
    with pytest.raises(JsonDataErr):
        registry.adapter(int).fromJsonStr('"1"')
    with pytest.raises(ArgErr):
        registry.adapter(int).toJsonStr(True)


def test_collections(registry):
    assert registry.adapter(list[int]).fromJsonStr("[1, 2]") == [1, 2]
    assert registry.adapter(tuple[int, ...]).fromJsonStr("[1, 2]") == (1, 2)
    assert registry.adapter(set[str]).fromJsonStr('["a", "a"]') == {"a"}
    assert registry.adapter(tuple[int, str]).fromJsonStr('[1, "a"]') == (1, "a")
    assert registry.adapter(dict[str, int]).fromJsonStr('{"a": 1}') == {"a": 1}
    assert registry.adapter(dict[int, str]).fromJsonStr('{"1": "a"}') == {1: "a"}
    assert registry.adapter(dict[str, list[int]]).toJsonStr({"a": [1]}) == '{"a":[1]}'


def test_fixed_tuple_length(registry):
    with pytest.raises(JsonDataErr):
        registry.adapter(tuple[int, str]).fromJsonStr("[1]")
    with pytest.raises(ArgErr):
        registry.adapter(tuple[int, str]).toJsonStr((1,))


def test_map_duplicate_keys(registry):
    with pytest.raises(JsonDataErr):
        registry.adapter(dict[str, int]).fromJsonStr('{"a": 1, "a": 2}')


def test_enum_by_name(registry):
    adapter = registry.adapter(Suit)
    assert adapter.fromJsonStr('"SPADES"') is Suit.SPADES
    assert adapter.toJsonStr(Suit.HEARTS) == '"HEARTS"'
    with pytest.raises(JsonDataErr):
        adapter.fromJsonStr('"CLUBS"')


def test_optional_and_any(registry):
    assert registry.adapter(Optional[int]).fromJsonStr("null") is None
    assert registry.adapter(int | None).fromJsonStr("3") == 3
    assert registry.adapter(Any).fromJsonStr('{"a": [1]}') == {"a": [1]}
    assert registry.adapter(Any).toJsonStr(Money(150)) == '"1.50"'


def test_adapters_are_cached(registry):
    assert registry.adapter(list[int]) is registry.adapter(list[int])
    assert registry.adapter(Wallet) is registry.adapter(Wallet)


def test_unsupported_type(registry):
    with pytest.raises(ArgErr) as e:
        registry.adapter(Greeter)
    assert "No JsonAdapter for" in e.value.msg()


def test_qualifier_requires_registered_adapter(registry):
    with pytest.raises(ArgErr) as e:
        registry.adapter(Colored)
    assert "annotated [Hex()]" in e.value.msg()
    assert "for field 'color'" in e.value.msg()


def test_builder_adds_qualified_adapter():
    registry = Registry.builder().add(int, HexAdapter(), Hex()).build()
    adapter = registry.adapter(Colored)
    assert adapter.toJsonStr(Colored(0xff8800)) == '{"color":"#ff8800"}'
    assert adapter.fromJsonStr('{"color": "#000010"}') == Colored(16)
    # unqualified int is untouched
    assert registry.adapter(int).toJsonStr(16) == "16"


def test_user_factory_wins():
    class Fixed:
        def create(self, type_, annotations, registry):
            return registry.adapter(str) if type_ is Money else None

    registry = Registry.builder().addFactory(Fixed()).build()
    assert registry.adapter(Money).fromJsonStr('"x"') == "x"


def test_generated_adapter(registry):
    adapter = registry.adapter(Wallet)
    wallet = adapter.fromJsonStr('{"owner": "ann", "balance": "12.34"}')
    assert wallet == Wallet("ann", Money(1234))
    assert adapter.toJsonStr(wallet) == '{"owner":"ann","balance":"12.34"}'


def test_null_safe_and_non_null(registry):
    adapter = registry.adapter(Money)
    assert adapter.fromJsonStr("null") is None
    strict = adapter.nonNull()
    with pytest.raises(JsonDataErr):
        strict.fromJsonStr("null")
    with pytest.raises(NullErr):
        strict.toJsonStr(None)

