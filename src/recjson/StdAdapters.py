#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
StdAdapters supplies adapters for the built-in types: scalars, None,
Any, lists, tuples, sets, dicts, enums and optionals.
"""

import collections.abc
import enum
import typing

from .Err import ArgErr, JsonDataErr
from .JsonAdapter import JsonAdapter
from .Types import NoneType, Types

_LIST_TYPES = frozenset([
    list,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Collection,
    collections.abc.Iterable,
])

_SET_TYPES = {
    set: set,
    frozenset: frozenset,
    collections.abc.Set: frozenset,
    collections.abc.MutableSet: set,
}

_MAP_TYPES = frozenset([
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
])


class StdAdapters:
    """Factory for the built-in adapters.

    Every adapter it returns is null safe: JSON null decodes to None so
    record adapters can apply their own nullability rules.
    """

    def create(self, type_, annotations, registry):
        if annotations:
            return None
        adapter = self._create(Types.strip(type_), registry)
        return adapter.nullSafe() if adapter is not None else None

    def _create(self, t, registry):
        if Types.isUnion(t):
            if not Types.isNullable(t):
                return None
            inner = Types.nonNullable(t)
            if Types.isUnion(inner):
                return None
            return registry.adapter(inner)

        if t is typing.Any or t is object:
            return ObjectAdapter(registry)
        if isinstance(t, typing.TypeVar):
            if t.__bound__ is not None:
                return registry.adapter(t.__bound__)
            return ObjectAdapter(registry)
        if t is None or t is NoneType:
            return NoneAdapter()

        if t is bool:
            return BoolAdapter()
        if t is int:
            return IntAdapter()
        if t is float:
            return FloatAdapter()
        if t is str:
            return StrAdapter()

        raw = Types.rawType(t)
        args = typing.get_args(t)

        if raw in _LIST_TYPES:
            return ListAdapter(self._elem(registry, args, 0), list)
        if raw in _SET_TYPES:
            return ListAdapter(self._elem(registry, args, 0), _SET_TYPES[raw])
        if raw is tuple:
            if not args or (len(args) == 2 and args[1] is Ellipsis):
                return ListAdapter(self._elem(registry, args, 0), tuple)
            return TupleAdapter([registry.adapter(a) for a in args])
        if raw in _MAP_TYPES:
            key = Types.strip(args[0]) if args else str
            if key is not str and key is not int and key is not typing.Any:
                return None
            return MapAdapter(self._elem(registry, args, 1), int if key is int else str)

        if isinstance(raw, type) and issubclass(raw, enum.Enum):
            return EnumAdapter(raw)

        return None

    @staticmethod
    def _elem(registry, args, i):
        return registry.adapter(args[i] if len(args) > i else typing.Any)


#################################################################
# Scalars
#################################################################

class BoolAdapter(JsonAdapter):

    def fromJson(self, reader):
        return reader.nextBool()

    def toJson(self, writer, value):
        writer.value(bool(value))

    def toStr(self):
        return "JsonAdapter(bool)"


class IntAdapter(JsonAdapter):

    def fromJson(self, reader):
        return reader.nextInt()

    def toJson(self, writer, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ArgErr.make(f"Expected int but was {type(value).__name__}")
        writer.value(value)

    def toStr(self):
        return "JsonAdapter(int)"


class FloatAdapter(JsonAdapter):

    def fromJson(self, reader):
        return reader.nextFloat()

    def toJson(self, writer, value):
        writer.value(float(value))

    def toStr(self):
        return "JsonAdapter(float)"


class StrAdapter(JsonAdapter):

    def fromJson(self, reader):
        return reader.nextString()

    def toJson(self, writer, value):
        if not isinstance(value, str):
            raise ArgErr.make(f"Expected str but was {type(value).__name__}")
        writer.value(value)

    def toStr(self):
        return "JsonAdapter(str)"


class NoneAdapter(JsonAdapter):

    def fromJson(self, reader):
        return reader.nextNull()

    def toJson(self, writer, value):
        writer.nullValue()

    def toStr(self):
        return "JsonAdapter(None)"


class EnumAdapter(JsonAdapter):
    """Encodes enum members by name."""

    def __init__(self, enum_type):
        self._type = enum_type
        self._members = dict(enum_type.__members__)

    def fromJson(self, reader):
        name = reader.nextString()
        member = self._members.get(name)
        if member is None:
            path = reader.path()
            raise JsonDataErr(
                f"Expected one of {list(self._members)} but was {name} at path {path}",
                None, None, None, path)
        return member

    def toJson(self, writer, value):
        writer.value(value.name)

    def toStr(self):
        return f"JsonAdapter({Types.name(self._type)})"


#################################################################
# Collections
#################################################################

class ListAdapter(JsonAdapter):
    """Encodes lists, tuples and sets as JSON arrays."""

    def __init__(self, elem, factory):
        self._elem = elem
        self._factory = factory

    def fromJson(self, reader):
        items = []
        reader.beginArray()
        while reader.hasNext():
            items.append(self._elem.fromJson(reader))
        reader.endArray()
        return items if self._factory is list else self._factory(items)

    def toJson(self, writer, value):
        writer.beginArray()
        for item in value:
            self._elem.toJson(writer, item)
        writer.endArray()

    def toStr(self):
        return f"{self._elem.toStr()}.{self._factory.__name__}()"


class TupleAdapter(JsonAdapter):
    """Encodes fixed-length tuples as JSON arrays."""

    def __init__(self, elems):
        self._elems = list(elems)

    def fromJson(self, reader):
        items = []
        reader.beginArray()
        for elem in self._elems:
            if not reader.hasNext():
                break
            items.append(elem.fromJson(reader))
        if len(items) != len(self._elems) or reader.hasNext():
            path = reader.path()
            raise JsonDataErr(
                f"Expected {len(self._elems)} elements at path {path}", None, None, None, path)
        reader.endArray()
        return tuple(items)

    def toJson(self, writer, value):
        if len(value) != len(self._elems):
            raise ArgErr.make(f"Expected tuple of {len(self._elems)} but was {len(value)}")
        writer.beginArray()
        for elem, item in zip(self._elems, value):
            elem.toJson(writer, item)
        writer.endArray()


class MapAdapter(JsonAdapter):
    """Encodes dicts with str or int keys as JSON objects."""

    def __init__(self, value, key_type=str):
        self._value = value
        self._key_type = key_type

    def fromJson(self, reader):
        result = {}
        reader.beginObject()
        while reader.hasNext():
            name = reader.nextName()
            key = self._key(reader, name)
            value = self._value.fromJson(reader)
            if key in result:
                path = reader.path()
                raise JsonDataErr(
                    f"Map key '{name}' has multiple values at path {path}", None, name, name, path)
            result[key] = value
        reader.endObject()
        return result

    def _key(self, reader, name):
        if self._key_type is str:
            return name
        try:
            return int(name)
        except ValueError:
            path = reader.path()
            raise JsonDataErr(f"Expected an int key but was '{name}' at path {path}",
                              None, name, name, path) from None

    def toJson(self, writer, value):
        writer.beginObject()
        for k, v in value.items():
            if k is None:
                raise ArgErr.make("Map key is None")
            writer.name(str(k))
            self._value.toJson(writer, v)
        writer.endObject()

    def toStr(self):
        return f"{self._value.toStr()}.map()"


class ObjectAdapter(JsonAdapter):
    """Adapter for Any: decodes to dicts, lists and scalars.

    Encoding dispatches on the runtime class of the value, so records
    nested in an Any property still encode through their own adapter.
    """

    def __init__(self, registry):
        self._registry = registry

    def fromJson(self, reader):
        return reader.readJsonValue()

    def toJson(self, writer, value):
        if value is None or isinstance(value, (str, int, float, bool)):
            writer.value(value)
        elif isinstance(value, dict):
            writer.beginObject()
            for k, v in value.items():
                writer.name(str(k))
                self.toJson(writer, v)
            writer.endObject()
        elif isinstance(value, (list, tuple, set, frozenset)):
            writer.beginArray()
            for v in value:
                self.toJson(writer, v)
            writer.endArray()
        else:
            self._registry.adapter(type(value)).toJson(writer, value)

    def toStr(self):
        return "JsonAdapter(Any)"
