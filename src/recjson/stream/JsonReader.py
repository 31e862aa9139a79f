#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
JsonReader walks a JSON document one token at a time and tracks the
path of the current position for error messages.
"""

import json

from ..Err import JsonDataErr, JsonEncodingErr
from .JsonToken import JsonToken

# Frame kinds
_DOCUMENT = 0
_OBJECT = 1
_ARRAY = 2


class _Obj:
    """Parsed JSON object keeping every name/value pair in input order.

    Duplicate names are preserved so the decoder can detect them.
    """

    __slots__ = ("pairs",)

    def __init__(self, pairs):
        self.pairs = list(pairs)

    def __repr__(self):
        return f"_Obj({self.pairs!r})"


class _Frame:
    """Read position inside one document, object or array."""

    __slots__ = ("kind", "items", "index", "name", "name_read")

    def __init__(self, kind, items):
        self.kind = kind
        self.items = items
        self.index = 0
        self.name = None
        self.name_read = False


class JsonReader:
    """Reads a JSON document as a stream of tokens."""

    def __init__(self, root):
        """Create reader over an already parsed document root.

        Use ``fromStr()`` or ``fromValue()`` rather than calling this.
        """
        self._stack = [_Frame(_DOCUMENT, [root])]

    @staticmethod
    def fromStr(text):
        """Create reader for JSON text.

        Args:
            text: JSON document as str or bytes

        Returns:
            JsonReader positioned before the root value

        Raises:
            JsonEncodingErr: if text is not well-formed JSON
        """
        try:
            root = json.loads(text, object_pairs_hook=_Obj, parse_constant=JsonReader._badConstant)
        except json.JSONDecodeError as e:
            raise JsonEncodingErr.make(f"{e.msg} at line {e.lineno} column {e.colno}", e) from e
        return JsonReader(root)

    @staticmethod
    def fromValue(value):
        """Create reader over a tree of dicts, lists and scalars."""
        return JsonReader(JsonReader._wrap(value))

    @staticmethod
    def _wrap(value):
        if isinstance(value, dict):
            return _Obj((str(k), JsonReader._wrap(v)) for k, v in value.items())
        if isinstance(value, (list, tuple)):
            return [JsonReader._wrap(v) for v in value]
        return value

    @staticmethod
    def _badConstant(name):
        raise JsonEncodingErr.make(f"Numeric values must be finite, not {name}")

    #################################################################
    # Tokens
    #################################################################

    def peek(self):
        """Get the type of the next token without consuming it."""
        f = self._stack[-1]
        if f.kind == _OBJECT:
            if f.index >= len(f.items):
                return JsonToken.END_OBJECT
            if not f.name_read:
                return JsonToken.NAME
            return JsonReader._tokenOf(f.items[f.index][1])
        if f.kind == _ARRAY:
            if f.index >= len(f.items):
                return JsonToken.END_ARRAY
            return JsonReader._tokenOf(f.items[f.index])
        if f.index >= len(f.items):
            return JsonToken.END_DOCUMENT
        return JsonReader._tokenOf(f.items[f.index])

    @staticmethod
    def _tokenOf(v):
        if v is None:
            return JsonToken.NULL
        if isinstance(v, bool):
            return JsonToken.BOOLEAN
        if isinstance(v, (int, float)):
            return JsonToken.NUMBER
        if isinstance(v, str):
            return JsonToken.STRING
        if isinstance(v, _Obj):
            return JsonToken.BEGIN_OBJECT
        return JsonToken.BEGIN_ARRAY

    def hasNext(self):
        """Return True if the current object or array has another element."""
        t = self.peek()
        return t != JsonToken.END_OBJECT and t != JsonToken.END_ARRAY and t != JsonToken.END_DOCUMENT

    def beginObject(self):
        self._expect(JsonToken.BEGIN_OBJECT)
        self._stack.append(_Frame(_OBJECT, self._current().pairs))

    def endObject(self):
        self._expect(JsonToken.END_OBJECT)
        self._stack.pop()
        self._advance()

    def beginArray(self):
        self._expect(JsonToken.BEGIN_ARRAY)
        self._stack.append(_Frame(_ARRAY, self._current()))

    def endArray(self):
        self._expect(JsonToken.END_ARRAY)
        self._stack.pop()
        self._advance()

    #################################################################
    # Names
    #################################################################

    def nextName(self):
        """Consume and return the next property name."""
        self._expect(JsonToken.NAME)
        f = self._stack[-1]
        f.name = f.items[f.index][0]
        f.name_read = True
        return f.name

    def selectName(self, options):
        """Match the next property name against options.

        Consumes the name only when it matches.

        Args:
            options: Options of candidate names

        Returns:
            Index of the name in options, or -1
        """
        if self.peek() != JsonToken.NAME:
            return -1
        f = self._stack[-1]
        name = f.items[f.index][0]
        index = options.indexOf(name)
        if index != -1:
            f.name = name
            f.name_read = True
        return index

    def skipName(self):
        self.nextName()

    #################################################################
    # Values
    #################################################################

    def nextString(self):
        self._expect(JsonToken.STRING)
        return self._consume()

    def nextBool(self):
        self._expect(JsonToken.BOOLEAN)
        return self._consume()

    def nextNull(self):
        self._expect(JsonToken.NULL)
        return self._consume()

    def nextInt(self):
        """Consume a number that must be integral."""
        self._expect(JsonToken.NUMBER)
        v = self._current()
        if isinstance(v, float):
            if not v.is_integer():
                raise self._err(f"Expected an int but was {v}")
            v = int(v)
        self._advance()
        return v

    def nextFloat(self):
        self._expect(JsonToken.NUMBER)
        return float(self._consume())

    def skipValue(self):
        """Skip the next value, including any nested objects or arrays.

        A pending property name is skipped along with its value.
        """
        if self.peek() == JsonToken.NAME:
            self.nextName()
        t = self.peek()
        if not JsonToken.isValue(t):
            raise self._err(f"Expected a value but was {JsonToken.toStr(t)}")
        self._advance()

    def readJsonValue(self):
        """Read the next value as dicts, lists and scalars."""
        t = self.peek()
        if t == JsonToken.BEGIN_OBJECT:
            result = {}
            self.beginObject()
            while self.hasNext():
                name = self.nextName()
                value = self.readJsonValue()
                if name in result:
                    raise self._err(f"Map key '{name}' has multiple values")
                result[name] = value
            self.endObject()
            return result
        if t == JsonToken.BEGIN_ARRAY:
            result = []
            self.beginArray()
            while self.hasNext():
                result.append(self.readJsonValue())
            self.endArray()
            return result
        if not JsonToken.isValue(t):
            raise self._err(f"Expected a value but was {JsonToken.toStr(t)}")
        return self._consume()

    #################################################################
    # Path
    #################################################################

    def path(self):
        """Get JSONPath of the current position, e.g. ``$.items[2].id``."""
        parts = ["$"]
        for f in self._stack[1:]:
            if f.kind == _ARRAY:
                parts.append(f"[{f.index}]")
            elif f.name is not None:
                parts.append(f".{f.name}")
        return "".join(parts)

    #################################################################
    # Utils
    #################################################################

    def _current(self):
        f = self._stack[-1]
        if f.kind == _OBJECT:
            return f.items[f.index][1]
        return f.items[f.index]

    def _consume(self):
        v = self._current()
        self._advance()
        return v

    def _advance(self):
        f = self._stack[-1]
        f.index += 1
        f.name_read = False

    def _expect(self, token):
        actual = self.peek()
        if actual != token:
            raise self._err(f"Expected {JsonToken.toStr(token)} but was {JsonToken.toStr(actual)}")

    def _err(self, msg):
        path = self.path()
        return JsonDataErr(f"{msg} at path {path}", None, None, None, path)

    def __repr__(self):
        return f"JsonReader({self.path()})"
