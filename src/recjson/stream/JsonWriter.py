#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
JsonWriter emits JSON text one token at a time.
"""

import json
import math

from ..Err import ArgErr

# Scopes
_EMPTY_DOCUMENT = 0
_NONEMPTY_DOCUMENT = 1
_EMPTY_OBJECT = 2
_NONEMPTY_OBJECT = 3
_DANGLING_NAME = 4
_EMPTY_ARRAY = 5
_NONEMPTY_ARRAY = 6


class JsonWriter:
    """Writes JSON text to an in-memory buffer."""

    def __init__(self, indent=None, serializeNulls=True):
        """Create writer.

        Args:
            indent: Number of spaces (or a string) per nesting level;
                None writes compact JSON
            serializeNulls: If False, a name followed by null is omitted
        """
        if isinstance(indent, int):
            indent = " " * indent
        self._indent = indent or None
        self._serializeNulls = serializeNulls
        self._out = []
        self._stack = [_EMPTY_DOCUMENT]
        self._deferredName = None

    @staticmethod
    def make(options=None):
        """Create writer from an options dict or the process configuration.

        Recognized options: ``indent``, ``serializeNulls``.
        """
        from ..Config import Config
        options = options or {}
        config = Config.cur()
        indent = options["indent"] if "indent" in options else config.getInt("writer.indent")
        serialize_nulls = options["serializeNulls"] if "serializeNulls" in options \
            else config.getBool("writer.serializeNulls", True)
        return JsonWriter(indent, serialize_nulls)

    def serializeNulls(self):
        return self._serializeNulls

    #################################################################
    # Structure
    #################################################################

    def beginObject(self):
        self._writeDeferredName()
        return self._open(_EMPTY_OBJECT, "{")

    def endObject(self):
        return self._close(_EMPTY_OBJECT, _NONEMPTY_OBJECT, "}")

    def beginArray(self):
        self._writeDeferredName()
        return self._open(_EMPTY_ARRAY, "[")

    def endArray(self):
        return self._close(_EMPTY_ARRAY, _NONEMPTY_ARRAY, "]")

    def name(self, name):
        """Write a property name; the next call must write its value."""
        if name is None:
            raise ArgErr.make("name == None")
        scope = self._stack[-1]
        if scope != _EMPTY_OBJECT and scope != _NONEMPTY_OBJECT:
            raise ArgErr.make("Nesting problem: name() outside of an object")
        if self._deferredName is not None:
            raise ArgErr.make(f"Nesting problem: dangling name '{self._deferredName}'")
        self._deferredName = name
        return self

    #################################################################
    # Values
    #################################################################

    def value(self, v):
        """Write a str, int, float or bool value."""
        if v is None:
            return self.nullValue()
        if isinstance(v, bool):
            return self._raw("true" if v else "false")
        if isinstance(v, int):
            return self._raw(str(v))
        if isinstance(v, float):
            if math.isnan(v) or math.isinf(v):
                raise ArgErr.make(f"Numeric values must be finite, but was {v}")
            return self._raw(repr(v))
        if isinstance(v, str):
            return self._raw(json.dumps(v, ensure_ascii=False))
        raise ArgErr.make(f"Not a JSON primitive: {type(v).__name__}")

    def nullValue(self):
        if self._deferredName is not None and not self._serializeNulls:
            # Drop the name along with its null value
            self._deferredName = None
            return self
        return self._raw("null")

    def jsonValue(self, v):
        """Write a tree of dicts, lists and scalars."""
        if isinstance(v, dict):
            self.beginObject()
            for k, item in v.items():
                self.name(str(k))
                self.jsonValue(item)
            return self.endObject()
        if isinstance(v, (list, tuple)):
            self.beginArray()
            for item in v:
                self.jsonValue(item)
            return self.endArray()
        return self.value(v)

    def toStr(self):
        """Get the JSON text written so far."""
        if len(self._stack) != 1 or self._deferredName is not None:
            raise ArgErr.make("Incomplete document")
        return "".join(self._out)

    #################################################################
    # Utils
    #################################################################

    def _raw(self, text):
        self._writeDeferredName()
        self._beforeValue()
        self._out.append(text)
        return self

    def _open(self, empty, bracket):
        self._beforeValue()
        self._stack.append(empty)
        self._out.append(bracket)
        return self

    def _close(self, empty, nonempty, bracket):
        scope = self._stack[-1]
        if scope != empty and scope != nonempty:
            raise ArgErr.make(f"Nesting problem: unexpected '{bracket}'")
        if self._deferredName is not None:
            raise ArgErr.make(f"Dangling name: {self._deferredName}")
        self._stack.pop()
        if scope == nonempty:
            self._newline()
        self._out.append(bracket)
        return self

    def _writeDeferredName(self):
        if self._deferredName is None:
            return
        scope = self._stack[-1]
        if scope == _NONEMPTY_OBJECT:
            self._out.append(",")
        self._newline()
        self._out.append(json.dumps(self._deferredName, ensure_ascii=False))
        self._out.append(": " if self._indent else ":")
        self._stack[-1] = _DANGLING_NAME
        self._deferredName = None

    def _beforeValue(self):
        scope = self._stack[-1]
        if scope == _EMPTY_DOCUMENT:
            self._stack[-1] = _NONEMPTY_DOCUMENT
        elif scope == _NONEMPTY_DOCUMENT:
            raise ArgErr.make("JSON must have only one top-level value")
        elif scope == _EMPTY_ARRAY:
            self._stack[-1] = _NONEMPTY_ARRAY
            self._newline()
        elif scope == _NONEMPTY_ARRAY:
            self._out.append(",")
            self._newline()
        elif scope == _DANGLING_NAME:
            self._stack[-1] = _NONEMPTY_OBJECT
        else:
            raise ArgErr.make("Nesting problem: value without a name inside an object")

    def _newline(self):
        if self._indent is None:
            return
        self._out.append("\n")
        self._out.append(self._indent * (len(self._stack) - 1))
