#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import JsonDataErr, NullErr
from .stream.JsonReader import JsonReader
from .stream.JsonToken import JsonToken
from .stream.JsonWriter import JsonWriter


class JsonAdapter:
    """Converts between JSON and Python values of one type.

    Subclasses implement ``fromJson(reader)`` and ``toJson(writer, value)``.
    """

    def fromJson(self, reader):
        """Read one value from reader."""
        raise NotImplementedError(f"{type(self).__name__}.fromJson")

    def toJson(self, writer, value):
        """Write value to writer."""
        raise NotImplementedError(f"{type(self).__name__}.toJson")

    def fromJsonStr(self, text):
        """Decode value from JSON text.

        Args:
            text: JSON document

        Returns:
            Decoded value
        """
        reader = JsonReader.fromStr(text)
        result = self.fromJson(reader)
        if reader.peek() != JsonToken.END_DOCUMENT:
            raise JsonDataErr("JSON document was not fully consumed.", None, None, None, reader.path())
        return result

    def toJsonStr(self, value, options=None):
        """Encode value to JSON text.

        Args:
            value: Value to encode
            options: Optional dict with ``indent`` and ``serializeNulls``

        Returns:
            JSON string
        """
        writer = JsonWriter.make(options)
        self.toJson(writer, value)
        return writer.toStr()

    def fromJsonValue(self, value):
        """Decode from a tree of dicts, lists and scalars."""
        return self.fromJson(JsonReader.fromValue(value))

    def nullSafe(self):
        """Get an adapter that maps JSON null to None and back."""
        if isinstance(self, NullSafeAdapter):
            return self
        return NullSafeAdapter(self)

    def nonNull(self):
        """Get an adapter that rejects null in both directions."""
        if isinstance(self, NonNullAdapter):
            return self
        return NonNullAdapter(self)

    def toStr(self):
        return f"{type(self).__name__}"

    def __repr__(self):
        return self.toStr()


class NullSafeAdapter(JsonAdapter):
    """Wraps a delegate so None passes through without reaching it."""

    def __init__(self, delegate):
        self._delegate = delegate

    def delegate(self):
        return self._delegate

    def fromJson(self, reader):
        if reader.peek() == JsonToken.NULL:
            return reader.nextNull()
        return self._delegate.fromJson(reader)

    def toJson(self, writer, value):
        if value is None:
            writer.nullValue()
        else:
            self._delegate.toJson(writer, value)

    def toStr(self):
        return f"{self._delegate.toStr()}.nullSafe()"


class NonNullAdapter(JsonAdapter):
    """Wraps a delegate so null is an error in both directions."""

    def __init__(self, delegate):
        self._delegate = delegate

    def delegate(self):
        return self._delegate

    def fromJson(self, reader):
        if reader.peek() == JsonToken.NULL:
            path = reader.path()
            raise JsonDataErr(f"Unexpected null at {path}", None, None, None, path)
        return self._delegate.fromJson(reader)

    def toJson(self, writer, value):
        if value is None:
            raise NullErr.make("Unexpected null value")
        self._delegate.toJson(writer, value)

    def toStr(self):
        return f"{self._delegate.toStr()}.nonNull()"
