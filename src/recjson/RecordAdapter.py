#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
RecordAdapter encodes a record through its properties and decodes it by
calling the primary constructor, then setting any remaining properties.
"""

from .Err import (
    DuplicateFieldErr,
    JsonDataErr,
    MissingPropertyErr,
    NullErr,
    UnexpectedNullErr,
)
from .JsonAdapter import JsonAdapter
from .SlotStore import SlotStore
from .Types import Types


class RecordAdapter(JsonAdapter):
    """Adapter driven by a BindingTable."""

    def __init__(self, table):
        self._table = table

    def table(self):
        return self._table

    def fromJson(self, reader):
        """Decode one record.

        Reads every field into a fresh SlotStore, validates the absent
        constructor slots, constructs the instance and applies the
        settable properties that aren't constructor parameters. Either
        a complete instance is returned or a JsonDataErr is raised.
        """
        table = self._table
        ctor = table.ctor()
        arity = ctor.arity()
        fields = table.fieldBindings()
        options = table.options()
        slots = SlotStore(table.slotCount())

        reader.beginObject()
        while reader.hasNext():
            index = reader.selectName(options)
            if index == -1:
                reader.skipName()
                reader.skipValue()
                continue

            binding = fields[index]
            slot = binding.slotIndex()
            if slots.contains(slot):
                raise DuplicateFieldErr.makeFor(binding.name(), binding.jsonName(), reader.path())

            value = binding.adapter().fromJson(reader)
            if value is None and not binding.isNullable():
                raise UnexpectedNullErr.makeFor(binding.name(), binding.jsonName(), reader.path())
            slots.set(slot, value)
        reader.endObject()

        # Absent parameters: required ones fail, nullable optional ones become None
        all_bindings = table.allBindings()
        for param in ctor.params():
            i = param.index()
            if slots.contains(i):
                continue
            if not param.hasDefault():
                binding = all_bindings[i]
                json_name = binding.jsonName() if binding is not None else None
                raise MissingPropertyErr.makeFor(param.name(), json_name, reader.path())
            if table.isParamNullable(i):
                slots.set(i, None)

        try:
            if slots.isFullyInitialized(arity):
                result = ctor.call(slots.values(0, arity))
            else:
                result = ctor.callBy(slots)
        except Exception as e:
            path = reader.path()
            raise JsonDataErr(f"Cannot make {Types.name(ctor.parent())}: {e} at {path}",
                              e, None, None, path) from e

        for binding in table.appendedBindings():
            binding.set(result, slots.get(binding.slotIndex()))

        return result

    def toJson(self, writer, value):
        """Encode value's bindings in table order."""
        if value is None:
            raise NullErr.make("value == None")

        writer.beginObject()
        for binding in self._table.allBindings():
            if binding is None:
                continue
            writer.name(binding.jsonName())
            binding.adapter().toJson(writer, binding.get(value))
        writer.endObject()

    def toStr(self):
        return f"RecordAdapter({Types.name(self._table.type())})"
