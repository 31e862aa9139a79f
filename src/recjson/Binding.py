#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .SlotStore import ABSENT
from .Types import Types


class Binding:
    """Maps one property to its wire name, adapter and constructor slot."""

    def __init__(self, name, jsonName, adapter, prop, param, slotIndex, propType=None):
        """Create a Binding.

        Args:
            name: Declared property name
            jsonName: Name used on the wire
            adapter: JsonAdapter for the property's type
            prop: Prop accessor
            param: Matching constructor Param, or None
            slotIndex: Slot in the SlotStore
            propType: Property type with type variables resolved
        """
        self._name = name
        self._jsonName = jsonName
        self._adapter = adapter
        self._prop = prop
        self._param = param
        self._slotIndex = slotIndex
        self._propType = propType if propType is not None else prop.type()
        self._nullable = Types.isNullable(self._propType)

    def name(self):
        return self._name

    def jsonName(self):
        return self._jsonName

    def adapter(self):
        return self._adapter

    def prop(self):
        return self._prop

    def param(self):
        return self._param

    def slotIndex(self):
        return self._slotIndex

    def propType(self):
        return self._propType

    def isNullable(self):
        return self._nullable

    def withSlotIndex(self, index):
        """Copy of this binding assigned to a different slot."""
        return Binding(self._name, self._jsonName, self._adapter, self._prop,
                       self._param, index, self._propType)

    def get(self, obj):
        return self._prop.get(obj)

    def set(self, obj, value):
        """Apply value to obj unless it is ABSENT."""
        if value is not ABSENT:
            self._prop.set(obj, value)

    def __repr__(self):
        return f"Binding({self._name!r}, json={self._jsonName!r}, slot={self._slotIndex})"
