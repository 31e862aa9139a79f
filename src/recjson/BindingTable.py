#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Types import Types
from .stream.Options import Options


class BindingTable:
    """Immutable, ordered bindings for one record type.

    ``allBindings()`` holds one entry per constructor parameter, in
    parameter order (None where the parameter has no exposed property),
    followed by bindings for settable properties the constructor doesn't
    take. ``fieldBindings()`` drops the None entries; its order matches
    ``options()`` so ``selectName`` indexes it directly.
    """

    def __init__(self, type_, ctor, allBindings):
        self._type = type_
        self._ctor = ctor
        self._all = tuple(allBindings)
        self._fields = tuple(b for b in self._all if b is not None)
        self._options = Options(b.jsonName() for b in self._fields)

        type_vars = Types.typeVarMap(type_)
        self._nullable = tuple(
            p.type() is None or Types.isNullable(Types.resolve(p.type(), type_vars))
            for p in ctor.params())

    def type(self):
        return self._type

    def ctor(self):
        return self._ctor

    def arity(self):
        return self._ctor.arity()

    def slotCount(self):
        return len(self._all)

    def allBindings(self):
        return self._all

    def fieldBindings(self):
        return self._fields

    def appendedBindings(self):
        """Bindings for settable properties outside the constructor."""
        return self._all[self._ctor.arity():]

    def options(self):
        return self._options

    def isParamNullable(self, index):
        """Nullability of constructor parameter index with type variables resolved."""
        return self._nullable[index]

    def toStr(self):
        names = ", ".join(b.jsonName() if b is not None else "_" for b in self._all)
        return f"BindingTable({Types.name(self._type)}: {names})"

    def __repr__(self):
        return self.toStr()
