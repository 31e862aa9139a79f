#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
Inspector builds the binding table for a record type and rejects type
shapes that can't be bound reflectively.
"""

import enum
import inspect
import typing

from .Binding import Binding
from .BindingTable import BindingTable
from .Ctor import Ctor
from .Err import (
    ConfigErr,
    MissingDefaultErr,
    NoSourceErr,
    TypeMismatchErr,
    UnsupportedTypeErr,
)
from .Facet import Facet
from .Log import Log
from .Prop import Prop
from .Types import Types


class InspectResult:
    """Outcome of inspecting a type.

    Exactly one of:
    - ok: a BindingTable
    - none: the type isn't handled here, another factory may take it
    - err: a ConfigErr; the type can never be bound
    """

    _OK = "ok"
    _NONE = "none"
    _ERR = "err"

    def __init__(self, kind, table=None, err=None, reason=None):
        self._kind = kind
        self._table = table
        self._err = err
        self._reason = reason

    @staticmethod
    def ok(table):
        return InspectResult(InspectResult._OK, table=table)

    @staticmethod
    def none(reason):
        return InspectResult(InspectResult._NONE, reason=reason)

    @staticmethod
    def fail(err):
        return InspectResult(InspectResult._ERR, err=err, reason=err.msg())

    def isOk(self):
        return self._kind == InspectResult._OK

    def isNone(self):
        return self._kind == InspectResult._NONE

    def isErr(self):
        return self._kind == InspectResult._ERR

    def table(self):
        return self._table

    def err(self):
        return self._err

    def reason(self):
        return self._reason

    def get(self):
        """Get the table, raising the ConfigErr for a failed inspection."""
        if self._kind == InspectResult._ERR:
            raise self._err
        if self._kind == InspectResult._NONE:
            from .Err import UnsupportedErr
            raise UnsupportedErr.make(self._reason)
        return self._table

    def __repr__(self):
        if self.isOk():
            return f"InspectResult.ok({self._table!r})"
        return f"InspectResult.{self._kind}({self._reason!r})"


class Inspector:
    """Builds BindingTables for record types."""

    log = Log.get("recjson")

    @staticmethod
    def inspect(type_, annotations, registry):
        """Inspect type_ and build its binding table.

        Args:
            type_: Class or parameterized generic (``Box[int]``)
            annotations: Qualifier facets of the request
            registry: Registry used to look up property adapters

        Returns:
            InspectResult
        """
        if annotations:
            return InspectResult.none("qualified types need a registered adapter")

        raw = Types.rawType(type_)
        if Types.isUnion(type_) or (typing.get_origin(Types.strip(type_)) is not None
                                    and not isinstance(raw, type)):
            return InspectResult.none(f"no record binding for {Types.name(type_)}")
        if not isinstance(raw, type):
            return InspectResult.fail(UnsupportedTypeErr.makeFor(
                repr(type_), f"Cannot serialize object declaration {type_!r}"))

        name = Types.name(raw)
        if Types.isPlatformType(raw):
            return InspectResult.none(f"platform type {name}")
        if Types.isInterface(raw):
            return InspectResult.none(f"interface {name}")
        if issubclass(raw, enum.Enum):
            return InspectResult.none(f"enum {name}")

        if Types.isLocal(raw):
            return InspectResult.fail(UnsupportedTypeErr.makeFor(
                name, f"Cannot serialize local class or object expression {name}"))
        if inspect.isabstract(raw):
            return InspectResult.fail(UnsupportedTypeErr.makeFor(
                name, f"Cannot serialize abstract class {name}"))
        if Facet.isSealed(raw):
            return InspectResult.fail(UnsupportedTypeErr.makeFor(
                name, f"Cannot reflectively serialize sealed class {name}. Please register an adapter."))

        try:
            ctor = Ctor.primary(raw)
            if ctor is None:
                return InspectResult.none(f"no primary constructor for {name}")
            for p in ctor.params():
                if p.kind() == inspect.Parameter.POSITIONAL_ONLY:
                    return InspectResult.fail(UnsupportedTypeErr.makeFor(
                        name, f"Cannot bind positional-only parameter '{p.name()}' of {ctor.qname()}"))
            table = Inspector._bind(type_, raw, name, ctor, registry)
        except ConfigErr as e:
            return InspectResult.fail(e)

        if Inspector.log.isDebug():
            Inspector.log.debug(f"Inspected {table.toStr()}")
        return InspectResult.ok(table)

    @staticmethod
    def _bind(type_, raw, name, ctor, registry):
        type_vars = Types.typeVarMap(type_)
        by_name = {}

        for prop in Prop.list(raw):
            param = ctor.param(prop.name())

            if prop.isTransient():
                if param is not None and not param.hasDefault():
                    raise MissingDefaultErr.makeFor(
                        name, f"No default value for transient constructor parameter "
                              f"'{param.name()}' of {name}")
                continue

            if param is not None and param.type() is not None \
                    and not Types.equals(param.type(), prop.type()):
                raise TypeMismatchErr.makeFor(
                    name, f"'{prop.name()}' has a constructor parameter of type "
                          f"{Types.name(param.type())} but a property of type "
                          f"{Types.name(prop.type())}.")

            if prop.isReadonly() and param is None:
                continue

            metadata = prop.facets()
            json_name = prop.jsonName()
            if param is not None:
                metadata += param.facets()
                if json_name is None:
                    json_name = param.jsonName()
            if json_name is None:
                json_name = prop.name()

            prop_type = Types.resolve(prop.type(), type_vars)
            adapter = registry.adapter(prop_type, Facet.qualifiers(metadata), prop.name())

            by_name[prop.name()] = Binding(
                prop.name(), json_name, adapter, prop, param,
                param.index() if param is not None else -1, prop_type)

        bindings = []
        for param in ctor.params():
            binding = by_name.pop(param.name(), None)
            if binding is None and not param.hasDefault():
                raise NoSourceErr.makeFor(
                    name, f"No property for required constructor parameter "
                          f"'{param.name()}' of {name}")
            bindings.append(binding)

        index = len(bindings)
        for binding in by_name.values():
            bindings.append(binding.withSlotIndex(index))
            index += 1

        seen = {}
        for binding in bindings:
            if binding is None:
                continue
            other = seen.get(binding.jsonName())
            if other is not None:
                raise UnsupportedTypeErr.makeFor(
                    name, f"Conflicting properties '{other.name()}' and '{binding.name()}' "
                          f"both use JSON name '{binding.jsonName()}' in {name}")
            seen[binding.jsonName()] = binding

        return BindingTable(type_, ctor, bindings)
