#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import dataclasses
import inspect
import typing

from .Facet import Facet
from .Types import Types


class PropFlags:
    """Property flag constants."""
    Field = 0x0001       # annotated attribute or dataclass field
    Property = 0x0002    # property descriptor
    Readonly = 0x0004
    Transient = 0x0008


class Prop:
    """Property reflection - an externally visible attribute of a class.

    Props are discovered by ``Prop.list()`` from:
    1. dataclass fields (readonly when the dataclass is frozen)
    2. public annotated attributes (readonly when Final or on a NamedTuple)
    3. property descriptors (readonly when there is no setter)
    """

    def __init__(self, parent, name, type_, flags=0, facets=None):
        """Create a Prop reflection object.

        Args:
            parent: Declaring class
            name: Attribute name
            type_: Type hint with Annotated metadata stripped
            flags: PropFlags values
            facets: List of metadata objects
        """
        self._parent = parent
        self._name = name
        self._type = type_
        self._flags = flags
        self._facets = list(facets) if facets else []
        if Facet.isTransient(self._facets):
            self._flags |= PropFlags.Transient

    def parent(self):
        return self._parent

    def name(self):
        return self._name

    def qname(self):
        return f"{self._parent.__qualname__}.{self._name}"

    def type(self):
        return self._type

    def flags(self):
        return self._flags

    def facets(self):
        return list(self._facets)

    def jsonName(self):
        return Facet.jsonName(self._facets)

    def isField(self):
        return (self._flags & PropFlags.Field) != 0

    def isProperty(self):
        return (self._flags & PropFlags.Property) != 0

    def isReadonly(self):
        return (self._flags & PropFlags.Readonly) != 0

    def isTransient(self):
        return (self._flags & PropFlags.Transient) != 0

    def get(self, obj):
        """Get property value from obj."""
        return getattr(obj, self._name)

    def set(self, obj, val):
        """Set property value on obj.

        Args:
            obj: Instance to modify
            val: New value
        """
        if self.isReadonly():
            from .Err import UnsupportedErr
            raise UnsupportedErr.make(f"Cannot set readonly property {self.qname()}")
        setattr(obj, self._name, val)

    def __repr__(self):
        return f"Prop({self.qname()}, {self._type!r})"

    @staticmethod
    def list(cls):
        """List the externally visible properties of cls in declaration order.

        Base class properties come first. Names starting with an
        underscore, ClassVars and InitVars are never properties.
        """
        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except NameError as e:
            from .Err import UnsupportedTypeErr
            raise UnsupportedTypeErr(
                f"Cannot resolve type hints of {cls.__qualname__}: {e}", e, Types.name(cls))

        props = {}
        if dataclasses.is_dataclass(cls):
            frozen = cls.__dataclass_params__.frozen
            for f in dataclasses.fields(cls):
                if f.name.startswith("_"):
                    continue
                hint = hints.get(f.name, f.type)
                flags = PropFlags.Field | (PropFlags.Readonly if frozen else 0)
                facets = Types.metadata(hint) + Facet.fromFieldMetadata(f.metadata)
                props[f.name] = Prop(cls, f.name, Types.strip(hint), flags, facets)
        else:
            tuple_fields = issubclass(cls, tuple)
            for name, hint in hints.items():
                if name.startswith("_") or name in props:
                    continue
                if isinstance(inspect.getattr_static(cls, name, None), property):
                    continue
                facets = Types.metadata(hint)
                hint = Types.strip(hint)
                origin = typing.get_origin(hint)
                if origin is typing.ClassVar or hint is typing.ClassVar:
                    continue
                flags = PropFlags.Field
                if origin is typing.Final or hint is typing.Final:
                    flags |= PropFlags.Readonly
                    args = typing.get_args(hint)
                    hint = Types.strip(args[0]) if args else typing.Any
                if tuple_fields:
                    flags |= PropFlags.Readonly
                props[name] = Prop(cls, name, hint, flags, facets)

        for klass in reversed(cls.__mro__):
            for name in vars(klass):
                if name.startswith("_") or name in props:
                    continue
                attr = inspect.getattr_static(cls, name, None)
                if not isinstance(attr, property) or attr.fget is None:
                    continue
                try:
                    ret = typing.get_type_hints(attr.fget, include_extras=True).get("return", typing.Any)
                except NameError as e:
                    from .Err import UnsupportedTypeErr
                    raise UnsupportedTypeErr(
                        f"Cannot resolve return type of property {cls.__qualname__}.{name}: {e}",
                        e, Types.name(cls))
                flags = PropFlags.Property
                if attr.fset is None:
                    flags |= PropFlags.Readonly
                props[name] = Prop(cls, name, Types.strip(ret), flags, Types.metadata(ret))

        return list(props.values())
