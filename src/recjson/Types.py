#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
Types provides helpers over Python type hints: nullability, raw types,
structural equality and generic type variable resolution.
"""

import collections.abc
import types
import typing

NoneType = type(None)

# Modules whose classes are never bound reflectively
_PLATFORM_MODULES = frozenset([
    "builtins",
    "abc",
    "collections",
    "collections.abc",
    "dataclasses",
    "datetime",
    "decimal",
    "enum",
    "fractions",
    "pathlib",
    "types",
    "typing",
    "typing_extensions",
    "uuid",
])


class Types:
    """Static helpers for working with type hints."""

    @staticmethod
    def isUnion(t):
        origin = typing.get_origin(t)
        return origin is typing.Union or origin is types.UnionType

    @staticmethod
    def isAnnotated(t):
        return typing.get_origin(t) is typing.Annotated

    @staticmethod
    def strip(t):
        """Remove Annotated wrappers, keeping the underlying hint."""
        while Types.isAnnotated(t):
            t = t.__origin__
        return t

    @staticmethod
    def metadata(t):
        """Get Annotated metadata of t as a list (outermost last)."""
        result = []
        while Types.isAnnotated(t):
            result[:0] = list(t.__metadata__)
            t = t.__origin__
        return result

    @staticmethod
    def isNullable(t):
        """Return True if None is an acceptable value for hint t."""
        t = Types.strip(t)
        if t is typing.Any or t is None or t is NoneType or t is object:
            return True
        if isinstance(t, typing.TypeVar):
            bound = t.__bound__
            return bound is None or Types.isNullable(bound)
        if Types.isUnion(t):
            return any(Types.isNullable(a) for a in typing.get_args(t))
        return False

    @staticmethod
    def nonNullable(t):
        """Drop None from a union hint; Optional[int] -> int."""
        t = Types.strip(t)
        if not Types.isUnion(t):
            return t
        rest = [a for a in typing.get_args(t) if a is not NoneType]
        if len(rest) == 1:
            return rest[0]
        return typing.Union[tuple(rest)]

    @staticmethod
    def rawType(t):
        """Get the class behind a hint; list[int] -> list, Box[T] -> Box."""
        t = Types.strip(t)
        origin = typing.get_origin(t)
        return origin if origin is not None else t

    @staticmethod
    def name(t):
        """Readable type name for diagnostics."""
        t = Types.strip(t)
        if isinstance(t, type) and typing.get_origin(t) is None:
            if t.__module__ == "builtins":
                return t.__qualname__
            return f"{t.__module__}.{t.__qualname__}"
        return repr(t).replace("typing.", "")

    @staticmethod
    def equals(a, b):
        """Structural equality ignoring Annotated metadata and union order."""
        a = Types.strip(a)
        b = Types.strip(b)
        if a is b:
            return True
        if Types.isUnion(a) or Types.isUnion(b):
            if not (Types.isUnion(a) and Types.isUnion(b)):
                return False
            args_a = typing.get_args(a)
            args_b = typing.get_args(b)
            if len(args_a) != len(args_b):
                return False
            return all(any(Types.equals(x, y) for y in args_b) for x in args_a)
        origin_a = typing.get_origin(a)
        origin_b = typing.get_origin(b)
        if origin_a is not None or origin_b is not None:
            if origin_a is not origin_b:
                return False
            args_a = typing.get_args(a)
            args_b = typing.get_args(b)
            return len(args_a) == len(args_b) and all(
                Types.equals(x, y) for x, y in zip(args_a, args_b))
        return a == b

    @staticmethod
    def isPlatformType(cls):
        """Classes owned by the standard library are never bound reflectively."""
        module = getattr(cls, "__module__", None) or ""
        return module in _PLATFORM_MODULES or module.startswith("_")

    @staticmethod
    def isInterface(cls):
        return bool(getattr(cls, "_is_protocol", False))

    @staticmethod
    def isLocal(cls):
        return "<locals>" in getattr(cls, "__qualname__", "")

    @staticmethod
    def typeVarMap(t):
        """Map the type variables of a generic class to the arguments of t.

        ``Types.typeVarMap(Box[int])`` returns ``{T: int}`` for
        ``class Box(Generic[T])``. A bare class maps nothing.
        """
        t = Types.strip(t)
        origin = typing.get_origin(t)
        if origin is None:
            return {}
        params = getattr(origin, "__parameters__", ())
        args = typing.get_args(t)
        if len(params) != len(args):
            return {}
        return dict(zip(params, args))

    @staticmethod
    def resolve(t, type_vars):
        """Substitute type variables in hint t using type_vars.

        Unknown type variables are left in place; the registry binds them
        as ``Any`` (or their bound).
        """
        if not type_vars:
            return t
        if isinstance(t, typing.TypeVar):
            return type_vars.get(t, t)

        origin = typing.get_origin(t)
        args = typing.get_args(t)
        if origin is None or not args:
            return t

        if origin is typing.Annotated:
            inner = Types.resolve(t.__origin__, type_vars)
            return typing.Annotated[(inner, *t.__metadata__)]

        resolved = tuple(Types.resolve(a, type_vars) for a in args)
        if resolved == args:
            return t
        if Types.isUnion(t):
            return typing.Union[resolved]
        if origin is collections.abc.Callable:
            return t
        if len(resolved) == 1:
            return origin[resolved[0]]
        return origin[resolved]
