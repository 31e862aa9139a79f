#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import sys
import types
import typing

from .Err import UnsupportedTypeErr
from .Param import Param
from .Types import Types


class Ctor:
    """Primary constructor reflection.

    Wraps the signature ``inspect.signature(cls)`` reports for a class,
    which is ``__init__`` for ordinary classes and dataclasses and
    ``__new__`` for NamedTuples.
    """

    def __init__(self, parent, params):
        """Create a Ctor reflection object.

        Args:
            parent: Class this constructor builds
            params: List of Param in declaration order
        """
        self._parent = parent
        self._params = tuple(params)
        self._by_name = {p.name(): p for p in self._params}

    @staticmethod
    def primary(cls):
        """Find the primary constructor of cls.

        Returns:
            Ctor, or None if cls has no single bindable constructor
            (no signature available, or it takes *args / **kwargs)
        """
        try:
            sig = inspect.signature(cls)
        except (TypeError, ValueError):
            return None

        hints = Ctor._hints(cls, sig)
        params = []
        for index, p in enumerate(sig.parameters.values()):
            if p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                return None
            params.append(Param.fromInspect(p, index, hints.get(p.name, inspect.Parameter.empty)))
        return Ctor(cls, params)

    @staticmethod
    def _hints(cls, sig):
        """Evaluate string and forward reference annotations of sig in cls's module."""
        annotations = {p.name: p.annotation for p in sig.parameters.values()
                       if p.annotation is not inspect.Parameter.empty}
        module = sys.modules.get(cls.__module__)
        globalns = vars(module) if module is not None else {}
        localns = dict(vars(cls))
        localns.setdefault(cls.__name__, cls)
        holder = types.SimpleNamespace(__annotations__=annotations)
        try:
            return typing.get_type_hints(holder, globalns, localns, include_extras=True)
        except NameError as e:
            raise UnsupportedTypeErr(
                f"Cannot resolve constructor annotations of {cls.__qualname__}: {e}",
                e, Types.name(cls)) from e

    def parent(self):
        return self._parent

    def qname(self):
        return f"{Types.name(self._parent)}.__init__"

    def params(self):
        return self._params

    def param(self, name):
        """Get parameter by name, or None."""
        return self._by_name.get(name)

    def arity(self):
        """Number of parameters."""
        return len(self._params)

    def call(self, args):
        """Call the constructor with a value for every parameter.

        Args:
            args: Sequence of arity values in parameter order
        """
        positional = []
        keywords = {}
        for p, val in zip(self._params, args):
            if p.isKeywordOnly():
                keywords[p.name()] = val
            else:
                positional.append(val)
        return self._parent(*positional, **keywords)

    def callBy(self, slots):
        """Call the constructor passing only the parameters present in slots.

        Absent parameters fall back to their declared defaults.

        Args:
            slots: SlotStore indexed by parameter position
        """
        keywords = {}
        for p in self._params:
            if slots.contains(p.index()):
                keywords[p.name()] = slots.get(p.index())
        return self._parent(**keywords)

    def toStr(self):
        return f"{self.qname()}({', '.join(p.toStr() for p in self._params)})"

    def __repr__(self):
        return f"Ctor({self.toStr()})"
