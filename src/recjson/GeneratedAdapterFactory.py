#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect
import sys
import typing

from .JsonAdapter import JsonAdapter
from .Log import Log
from .Types import Types


class GeneratedAdapterFactory:
    """Finds hand-written or generated adapters by naming convention.

    For a class ``Foo`` defined in module ``m``, an adapter class named
    ``FooJsonAdapter`` in ``m`` takes precedence over reflective binding.
    It is constructed as ``FooJsonAdapter(registry, typeArgs)`` when its
    constructor takes two parameters, else ``FooJsonAdapter(registry)``,
    else ``FooJsonAdapter()``.
    """

    SUFFIX = "JsonAdapter"

    log = Log.get("recjson")

    def create(self, type_, annotations, registry):
        if annotations:
            return None
        raw = Types.rawType(type_)
        adapter_cls = GeneratedAdapterFactory.find(raw)
        if adapter_cls is None:
            return None

        self.log.debug(f"Using {adapter_cls.__qualname__} for {Types.name(raw)}")
        try:
            arity = len(inspect.signature(adapter_cls).parameters)
        except (TypeError, ValueError):
            arity = 0
        if arity >= 2:
            adapter = adapter_cls(registry, typing.get_args(Types.strip(type_)))
        elif arity == 1:
            adapter = adapter_cls(registry)
        else:
            adapter = adapter_cls()
        return adapter.nullSafe()

    @staticmethod
    def find(cls):
        """Get the generated adapter class for cls, or None."""
        if not isinstance(cls, type):
            return None
        module = sys.modules.get(getattr(cls, "__module__", None) or "")
        if module is None:
            return None
        name = cls.__qualname__.replace(".", "_") + GeneratedAdapterFactory.SUFFIX
        found = getattr(module, name, None)
        if isinstance(found, type) and issubclass(found, JsonAdapter):
            return found
        return None
