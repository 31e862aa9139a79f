#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
Registry looks up and caches adapters by trying an ordered chain of
adapter factories.
"""

import threading

from .Err import ArgErr
from .Facet import Facet
from .JsonAdapter import JsonAdapter
from .Log import Log
from .Types import Types


class Registry:
    """Memoizing adapter lookup over an ordered factory chain.

    A factory is any object with ``create(type_, annotations, registry)``
    returning a JsonAdapter or None. The first factory to return an
    adapter wins. User factories come first, followed by the built-ins:
    StdAdapters, GeneratedAdapterFactory and RecordAdapterFactory.
    """

    log = Log.get("recjson")

    def __init__(self, factories=None):
        from .GeneratedAdapterFactory import GeneratedAdapterFactory
        from .RecordAdapterFactory import RecordAdapterFactory
        from .StdAdapters import StdAdapters

        self._factories = tuple(factories or ()) + (
            StdAdapters(),
            GeneratedAdapterFactory(),
            RecordAdapterFactory(),
        )
        self._cache = {}
        self._pending = {}
        self._lock = threading.RLock()

    @staticmethod
    def make(factories=None):
        return Registry(factories)

    @staticmethod
    def builder():
        return RegistryBuilder()

    def factories(self):
        return self._factories

    def adapter(self, type_, annotations=None, fieldName=None):
        """Get the adapter for type_.

        Args:
            type_: Type hint; Annotated metadata is split off and its
                qualifier facets added to annotations
            annotations: Iterable of JsonQualifier facets
            fieldName: Property name, used in error messages

        Returns:
            JsonAdapter

        Raises:
            ArgErr: if no factory can handle the type
        """
        quals = list(annotations or ())
        quals.extend(Facet.qualifiers(Types.metadata(type_)))
        type_ = Types.strip(type_)
        key = (type_, Facet.qualifiers(quals))

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

            # Re-entrant lookup for a type under construction
            pending = self._pending.get(key)
            if pending is not None:
                return pending

            deferred = _DeferredAdapter(type_)
            self._pending[key] = deferred
            try:
                result = self._create(type_, key[1], fieldName)
                deferred.ready(result)
                self._cache[key] = result
            finally:
                del self._pending[key]
            return result

    def _create(self, type_, annotations, fieldName):
        for factory in self._factories:
            result = factory.create(type_, annotations, self)
            if result is not None:
                if self.log.isDebug():
                    self.log.debug(f"Created {result.toStr()} for {Types.name(type_)}")
                return result

        msg = f"No JsonAdapter for {Types.name(type_)}"
        if annotations:
            msg += f" annotated {list(annotations)}"
        if fieldName is not None:
            msg += f" for field '{fieldName}'"
        raise ArgErr.make(msg)

    def __repr__(self):
        return f"Registry({len(self._factories)} factories)"


class _DeferredAdapter(JsonAdapter):
    """Stand-in returned for a type whose adapter is still being built.

    Lets self-referential types resolve their own adapter.
    """

    def __init__(self, type_):
        self._type = type_
        self._delegate = None

    def ready(self, delegate):
        self._delegate = delegate

    def _require(self):
        if self._delegate is None:
            from .Err import UnsupportedErr
            raise UnsupportedErr.make(f"Adapter for {Types.name(self._type)} is not ready")
        return self._delegate

    def fromJson(self, reader):
        return self._require().fromJson(reader)

    def toJson(self, writer, value):
        self._require().toJson(writer, value)

    def nullSafe(self):
        # Delegates are already null safe once ready
        return self

    def toStr(self):
        return f"Deferred({Types.name(self._type)})"


class _TypeFactory:
    """Factory answering one exact (type, qualifiers) request."""

    def __init__(self, type_, qualifiers, adapter):
        self._type = type_
        self._qualifiers = Facet.qualifiers(qualifiers)
        self._adapter = adapter

    def create(self, type_, annotations, registry):
        if Types.equals(type_, self._type) and Facet.qualifiers(annotations) == self._qualifiers:
            return self._adapter
        return None


class RegistryBuilder:
    """Assembles the user portion of a registry's factory chain."""

    def __init__(self):
        self._factories = []

    def add(self, type_, adapter, qualifier=None):
        """Register adapter for exactly type_ (and qualifier, if given)."""
        qualifiers = [qualifier] if qualifier is not None else []
        self._factories.append(_TypeFactory(type_, qualifiers, adapter))
        return self

    def addFactory(self, factory):
        self._factories.append(factory)
        return self

    def build(self):
        return Registry(self._factories)
