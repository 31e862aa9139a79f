#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import inspect

from .Facet import Facet
from .Types import Types


class Param:
    """Constructor parameter metadata for reflection.

    Represents a single parameter of a primary constructor, including:
    - name: Parameter name
    - type: Declared type hint (Annotated metadata stripped)
    - index: Position in the constructor's parameter list
    - hasDefault: Whether the parameter has a default value
    - facets: Metadata attached with typing.Annotated
    """

    def __init__(self, name, param_type, index, has_default=False, kind=None, facets=None):
        """Create a Param object.

        Args:
            name: Parameter name
            param_type: Type hint, or None when the parameter is unannotated
            index: Zero based position in the constructor
            has_default: Whether this parameter has a default value
            kind: inspect.Parameter kind
            facets: List of metadata objects
        """
        self._name = name
        self._type = param_type
        self._index = index
        self._has_default = has_default
        self._kind = kind if kind is not None else inspect.Parameter.POSITIONAL_OR_KEYWORD
        self._facets = list(facets) if facets else []

    @staticmethod
    def fromInspect(p, index, hint=inspect.Parameter.empty):
        """Build a Param from an inspect.Parameter.

        Args:
            p: inspect.Parameter
            index: Position of p in the signature
            hint: Resolved annotation; defaults to p.annotation
        """
        if hint is inspect.Parameter.empty:
            hint = p.annotation
        if hint is inspect.Parameter.empty:
            param_type = None
            facets = []
        else:
            param_type = Types.strip(hint)
            facets = Types.metadata(hint)
        return Param(p.name, param_type, index,
                     p.default is not inspect.Parameter.empty, p.kind, facets)

    def name(self):
        return self._name

    def type(self):
        """Get declared type, None if the parameter is unannotated."""
        return self._type

    def index(self):
        return self._index

    def kind(self):
        return self._kind

    def hasDefault(self):
        """Check if parameter has a default value (is optional)."""
        return self._has_default

    def isKeywordOnly(self):
        return self._kind == inspect.Parameter.KEYWORD_ONLY

    def facets(self):
        return list(self._facets)

    def jsonName(self):
        return Facet.jsonName(self._facets)

    def toStr(self):
        sig = Types.name(self._type) if self._type is not None else "?"
        return f"{sig} {self._name}"

    def __repr__(self):
        return f"Param({self._name}, {self._type!r}, index={self._index})"
