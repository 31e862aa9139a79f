#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Inspector import Inspector
from .RecordAdapter import RecordAdapter


class RecordAdapterFactory:
    """Factory binding record classes reflectively.

    Last in the registry's chain: types another factory claims, including
    those with a generated adapter, never reach it.
    """

    def create(self, type_, annotations, registry):
        result = Inspector.inspect(type_, annotations, registry)
        if result.isNone():
            return None
        return RecordAdapter(result.get()).nullSafe()
